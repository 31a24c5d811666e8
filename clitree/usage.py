"""
clitree usage rendering.

- Writer: line buffer plus a column table. Cell widths are display widths
  (rich.cells.cell_len), so wide characters count as two cells; a cell with
  embedded newlines is measured by its last line.
- compose(command, prefix): the usage text shown when help is requested.

Layout
    <descr>

    syntax:
        <prefix> <command> [--verbose] FILE

    commands:
        info  show information

    flags:
        --verbose -v  show detailed info

    parent flags (tool):
        --color  colorize output

    arguments:
        FILE  input file

    run 'tool <command> --help' for more information on a command
"""
from rich.cells import cell_len

from .utils import *


class Writer:
    """
    Text-layout collaborator: raw lines go straight to `buf`, table rows are
    collected with cols() and flushed, aligned, by done_cols().
    """

    def __init__(self):
        self.buf = ""
        self.rows = []

    @staticmethod
    def width(text, /):
        return cell_len(text.rpartition("\n")[2])

    def put(self, text, /):
        self.buf += text

    def line(self, text="", /):
        self.buf += text + "\n"

    def cols(self, *cells):
        if not all(isinstance(cell, str) for cell in cells):
            raise TypeError("cols() arguments must be strings")
        self.rows.append(list(cells))

    def done_cols(self, prefix="", colsep=""):
        """
        Flush the collected rows: every row starts with `prefix`, cells are
        padded to the widest cell of their column and separated by `colsep`.
        """
        widths = []
        for row in self.rows:
            for index, cell in enumerate(row):
                if index == len(widths):
                    widths.append(0)
                widths[index] = max(widths[index], self.width(cell))

        for row in self.rows:
            if row:
                text = prefix
                for index, cell in enumerate(row[:-1]):
                    text += cell + " " * (widths[index] - self.width(cell)) + colsep
                self.put((text + row[-1]).rstrip())
            self.put("\n")
        self.rows = []


def _section(writer, title):
    writer.line("\n" + title if writer.buf else title)


def _hint(command):
    root = command.root
    route = " ".join(step.name for step in command.path)
    if help_flag := getattr(root, "help_flag", None):
        return "run '%s <command> %s' for more information on a command" % (route, help_flag)
    if help_command := getattr(root, "help_command", None):
        return "run '%s' for more information on a command" % " ".join(
            [root.name, help_command, *(step.name for step in command.path[1:]), "<command>"]
        )
    return None


def compose(command, prefix=Unset, /):
    """
    Render the usage text of `command`.

    `prefix` starts the syntax line and defaults to the command route
    ("tool info"). Sections without content are left out.
    """
    writer = Writer()
    if command.descr:
        writer.line(str(command.descr))

    parts = [coalesce(prefix, " ".join(step.name for step in command.path))]
    if command.subcommands:
        parts.append("<command>")
    parts.append(command.flags.syntax())
    parts.extend(argument.syntax() for argument in command.arguments)
    _section(writer, "syntax:")
    writer.line("    " + " ".join(filter(None, parts)))

    if subcommands := command.subcommands:
        _section(writer, "commands:")
        for subcommand in subcommands.values():
            writer.cols(subcommand.name, str(subcommand.descr or ""))
        writer.done_cols("    ", "  ")

    if flags := list(command.flags.flags()):
        _section(writer, "flags:")
        for flag in flags:
            writer.cols(flag.spellings(), str(flag.descr or ""))
        writer.done_cols("    ", "  ")

    for ancestor in reversed(command.path[:-1]):
        if flags := list(ancestor.flags.flags()):
            _section(writer, "parent flags (%s):" % " ".join(step.name for step in ancestor.path))
            for flag in flags:
                writer.cols(flag.spellings(), str(flag.descr or ""))
            writer.done_cols("    ", "  ")

    if arguments := command.arguments:
        _section(writer, "arguments:")
        for argument in arguments:
            writer.cols(argument.name, str(argument.descr or ""))
        writer.done_cols("    ", "  ")

    if subcommands and (hint := _hint(command)):
        _section(writer, hint)

    return writer.buf


__all__ = (
    "Writer",
    "compose",
)
