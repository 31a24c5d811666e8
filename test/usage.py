"""
Usage module tests (column writer and composed help text).

Scope
- Writer: display-width alignment, prefix/separator handling, row flushing.
- compose(): section layout, parent flags, hints and custom prefixes.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from clitree import App, Command, Flag, Target
from clitree.usage import Writer


class TestWriter(TestCase):
    """Behavioral tests for the column writer."""

    def testColumnsAreAligned(self):
        writer = Writer()
        writer.cols("a", "x")
        writer.cols("abc", "y")
        writer.done_cols("  ", " | ")
        self.assertEqual(writer.buf, "  a   | x\n  abc | y\n")

    def testWideCharactersCountTwice(self):
        writer = Writer()
        writer.cols("日本", "a")
        writer.cols("x", "b")
        writer.done_cols("", " ")
        self.assertEqual(writer.buf, "日本 a\nx    b\n")

    def testWidthUsesLastLine(self):
        self.assertEqual(Writer.width("ab\ncd e"), 4)
        self.assertEqual(Writer.width(""), 0)

    def testEmptyRowIsABlankLine(self):
        writer = Writer()
        writer.cols("a", "b")
        writer.cols()
        writer.done_cols()
        self.assertEqual(writer.buf, "ab\n\n")

    def testTrailingSpaceIsTrimmed(self):
        writer = Writer()
        writer.cols("name", "")
        writer.done_cols("    ", "  ")
        self.assertEqual(writer.buf, "    name\n")

    def testRowsAreFlushed(self):
        writer = Writer()
        writer.cols("a")
        writer.done_cols()
        writer.done_cols()
        self.assertEqual(writer.rows, [])
        self.assertEqual(writer.buf, "a\n")

    def testLineAndPut(self):
        writer = Writer()
        writer.put("a")
        writer.line("b")
        writer.line()
        self.assertEqual(writer.buf, "ab\n\n")

    def testCellsMustBeStrings(self):
        with self.assertRaises(TypeError):
            Writer().cols("a", 1)


class TestCompose(TestCase):
    """Behavioral tests for the rendered usage text."""

    def setUp(self):
        self.app = App("tool", "inspect files")
        self.app.flag(Target.bool(), "verbose", "v", "show detailed info")

        @self.app.subcommand("info", "show info")
        def info(command):
            command.flag(Target.bool(), "detailed", "d", "more")
            command.argument(Target.text(), "FILE", "file to inspect")

    def testRootUsage(self):
        self.assertEqual(
            self.app.usage(),
            "inspect files\n"
            "\n"
            "syntax:\n"
            "    tool <command> [--verbose]\n"
            "\n"
            "commands:\n"
            "    info  show info\n"
            "\n"
            "flags:\n"
            "    --verbose -v  show detailed info\n"
            "\n"
            "run 'tool <command> --help' for more information on a command\n"
        )

    def testSubcommandUsageListsParentFlags(self):
        outcome = self.app.execute(["tool", "info", "--help"])
        self.assertEqual(
            outcome.text,
            "show info\n"
            "\n"
            "syntax:\n"
            "    tool info [--detailed] FILE\n"
            "\n"
            "flags:\n"
            "    --detailed -d  more\n"
            "\n"
            "parent flags (tool):\n"
            "    --verbose -v  show detailed info\n"
            "\n"
            "arguments:\n"
            "    FILE  file to inspect\n"
        )

    def testHelpCommandHint(self):
        app = App("tool", help_command="help", help_flag=None)
        app.subcommand("info", builder=lambda command: None)
        self.assertTrue(app.usage().endswith(
            "run 'tool help <command>' for more information on a command\n"
        ))

    def testNoHintWithoutHelpTriggers(self):
        app = App("tool", help_flag=None)
        app.subcommand("info", builder=lambda command: None)
        self.assertNotIn("for more information", app.usage())

    def testCustomPrefix(self):
        command = Command("test", "usage header")
        command.argument(Target.text(), "FILE")
        self.assertEqual(
            command.usage("usage: test"),
            "usage header\n"
            "\n"
            "syntax:\n"
            "    usage: test FILE\n"
            "\n"
            "arguments:\n"
            "    FILE\n"
        )

    def testGroupSyntax(self):
        command = Command("tool")
        command.flag(Target.text(), "token", sample="TOKEN")
        command.group(Flag(Target.bool(), "json"), Flag(Target.bool(), "yaml"), exclusive=True)
        command.argument(Target.text_list(), "REST")
        self.assertIn("    tool --token=<TOKEN> ([--json] | [--yaml]) [REST...]\n", command.usage())

    def testSubcommandWithoutDescription(self):
        app = App("tool")
        app.subcommand("info", builder=lambda command: None)
        self.assertIn("commands:\n    info\n", app.usage())


if __name__ == "__main__":
    unittest.main()
