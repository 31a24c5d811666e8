"""
clitree faults (errors and signals) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing failure, grouped
  by domain so logs and docs stay searchable.
- CommandException: base type carrying a message plus options; renders itself
  with rich in a lowercased, position-first, actionable way.
- HelpRequested: the help signal. Not a failure: the app turns it into an
  Outcome and the shell runner prints it to stdout.
- trigger(): central entry point to surface a fault (raise, or print and exit
  in shell mode).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages ("at second position") so users learn by trying.
- Short titles, one-sentence bodies, a single clear hint.
- Styling configurable via __styles__ in __main__.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - flags (1111x)
      • UNSUPPORTED_FLAG, DUPLICATE_FLAG, MISSING_PARAMETER,
        INVALID_BOOLEAN_VALUE, UNSUPPORTED_FOLDING
    - flag groups (1112x)
      • MISSING_REQUIRED_FLAGS, EXCLUSIVITY_VIOLATION
    - positional arguments (1113x)
      • MISSING_ARGUMENT, UNEXPECTED_ARGUMENT
    - declarations, programmer errors (1130x)
      • INVALID_ARGUMENT_DECLARATION
    - signals, not failures (1310x)
      • HELP_REQUESTED
    """
    # --- flag errors ---
    UNSUPPORTED_FLAG             = 11111
    DUPLICATE_FLAG               = 11112
    MISSING_PARAMETER            = 11113
    INVALID_BOOLEAN_VALUE        = 11114
    UNSUPPORTED_FOLDING          = 11115

    # --- flag group errors ---
    MISSING_REQUIRED_FLAGS       = 11121
    EXCLUSIVITY_VIOLATION        = 11122

    # --- positional argument errors ---
    MISSING_ARGUMENT             = 11131
    UNEXPECTED_ARGUMENT          = 11132

    # --- declaration errors ---
    INVALID_ARGUMENT_DECLARATION = 11301

    # --- signals ---
    HELP_REQUESTED               = 13101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    Base of every parse, validation and declaration failure.

    Options (all optional, read with defaults)
    - title, code, hint, docs: rendering material.
    - input, index, route, flags, argument: context of the failure.
    - prog, shell, fancy, colorful: runtime options merged in by trigger().
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*((message,) if message else ()))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def hint(self):
        return self.options.get("hint")

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
            "docs": "underline #00E5FF dim",
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "")), styler("prog-name"))
        code = self.code.normalize() if isinstance(self.code, FaultCode) else self.code

        header = Text.assemble(
            "[ ",
            prog,
            " | " if prog else "",
            text(code, styler("code")),
            " | " if code else "",
            text(str(self.options.get("title", "error")).title(), styler("error-title")),
            " ]"
        )
        body = [text(self.message, styler("error-message"))]
        if self.hint:
            body.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.hint, styler("hint"))))
        if docs := self.options.get("docs"):
            body.append(text(docs, styler("docs")))

        if fancy:
            return Panel(Group(*body), title=header, title_align="left", width=console.width - 4)

        return Group(header, *body)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnsupportedFlagError(CommandException): ...
class DuplicateFlagError(CommandException): ...
class MissingParameterError(CommandException): ...
class InvalidBooleanValueError(CommandException): ...
class UnsupportedFoldingError(CommandException): ...
class MissingRequiredFlagsError(CommandException): ...
class ExclusivityViolationError(CommandException): ...
class MissingArgumentError(CommandException): ...
class UnexpectedArgumentError(CommandException): ...
class InvalidArgumentDeclarationError(CommandException): ...


class HelpRequested(Exception):
    """
    Help signal carrying the rendered usage text of the reached command.

    It unwinds the dispatch exactly like a fault, but it is not one: App.execute
    converts it into an Outcome with Status.HELP.
    """
    code = FaultCode.HELP_REQUESTED

    def __init__(self, text, /, **options):
        if not isinstance(text, str):
            raise TypeError("help text must be a string")
        super().__init__(text)
        self.text = text
        self.options = MappingProxyType(options)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        Console().print(self.text, markup=False, highlight=False, emoji=False, soft_wrap=True, end="")

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.text, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods.
    - options are merged into the fault via __replace__(**options) first.
    - shell mode renders (faults to stderr then exit 1, help to stdout);
      otherwise the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ keyed by
    FaultCode; returns None when there is no entry.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "CommandException",
    "UnsupportedFlagError",
    "DuplicateFlagError",
    "MissingParameterError",
    "InvalidBooleanValueError",
    "UnsupportedFoldingError",
    "MissingRequiredFlagsError",
    "ExclusivityViolationError",
    "MissingArgumentError",
    "UnexpectedArgumentError",
    "InvalidArgumentDeclarationError",
    "HelpRequested",
    "FaultCode",
    "trigger",
    "getdoc",
)
