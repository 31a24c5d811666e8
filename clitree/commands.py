"""
clitree command layer: declare, dispatch and run command trees.

What this module provides
- Command: a node of the command tree.
  • Builders: flag(), group(), argument(), subcommand(), action().
  • exec(tokens): subcommand probe, token scan, validation over the ancestor
    chain, positional distribution, then the bound action.
  • usage(): the rendered usage text (see clitree.usage).
- App: the root command of a program.
  • Captures the executable token, recognizes the help command/flag and turns
    the help signal into an Outcome.
  • __invoke__/invoke(): shell-style runner (help to stdout, faults rendered
    with rich to stderr and exit status 1).

Core ideas
- Subcommands are declared as (name, descr, builder). A fresh Command is built
  for each match, populated by its builder exactly once, and detached from its
  parent when the dispatch returns.
- Flags are looked up in the current command first, then in every ancestor
  up to the root; all groups on that chain are validated after the scan.
- The first failure aborts the whole call; targets already written keep
  their values.
- Messages are position-first ("at third position") with one actionable hint.

Quick start
    from clitree import App, Target, invoke

    app = App("tool", "inspect files", shell=True)
    verbose = app.flag(Target.bool(), "verbose", "v", "show detailed info")

    @app.subcommand("info", "show information about a file")
    def info(command):
        path = Target.text()
        command.argument(path, "FILE", "file to inspect")
        command.action(lambda: print(path.value, verbose.target.value))

    invoke(app)
"""
import difflib
import enum
import functools
import logging
import operator
import os
import re
import shlex
import sys
from collections import deque, namedtuple
from collections.abc import Iterable

from rich.text import Text

from .arguments import *
from .faults import *
from .usage import compose
from .utils import *

logger = logging.getLogger(__name__)


Subcommand = namedtuple("Subcommand", ("name", "descr", "builder"))


class Status(enum.Enum):
    """
    How an App run ended. Failures are raised, never returned.
    """
    EXECUTED = "executed"
    HELP = "help"


Outcome = namedtuple("Outcome", ("status", "text"), defaults=("",))


class CommandType(type):
    """
    Metaclass for Command classes.

    - __typename__ derived from the class name, used in declaration errors.
    - read-only properties for every name in __introspectable__ (mirror()).
    - __repr__/__rich_repr__ over __displayable__ (or __introspectable__).
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_command_metadata(cls, metadata, /):
    """
    Internal: validate identity fields shared by commands and subcommands.

    - name: non-empty string without whitespace.
    - descr: Unset, a rich Text, or a non-empty string (trimmed).
    - parent: Unset or a Command.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif any(char.isspace() for char in name):
        raise ValueError(f"{cls.__typename__} 'name' cannot contain whitespace")
    metadata["name"] = name

    if not isinstance(descr := metadata["descr"], str | Text | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = descr

    if not isinstance(metadata.get("parent", Unset), Command | Unset):
        raise TypeError(f"{cls.__typename__} 'parent' must be a command")


def _unquote(value):
    """
    Strip one layer of surrounding double quotes ('"x"' -> 'x').
    """
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


class Command(metaclass=CommandType):
    """
    A node of the command tree: flags, positional arguments, named
    subcommands and an optional action.

    Lifecycle
    - The root is built by the program (usually as an App).
    - Subcommands are declared with a builder callback; the child Command only
      exists while its dispatch runs.
    """

    __introspectable__ = (
        "name",
        "descr",
        "flags",
        "arguments",
        "subcommands",
        "action",
        "parent",
    )

    __displayable__ = (
        "name",
        "descr",
        "subcommands",
        "parent",
    )

    def __new__(cls, name=Unset, descr=Unset, /, *, parent=Unset):
        metadata = {
            "name": coalesce(name, os.path.basename(sys.argv[0]) or "command"),
            "descr": descr,
            "parent": parent,
        }
        _sanitize_command_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._flags = FlagGroup()
        self._arguments = []
        self._subcommands = {}
        self._action = Unset
        return self

    @property
    def root(self):
        """
        The topmost command of the current dispatch chain.
        """
        child, parent = self, self.parent
        while parent:
            child, parent = parent, parent.parent
        return child

    @property
    def path(self):
        """
        Ancestry from the root to this command, as a tuple.
        """
        path = [command := self]
        while command.parent:
            path.append(command := command.parent)
        return tuple(reversed(path))

    def flag(self, target, /, name="", letters="", descr=Unset, *, sample=Unset):
        """
        Declare a flag on this command and return it.
        """
        return self._flags.add(Flag(target, name, letters, descr, sample=sample))

    def group(self, *items, exclusive=False, required=False):
        """
        Declare a nested flag group on this command and return it.
        """
        return self._flags.add(FlagGroup(*items, exclusive=exclusive, required=required))

    def argument(self, target, name, /, descr=Unset):
        """
        Declare the next positional argument and return it.
        """
        argument = Argument(target, name, descr)
        if any(other.name == argument.name for other in self._arguments):
            raise ValueError(f"{type(self).__typename__} argument name {argument.name!r} is already in use")
        self._arguments.append(argument)
        return argument

    def subcommand(self, name, /, descr=Unset, builder=Unset):
        """
        Declare a subcommand.

        The builder receives the fresh child Command and populates it. Usable
        directly, subcommand("info", "...", build), or as a decorator,
        @subcommand("info", "..."). Returns the builder.
        """
        metadata = {
            "name": name,
            "descr": descr,
        }
        _sanitize_command_metadata(type(self), metadata)
        if metadata["name"].startswith("-"):
            raise ValueError(f"{type(self).__typename__} subcommand name cannot start with a dash")

        @rename("subcommand")
        def wrapper(builder, /):
            if not callable(builder):
                raise TypeError("@subcommand() must be applied to a callable")
            subcommand = Subcommand(metadata["name"], metadata["descr"], builder)
            if self._subcommands.setdefault(subcommand.name, subcommand) is not subcommand:
                raise ValueError(f"{type(self).__typename__} subcommand name {subcommand.name!r} is already in use")
            return builder

        return wrapper(builder) if builder is not Unset else wrapper

    def action(self, callback, /):
        """
        Bind the callable run after a successful parse of this command.
        Returns the callback so it can be used as a decorator.
        """
        if not callable(callback):
            raise TypeError("action() argument must be callable")
        self._action = callback
        return callback

    def usage(self, prefix=Unset, /):
        return compose(self, prefix)

    def _route(self):
        return " ".join(step.name for step in self.path)

    def _advice(self, what):
        root = self.root
        if help_flag := getattr(root, "help_flag", None):
            return "run '%s %s' to see %s" % (self._route(), help_flag, what)
        if help_command := getattr(root, "help_command", None):
            return "run '%s' to see %s" % (" ".join([root.name, help_command, *(step.name for step in self.path[1:])]), what)
        return "check the usage of '%s'" % self._route()

    def _find(self, key, as_letter):
        """
        Find a flag in this command, then in each ancestor up to the root.
        """
        for command in reversed(self.path):
            if (flag := command.flags.find(key, as_letter)) is not None:
                return flag
        return None

    def _lookup(self, key, as_letter, token, position):
        if (flag := self._find(key, as_letter)) is not None:
            return flag

        spellings = [spelling for command in self.path for flag in command.flags.flags() for spelling in flag.spellings().split()]
        suggestions = difflib.get_close_matches(token.partition("=")[0], spellings, 5)
        try:
            hint = "did you mean %r? you can also %s" % (suggestions[0], self._advice("all flags"))
        except IndexError:
            hint = self._advice("all flags")
        raise UnsupportedFlagError(
            "unsupported flag %r at %s position" % (token, ordinal(position)),
            title="unsupported flag",
            code=FaultCode.UNSUPPORTED_FLAG,
            input=token,
            index=position,
            route=self._route(),
            suggestions=suggestions,
            hint=hint,
            docs=getdoc(FaultCode.UNSUPPORTED_FLAG),
        )

    def _duplicate(self, flag, used_as, position):
        raise DuplicateFlagError(
            "flag %r at %s position was already provided as %r" % (used_as, ordinal(position), flag.used_as),
            title="duplicate flag",
            code=FaultCode.DUPLICATE_FLAG,
            input=used_as,
            index=position,
            route=self._route(),
            hint="keep a single %s; only list flags can be repeated" % flag.label,
            docs=getdoc(FaultCode.DUPLICATE_FLAG),
        )

    def _apply(self, flag, used_as, foldings, value, position, queue):
        """
        Write one matched flag (and its folded letters) into its target.

        - value is the text after "=", or Unset when the token had none.
        - foldings are the letters bundled after the first one (-abc -> "bc").
        - queue holds the remaining (position, token) pairs; a value-taking
          flag without "=" consumes the next one verbatim.
        """
        target = flag.target

        if not target.is_bool():
            if foldings:
                raise UnsupportedFoldingError(
                    "flag %r at %s position takes a value and cannot be folded with %s" % (
                        used_as, ordinal(position), ", ".join(repr("-" + letter) for letter in foldings)
                    ),
                    title="unsupported folding",
                    code=FaultCode.UNSUPPORTED_FOLDING,
                    input=used_as,
                    index=position,
                    route=self._route(),
                    hint="pass %s=<%s> as a token of its own" % (used_as, flag.sample or "value"),
                    docs=getdoc(FaultCode.UNSUPPORTED_FOLDING),
                )
            if flag.used_as and not target.is_vector():
                self._duplicate(flag, used_as, position)
            if value is Unset:
                if not queue:
                    raise MissingParameterError(
                        "flag %r at %s position expects a value" % (used_as, ordinal(position)),
                        title="missing parameter",
                        code=FaultCode.MISSING_PARAMETER,
                        input=used_as,
                        index=position,
                        route=self._route(),
                        hint="add a value, for example: %s=<%s>" % (used_as, flag.sample or "value"),
                        docs=getdoc(FaultCode.MISSING_PARAMETER),
                    )
                value = queue.popleft()[1]
            else:
                value = _unquote(value)
            target.write_text(value)
            flag.used_as = used_as
            logger.debug("flag %s set to %r", used_as, value)
            return

        if flag.used_as:
            self._duplicate(flag, used_as, position)
        if value is Unset:
            target.write_bool(True)
        else:
            try:
                target.write_text(_unquote(value))
            except InvalidBooleanValueError as fault:
                raise InvalidBooleanValueError(
                    "flag %r at %s position %s" % (used_as, ordinal(position), fault.message),
                    **{**fault.options, "input": used_as, "index": position, "route": self._route()},
                ) from None
        flag.used_as = used_as
        state = target.value
        logger.debug("flag %s set to %r", used_as, state)

        for letter in foldings:
            folded = self._lookup(letter, True, "-" + letter, position)
            if not folded.target.is_bool():
                raise UnsupportedFoldingError(
                    "flag %r folded at %s position takes a value" % ("-" + letter, ordinal(position)),
                    title="unsupported folding",
                    code=FaultCode.UNSUPPORTED_FOLDING,
                    input="-" + letter,
                    index=position,
                    route=self._route(),
                    hint="only boolean flags can be folded; pass -%s=<%s> as a token of its own" % (
                        letter, folded.sample or "value"
                    ),
                    docs=getdoc(FaultCode.UNSUPPORTED_FOLDING),
                )
            if folded.used_as:
                self._duplicate(folded, "-" + letter, position)
            folded.target.write_bool(state)
            folded.used_as = "-" + letter
            logger.debug("folded flag -%s set to %r", letter, state)

    def _dispatch(self, subcommand, tokens, /, *, index, help):
        logger.debug("dispatching %r to subcommand %r", self._route(), subcommand.name)
        child = Command(subcommand.name, subcommand.descr, parent=self)
        try:
            subcommand.builder(child)
            return child.exec(tokens, index=index, help=help)
        finally:
            child._parent = Unset

    def _requests_help(self, tokens):
        """
        Whether the help flag of the root stands at a flag position of `tokens`.

        The spaced value of a value-taking flag is skipped, so in
        "--name --help" the help flag is the value of --name.
        """
        if not (help_flag := getattr(self.root, "help_flag", None)):
            return False

        tokens = iter(tokens)
        for token in tokens:
            if token == help_flag:
                return True
            if "=" in token:
                continue
            if token.startswith("--") and len(token) > 2:
                flag = self._find(token[2:], False)
            elif token.startswith("-") and len(token) == 2 and token != "--":
                flag = self._find(token[1], True)
            else:
                continue
            if flag is not None and not flag.target.is_bool():
                next(tokens, None)
        return False

    def exec(self, tokens, /, *, index=1, help=False):
        """
        Parse `tokens` against this command and run the reached action.

        phases
        - subcommand probe: a first token naming a subcommand builds the child
          and hands it every remaining token.
        - help mode (help=True, or the root help flag at a flag position of
          the tokens): only subcommands are walked, then HelpRequested carries
          the usage of the reached command.
        - scan: "--name[=value]", "-x[yz][=value]" or a free-standing token.
          "--" and "-" alone are free-standing.
        - validation of every flag group from this command up to the root.
        - positional distribution (collect_arguments), then the action.

        `index` is the 1-based position of the first token, used by messages.
        """
        tokens = list(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("exec() tokens must be strings")
        self._flags.reset()

        if tokens and (subcommand := self._subcommands.get(tokens[0])):
            return self._dispatch(subcommand, tokens[1:], index=index + 1, help=help)

        if help or self._requests_help(tokens):
            logger.debug("help requested for %r", self._route())
            raise HelpRequested(self.usage())

        queue = deque(enumerate(tokens, index))
        positionals = []
        while queue:
            position, token = queue.popleft()
            if token.startswith("--") and len(token) > 2:
                name, equals, value = token[2:].partition("=")
                flag = self._lookup(name, False, token, position)
                self._apply(flag, "--" + name, "", value if equals else Unset, position, queue)
            elif token.startswith("-") and len(token) > 1 and token != "--":
                foldings, equals, value = token[2:].partition("=")
                flag = self._lookup(token[1], True, "-" + token[1], position)
                self._apply(flag, "-" + token[1], foldings, value if equals else Unset, position, queue)
            else:
                positionals.append((position, token))

        self.validate()
        self._distribute(positionals)

        if self._action is not Unset:
            logger.debug("running action of %r", self._route())
            self._action()

    def validate(self):
        """
        Validate the flag groups of this command and of every ancestor.
        """
        for command in reversed(self.path):
            command.flags.validate()

    def collect_arguments(self, tokens, /, *, index=1):
        """
        Distribute free-standing tokens over the declared arguments.

        `index` is the 1-based position of the first token, used by messages.
        """
        tokens = list(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("collect_arguments() tokens must be strings")
        self._distribute(list(enumerate(tokens, index)))

    def _missing(self, argument):
        raise MissingArgumentError(
            "missing required argument %r" % argument.name,
            title="missing argument",
            code=FaultCode.MISSING_ARGUMENT,
            argument=argument.name,
            route=self._route(),
            hint="expected: %s; %s" % (
                " ".join(argument.syntax() for argument in self._arguments), self._advice("the expected order")
            ),
            docs=getdoc(FaultCode.MISSING_ARGUMENT),
        )

    def _unexpected(self, position, token):
        raise UnexpectedArgumentError(
            "unexpected argument %r at %s position" % (token, ordinal(position)),
            title="unexpected argument",
            code=FaultCode.UNEXPECTED_ARGUMENT,
            input=token,
            index=position,
            route=self._route(),
            hint="remove this extra value or %s" % self._advice("the expected usage"),
            docs=getdoc(FaultCode.UNEXPECTED_ARGUMENT),
        )

    def _distribute(self, pairs):
        """
        Fill the declared arguments from (position, token) pairs.

        order
        - the leading run of required single arguments, from the front.
        - the trailing run of required single arguments, from the back.
        - the optional single arguments in between, in declaration order,
          while tokens remain.
        - the variadic argument, if any, takes everything left.
        anything else left over is an UnexpectedArgumentError.
        """
        arguments = self._arguments
        pending = deque(pairs)

        if not arguments:
            if pending:
                self._unexpected(*pending[0])
            return

        front = 0
        while front < len(arguments) and arguments[front].required and not arguments[front].variadic:
            front += 1
        back = len(arguments)
        while back > front and arguments[back - 1].required and not arguments[back - 1].variadic:
            back -= 1

        middle = arguments[front:back]
        for offset, argument in enumerate(middle):
            if argument.variadic and offset == len(middle) - 1:
                continue
            if argument.variadic or argument.required:
                raise InvalidArgumentDeclarationError(
                    "argument %r of %r cannot be filled unambiguously" % (argument.name, self._route()),
                    title="invalid argument declaration",
                    code=FaultCode.INVALID_ARGUMENT_DECLARATION,
                    argument=argument.name,
                    route=self._route(),
                    hint="declare required arguments first or last, optional ones in between, "
                         "and at most one variadic argument after them",
                    docs=getdoc(FaultCode.INVALID_ARGUMENT_DECLARATION),
                )

        def write(argument, pair):
            position, token = pair
            argument.target.write_text(token)
            logger.debug("argument %s at position %d set to %r", argument.name, position, token)

        for argument in arguments[:front]:
            if not pending:
                self._missing(argument)
            write(argument, pending.popleft())

        tail = []
        for argument in reversed(arguments[back:]):
            if not pending:
                self._missing(argument)
            tail.append((argument, pending.pop()))
        for argument, pair in reversed(tail):
            write(argument, pair)

        for argument in middle:
            if argument.variadic:
                if argument.required and not pending:
                    self._missing(argument)
                while pending:
                    write(argument, pending.popleft())
            elif pending:
                write(argument, pending.popleft())

        if pending:
            self._unexpected(*pending[0])

    def __invoke__(self, prompt=Unset):
        """
        Execute this command with a token stream.

        - Unset: sys.argv[1:].
        - str: split with shlex.split.
        - Iterable[str]: used as given.
        """
        self.exec(_tokenize(prompt, sys.argv[1:]))


def _tokenize(prompt, default, /):
    if prompt is Unset:
        return list(default)
    elif isinstance(prompt, str):
        return shlex.split(prompt)
    elif isinstance(prompt, Iterable):
        tokens = list(prompt)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("__invoke__() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("__invoke__() argument must be a string or an iterable of strings")


def _sanitize_app_metadata(cls, metadata, /):
    """
    Internal: validate help triggers and runtime flags of an App.

    - help_command: Unset/None (disabled) or a subcommand-like name.
    - help_flag: Unset/None (disabled) or a dash-prefixed token.
    - shell, fancy, colorful: booleans.
    """
    if not isinstance(help_command := metadata["help_command"], str | Unset | None):
        raise TypeError(f"{cls.__typename__} 'help_command' must be a string")
    elif isinstance(help_command, str):
        if not (help_command := help_command.strip()) or any(char.isspace() for char in help_command):
            raise ValueError(f"{cls.__typename__} 'help_command' must be a single non-empty word")
        elif help_command.startswith("-"):
            raise ValueError(f"{cls.__typename__} 'help_command' cannot start with a dash")
    metadata["help_command"] = coalesce(help_command)

    if not isinstance(help_flag := metadata["help_flag"], str | Unset | None):
        raise TypeError(f"{cls.__typename__} 'help_flag' must be a string")
    elif isinstance(help_flag, str) and not re.fullmatch(r"--?[^\W\d_](-?[^\W_]+)*|-\S", help_flag := help_flag.strip()):
        raise ValueError(f"{cls.__typename__} 'help_flag' must be a dash-prefixed option name")
    metadata["help_flag"] = coalesce(help_flag)

    for name in ("shell", "fancy", "colorful"):
        if not isinstance(metadata[name], bool):
            raise TypeError(f"{cls.__typename__} {name!r} must be a boolean")


class App(Command):
    """
    Root command of a program.

    Help
    - help_command: first token switching the run to help mode ("tool help info").
    - help_flag: token switching the run to help mode wherever it stands as a
      flag ("tool info --help"), but not when it is the spaced value of a
      value-taking flag ("tool --name --help"). Defaults to "--help".

    Runtime
    - shell: __invoke__ prints help and faults instead of returning/raising them.
    - fancy: faults are drawn inside a rich panel.
    - colorful: faults are styled (see __styles__ in __main__).
    """

    __introspectable__ = Command.__introspectable__ + (
        "help_command",
        "help_flag",
        "executable",
        "shell",
        "fancy",
        "colorful",
    )

    __displayable__ = Command.__displayable__ + (
        "help_command",
        "help_flag",
        "shell",
    )

    def __new__(
            cls,
            name=Unset,
            descr=Unset,
            /,
            *,
            help_command=Unset,
            help_flag="--help",
            shell=False,
            fancy=False,
            colorful=False
    ):
        self = super().__new__(cls, name, descr)
        metadata = {
            "help_command": help_command,
            "help_flag": help_flag,
            "shell": shell,
            "fancy": fancy,
            "colorful": colorful,
        }
        _sanitize_app_metadata(cls, metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._executable = ""
        return self

    def execute(self, argv, /):
        """
        Run the app over argv-style tokens (executable first).

        Returns
        - Outcome(Status.HELP, text) when a help trigger was given.
        - Outcome(Status.EXECUTED) after a successful dispatch.

        Raises
        - CommandException subclasses on the first failure.
        """
        if isinstance(argv, str) or not isinstance(argv, Iterable):
            raise TypeError("execute() argument must be an iterable of strings")
        tokens = list(argv)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("execute() argument must be an iterable of strings")

        self._executable = tokens.pop(0) if tokens else ""
        help = False
        if self._help_command is not None and tokens[:1] == [self._help_command]:
            tokens, help = tokens[1:], True
        logger.debug("executing %r with %r (help=%s)", self.name, tokens, help)

        try:
            self.exec(tokens, help=help)
        except HelpRequested as signal:
            return Outcome(Status.HELP, signal.text)
        return Outcome(Status.EXECUTED)

    def __invoke__(self, prompt=Unset):
        """
        Shell-style run.

        - Unset: sys.argv (executable included).
        - str: split with shlex.split; the app name stands for the executable.
        - Iterable[str]: tokens after the executable.

        In shell mode help is printed to stdout and faults are rendered to
        stderr before exiting with status 1; otherwise faults are raised.
        """
        if prompt is Unset:
            argv = list(sys.argv)
        else:
            argv = [self.name, *_tokenize(prompt, ())]
        try:
            outcome = self.execute(argv)
        except CommandException as fault:
            # raises, or exits in shell mode
            trigger(fault, prog=self.name, shell=self.shell, fancy=self.fancy, colorful=self.colorful)
        if outcome.status is Status.HELP and self.shell:
            trigger(HelpRequested(outcome.text), shell=True)
        return outcome


def invoke(object, prompt=Unset, /):
    """
    Convenience runner for anything implementing __invoke__(prompt).

    - prompt Unset: the process arguments.
    - prompt str: split with shlex.split.
    - prompt Iterable[str]: used as tokens.
    """
    if hasattr(object, "__invoke__") and callable(object.__invoke__):
        return object.__invoke__(prompt)

    target = "argument" if prompt is Unset else "first argument"
    raise TypeError(f"invoke() {target} must implement __invoke__ method") from None


__all__ = (
    "Command",
    "App",
    "Subcommand",
    "Status",
    "Outcome",
    "invoke",
)

del CommandType
