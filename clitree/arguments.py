r"""
clitree argument model: targets, flags, flag groups and positional arguments.

Overview
- Target: a typed, caller-readable storage slot written by the parser.
  • kinds: bool, optional-bool, text, optional-text, text-list (TargetKind).
  • factories: Target.bool(), Target.optional_bool(), Target.text(),
    Target.optional_text(), Target.text_list().
- Flag: a named and/or lettered switch bound to a Target (--name, -n).
  • records how it was invoked in `used_as` during a parse.
- FlagGroup: an ordered tree of flags and nested groups with `exclusive`
  (at most one direct item used) and `required` (at least one used) modifiers.
- Argument: a positional slot bound to a text-family Target; required,
  optional or variadic depending on the target kind.

Introspection & representation
- ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes
  the fields listed in __introspectable__ as read-only properties.

Validation highlights
- Flag names match r"[^\W\d_](-?[^\W_]+)*" (given without the "--" prefix).
- Flag letters are single printable characters other than "-", "=" and blanks.
- A flag needs a name or at least one letter.
- Names and letters are unique within one flag group tree.

Quick example:
    >>> from clitree.arguments import Target, Flag, FlagGroup
    >>> verbose = Target.bool()
    >>> output = Target.optional_text()
    >>> group = FlagGroup(
    ...     Flag(verbose, "verbose", "v", "show detailed info"),
    ...     Flag(output, "output", "o", "write to a file", sample="FILE"),
    ... )
    >>> group.syntax()
    '[--verbose] [--output=<FILE>]'
    >>> group.find("v", as_letter=True).label
    '--verbose'
"""
import enum
import functools
import logging
import operator
import re
from collections.abc import MutableSequence

from rich.text import Text

from .faults import *
from .utils import *

logger = logging.getLogger(__name__)


class ArgumentType(type):
    """
    Metaclass giving argument-model classes a shared, introspectable shape.

    Responsibilities
    - Derive __typename__ from the class name ("FlagGroup" -> "flag-group"),
      used as the subject of every declaration error.
    - Expose every name in __introspectable__ as a read-only property via mirror().
    - Provide __repr__/__rich_repr__ over __displayable__ (or __introspectable__).
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


class TargetKind(enum.Enum):
    """
    Storage kinds a Target can hold. Fixed for the lifetime of a Target.
    """
    BOOL = "bool"
    OPTIONAL_BOOL = "optional-bool"
    TEXT = "text"
    OPTIONAL_TEXT = "optional-text"
    TEXT_LIST = "text-list"


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize the shared 'descr' field.

    - Unset stays Unset (exposed as None).
    - strings are trimmed and must not be empty; rich Text is kept as given.
    """
    if not isinstance(descr := metadata["descr"], str | Text | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = descr


def _sanitize_target_metadata(cls, metadata, /):
    """
    Internal: validate a target kind against its initial value and
    resolve the kind-dependent defaults.

    Defaults
    - value: False (bool), None (optional-bool), "" (text), None (optional-text),
      a fresh list (text-list). A caller-supplied list is kept by identity so
      that parsed values land in the caller's own list.
    - required: True for text, False for every other kind.
    """
    if isinstance(kind := metadata["kind"], str):
        try:
            kind = TargetKind(kind)
        except ValueError:
            raise ValueError(f"{cls.__typename__} kind {kind!r} is not supported") from None
    if not isinstance(kind, TargetKind):
        raise TypeError(f"{cls.__typename__} 'kind' must be a target kind")

    value = metadata["value"]
    match kind:
        case TargetKind.BOOL:
            value = coalesce(value, False)
            if not isinstance(value, bool):
                raise TypeError(f"{cls.__typename__} of kind {kind.value!r} must hold a boolean")
        case TargetKind.OPTIONAL_BOOL:
            value = coalesce(value, None)
            if not isinstance(value, bool | None):
                raise TypeError(f"{cls.__typename__} of kind {kind.value!r} must hold a boolean or None")
        case TargetKind.TEXT:
            value = coalesce(value, "")
            if not isinstance(value, str):
                raise TypeError(f"{cls.__typename__} of kind {kind.value!r} must hold a string")
        case TargetKind.OPTIONAL_TEXT:
            value = coalesce(value, None)
            if not isinstance(value, str | None):
                raise TypeError(f"{cls.__typename__} of kind {kind.value!r} must hold a string or None")
        case TargetKind.TEXT_LIST:
            value = coalesce(value, Unset)
            if value is Unset:
                value = []
            elif not isinstance(value, MutableSequence) or isinstance(value, str):
                raise TypeError(f"{cls.__typename__} of kind {kind.value!r} must hold a mutable sequence")
            elif not all(isinstance(item, str) for item in value):
                raise TypeError(f"{cls.__typename__} of kind {kind.value!r} must hold strings only")

    required = coalesce(metadata["required"], kind is TargetKind.TEXT)
    if not isinstance(required, bool):
        raise TypeError(f"{cls.__typename__} 'required' must be a boolean")

    metadata["kind"] = kind
    metadata["value"] = value
    metadata["required"] = required


class Target(metaclass=ArgumentType):
    """
    Typed storage slot written by flags and positional arguments.

    The caller keeps a reference to the Target and reads `value` after the
    parse. The parser only reads a value back through is_bool()/is_vector()
    decisions; it never buffers writes.
    """

    __introspectable__ = (
        "kind",
        "required",
    )

    __displayable__ = (
        "kind",
        "value",
        "required",
    )

    def __new__(cls, kind, value=Unset, /, *, required=Unset):
        metadata = {
            "kind": kind,
            "value": value,
            "required": required,
        }
        _sanitize_target_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @classmethod
    def bool(cls, value=False, /, *, required=False):
        return cls(TargetKind.BOOL, value, required=required)

    @classmethod
    def optional_bool(cls, value=None, /, *, required=False):
        return cls(TargetKind.OPTIONAL_BOOL, value, required=required)

    @classmethod
    def text(cls, value="", /, *, required=True):
        return cls(TargetKind.TEXT, value, required=required)

    @classmethod
    def optional_text(cls, value=None, /, *, required=False):
        return cls(TargetKind.OPTIONAL_TEXT, value, required=required)

    @classmethod
    def text_list(cls, value=Unset, /, *, required=False):
        return cls(TargetKind.TEXT_LIST, value, required=required)

    @property
    def value(self):
        """
        The stored value. For text-list targets this is the live list.
        """
        return self._value

    def is_bool(self):
        return self._kind in (TargetKind.BOOL, TargetKind.OPTIONAL_BOOL)

    def is_vector(self):
        return self._kind is TargetKind.TEXT_LIST

    def is_optional(self):
        return self._kind in (TargetKind.OPTIONAL_BOOL, TargetKind.OPTIONAL_TEXT)

    def write_bool(self, value, /):
        """
        Store a boolean. Returns False, leaving the slot untouched, when the
        target is not of a boolean kind.
        """
        if not isinstance(value, bool):
            raise TypeError("write_bool() argument must be a boolean")
        if not self.is_bool():
            return False
        self._value = value
        return True

    def write_text(self, value, /):
        """
        Store a textual value according to the target kind.

        - boolean kinds accept exactly "true" or "false" (case-sensitive)
          and raise InvalidBooleanValueError for anything else.
        - scalar text kinds overwrite.
        - text-list appends.
        """
        if not isinstance(value, str):
            raise TypeError("write_text() argument must be a string")
        if self.is_bool():
            match value:
                case "true":
                    self._value = True
                case "false":
                    self._value = False
                case _:
                    raise InvalidBooleanValueError(
                        "expected 'true' or 'false', got %r instead" % value,
                        title="invalid boolean value",
                        code=FaultCode.INVALID_BOOLEAN_VALUE,
                        input=value,
                        hint="use 'true' or 'false' (lowercase)",
                        docs=getdoc(FaultCode.INVALID_BOOLEAN_VALUE),
                    )
        elif self.is_vector():
            self._value.append(value)
        else:
            self._value = value


def _sanitize_flag_metadata(cls, metadata, /):
    r"""
    Internal: validate the addressing fields of a Flag.

    - target: a Target.
    - name: long name without the "--" prefix, matching r"[^\W\d_](-?[^\W_]+)*",
      or "" for a letters-only flag.
    - letters: zero or more distinct single-character aliases.
    - at least one of name/letters must be non-empty (TypeError otherwise).
    - sample: Unset or a non-empty placeholder shown in usage for value-taking flags.
    """
    if not isinstance(metadata["target"], Target):
        raise TypeError(f"{cls.__typename__} 'target' must be a target")

    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif (name := name.strip()).startswith("-"):
        raise ValueError(f"{cls.__typename__} 'name' must be given without the leading dashes")
    elif name and not re.fullmatch(r"[^\W\d_](-?[^\W_]+)*", name):
        raise ValueError(f"{cls.__typename__} 'name' must be a valid shell-style option name (unicodes are allowed)")

    if not isinstance(letters := metadata["letters"], str):
        raise TypeError(f"{cls.__typename__} 'letters' must be a string")
    for index, letter in enumerate(letters):
        if letter in "-=" or letter.isspace() or not letter.isprintable():
            raise ValueError(f"{cls.__typename__} letter {letter!r} is not a valid short option")
        elif letter in letters[:index]:
            raise ValueError(f"{cls.__typename__} 'letters' cannot contain duplicates")

    if not name and not letters:
        raise TypeError(f"{cls.__typename__} must specify a name or at least one letter")

    if not isinstance(sample := metadata["sample"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'sample' must be a string")
    elif isinstance(sample, str):
        if not (sample := sample.strip()):
            raise ValueError(f"{cls.__typename__} 'sample' cannot be empty")
        elif metadata["target"].is_bool():
            raise ValueError(f"{cls.__typename__} boolean flags do not take a 'sample'")

    metadata["name"] = name
    metadata["sample"] = sample


class Flag(metaclass=ArgumentType):
    """
    Named switch bound to a Target.

    Addressing
    - name: matched exactly after the "--" prefix (--verbose).
    - letters: each letter is a short alias (-v). Boolean letters can be
      folded into one token (-abc).

    Parse state
    - used_as: "" until the flag is matched, then the textual form it was
      invoked with ("--verbose" or "-v"). Reset at the start of every parse.

    Requiredness follows the target (`target.required`).
    """

    __introspectable__ = (
        "target",
        "name",
        "letters",
        "descr",
        "sample",
    )

    __displayable__ = (
        "name",
        "letters",
        "target",
        "used_as",
    )

    def __new__(cls, target, /, name="", letters="", descr=Unset, *, sample=Unset):
        metadata = {
            "target": target,
            "name": name,
            "letters": letters,
            "descr": descr,
            "sample": sample,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_flag_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._owner = Unset
        self.used_as = ""
        return self

    @property
    def required(self):
        return self._target.required

    @property
    def label(self):
        """
        Canonical spelling: "--name", or "-x" for letters-only flags.
        """
        return "--" + self._name if self._name else "-" + self._letters[0]

    def name_match(self, token, /, as_letter=False):
        """
        Exact long-name equality, or single-letter membership when as_letter.
        """
        if not isinstance(token, str):
            raise TypeError("name_match() argument must be a string")
        if as_letter:
            return len(token) == 1 and token in self._letters
        return bool(token) and token == self._name

    def syntax(self):
        fragment = self.label
        if not self._target.is_bool():
            fragment += "=<%s>" % (self.sample or "value")
        if self._target.is_vector():
            fragment += "..."
        return fragment if self.required else f"[{fragment}]"

    def spellings(self):
        """
        All spellings, long first: "--name -a -b". Used by the usage tables.
        """
        return " ".join(([f"--{self._name}"] if self._name else []) + [f"-{letter}" for letter in self._letters])

    def reset(self):
        self.used_as = ""


class FlagGroup(metaclass=ArgumentType):
    """
    Ordered tree of flags and nested groups.

    Modifiers
    - exclusive: at most one direct item may be used.
    - required: at least one direct item must be used (ignored when empty).

    Structure rules (enforced by add())
    - items are Flag or FlagGroup instances owned by exactly one group.
    - a group cannot contain itself, directly or through nesting.
    - names and letters are unique across the whole tree.
    """

    __introspectable__ = (
        "items",
        "exclusive",
        "required",
    )

    def __new__(cls, *items, exclusive=False, required=False):
        if not isinstance(exclusive, bool):
            raise TypeError(f"{cls.__typename__} 'exclusive' must be a boolean")
        if not isinstance(required, bool):
            raise TypeError(f"{cls.__typename__} 'required' must be a boolean")

        self = super().__new__(cls)
        self._items = []
        self._exclusive = exclusive
        self._required = required
        self._owner = Unset
        for item in items:
            self.add(item)
        return self

    def __iter__(self):
        return iter(self._items)

    def add(self, item, /):
        """
        Append a Flag or a nested FlagGroup and return it.

        Raises
        - TypeError: item is neither a Flag nor a FlagGroup.
        - ValueError: item is this group or one of its enclosing groups,
          already belongs to a group, or reuses a name/letter of the tree.
        """
        typename = type(self).__typename__
        if not isinstance(item, Flag | FlagGroup):
            raise TypeError(f"{typename} items must be flags or flag groups")

        top = self
        while True:
            if item is top:
                raise ValueError(f"{typename} cannot contain itself")
            if top._owner is Unset:
                break
            top = top._owner

        if item._owner is not Unset:
            raise ValueError(f"{typename} item {item!r} already belongs to a flag group")

        existing = list(top.flags())
        for flag in [item] if isinstance(item, Flag) else item.flags():
            for other in existing:
                if flag.name and flag.name == other.name:
                    raise ValueError(f"{typename} flag name {flag.name!r} is already in use")
                if clash := set(flag.letters) & set(other.letters):
                    raise ValueError(f"{typename} flag letter {min(clash)!r} is already in use")

        self._items.append(item)
        item._owner = self
        return item

    def find(self, token, /, as_letter=False):
        """
        Depth-first search in declaration order; None when nothing matches.
        """
        for item in self._items:
            if isinstance(item, FlagGroup):
                if (flag := item.find(token, as_letter)) is not None:
                    return flag
            elif item.name_match(token, as_letter):
                return item
        return None

    def flags(self):
        """
        Yield every flag of the tree, depth-first in declaration order.
        """
        for item in self._items:
            if isinstance(item, FlagGroup):
                yield from item.flags()
            else:
                yield item

    def reset(self):
        for flag in self.flags():
            flag.reset()

    def validate(self):
        """
        Check the group constraints against the current `used_as` state.

        Returns whether anything in this subtree was used.

        Raises
        - MissingRequiredFlagsError: a direct flag with a required target is
          unused, or the group is required and none of its items was used.
        - ExclusivityViolationError: the group is exclusive and more than one
          direct item was used.
        """
        used = []
        missing = []
        for item in self._items:
            if isinstance(item, FlagGroup):
                if item.validate():
                    used.append(item)
            elif item.used_as:
                used.append(item)
            elif item.required:
                missing.append(item)

        if missing:
            labels = tuple(flag.label for flag in missing)
            raise MissingRequiredFlagsError(
                "missing required %s %s" % ("flag" if len(labels) == 1 else "flags", ", ".join(map(repr, labels))),
                title="missing required flags",
                code=FaultCode.MISSING_REQUIRED_FLAGS,
                flags=labels,
                hint="add %s to the command line" % " ".join(
                    flag.label if flag.target.is_bool() else f"{flag.label}=<{flag.sample or 'value'}>"
                    for flag in missing
                ),
                docs=getdoc(FaultCode.MISSING_REQUIRED_FLAGS),
            )

        if self._exclusive and len(used) > 1:
            labels = tuple(_invocation(item) for item in used)
            raise ExclusivityViolationError(
                "%s cannot be used together" % " and ".join(map(repr, labels)),
                title="mutually exclusive flags",
                code=FaultCode.EXCLUSIVITY_VIOLATION,
                flags=labels,
                hint="keep only one of %s" % ", ".join(labels),
                docs=getdoc(FaultCode.EXCLUSIVITY_VIOLATION),
            )

        if self._required and self._items and not used:
            labels = tuple(item.label if isinstance(item, Flag) else item.syntax() for item in self._items)
            raise MissingRequiredFlagsError(
                "at least one of %s is required" % ", ".join(map(repr, labels)),
                title="missing required flags",
                code=FaultCode.MISSING_REQUIRED_FLAGS,
                flags=labels,
                hint="add one of %s to the command line" % ", ".join(labels),
                docs=getdoc(FaultCode.MISSING_REQUIRED_FLAGS),
            )

        logger.debug("validated %r: %d item(s) used", self, len(used))
        return bool(used)

    def syntax(self):
        """
        Usage fragment of the tree.

        Items are joined by " | " in exclusive groups and by a space otherwise.
        A nested group with several items is wrapped in parentheses when it is
        exclusive or required, or when this group is exclusive.
        """
        fragments = []
        for item in self._items:
            if isinstance(item, FlagGroup):
                if not (fragment := item.syntax()):
                    continue
                if (self._exclusive or item.exclusive or item.required) and len(item._items) > 1:
                    fragment = f"({fragment})"
                fragments.append(fragment)
            else:
                fragments.append(item.syntax())
        return (" | " if self._exclusive else " ").join(fragments)


def _invocation(item):
    """
    How a used item was invoked: the flag's used_as, or the used flags of a group.
    """
    if isinstance(item, Flag):
        return item.used_as
    return " ".join(flag.used_as for flag in item.flags() if flag.used_as)


def _sanitize_argument_metadata(cls, metadata, /):
    if not isinstance(target := metadata["target"], Target):
        raise TypeError(f"{cls.__typename__} 'target' must be a target")
    elif target.is_bool():
        raise TypeError(f"{cls.__typename__} 'target' must be of a text kind")

    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif any(char.isspace() for char in name):
        raise ValueError(f"{cls.__typename__} 'name' cannot contain whitespace")
    metadata["name"] = name


class Argument(metaclass=ArgumentType):
    """
    Positional slot bound to a text-family Target.

    - text          -> required, single token.
    - optional-text -> optional, single token.
    - text-list     -> variadic; required when the target is.
    """

    __introspectable__ = (
        "target",
        "name",
        "descr",
    )

    def __new__(cls, target, name, /, descr=Unset):
        metadata = {
            "target": target,
            "name": name,
            "descr": descr,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_argument_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def required(self):
        match self._target.kind:
            case TargetKind.TEXT:
                return True
            case TargetKind.OPTIONAL_TEXT:
                return False
            case _:
                return self._target.required

    @property
    def variadic(self):
        return self._target.is_vector()

    def syntax(self):
        fragment = self._name + "..." * self.variadic
        return fragment if self.required else f"[{fragment}]"


__all__ = (
    # Classes
    "TargetKind",
    "Target",
    "Flag",
    "FlagGroup",
    "Argument",
)

del ArgumentType
