"""
Charter command configuration: the metadata record attached to a command type.

What this module provides
- CommandConfiguration: immutable description of one command's identity, help text,
  version string, subcommand tree and help layout parameters.
  • Canonical constructor (optionally with a super_command_name).
  • CommandConfiguration.legacy(...): deprecated constructor from before the usage
    override existed; it keeps the usage line suppressed.
- Example: immutable (arguments, description) pair, built with example(...).
- Usage: tagged union describing how the usage line is produced
  (Usage.AUTO, Usage.SUPPRESSED, Usage.custom(text)).

Usage tri-state
- usage=None  -> the help engine generates the usage line.
- usage=""    -> the usage line is not shown at all.
- usage="..." -> the literal text replaces the generated line.

Layout defaults
- help_message_indent and help_message_label_column_width are optional at the call
  site but always stored: omitting them (or passing None) keeps 2 and 26.

Caller contracts (not checked here)
- default_subcommand should be one of subcommands.
- Sibling command names should be unique.
Both are the concern of whichever engine walks the tree; this record stores what it
is given, in the order it is given.

Quick example:
    >>> from charter import CommandConfiguration, example
    >>> configuration = CommandConfiguration(
    ...     abstract="A utility for performing maths.",
    ...     version="1.0.0",
    ...     subcommands=[Add, Multiply],
    ...     default_subcommand=Add,
    ...     examples=[example("math add 1 2", description="adds two numbers")],
    ... )
    >>> configuration.usage_policy
    Usage.AUTO
"""
import enum
import functools
import operator
import re
import warnings
from collections.abc import Iterable

from .faults import DeprecatedInitializerWarning
from .names import NameSpecification
from .utils import mirror, rename


class RecordType(type):
    """
    Metaclass for the immutable records of this module.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens) for
      consistent messages ("command-configuration 'abstract' must be a string").
    - Expose every name listed in __introspectable__ as a read-only property that
      mirrors the private "_name" backing field.
    - Provide stable __repr__/__rich_repr__ implementations.
    - Seal the class against subclassing when created with sealed=True.
    """
    __introspectable__ = ()

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

        if "__repr__" not in namespace:
            @rename("__repr__")
            def __repr__(self):
                """
                Return a concise, stable representation with every field.
                """
                return f"{type(self).__name__}({
                    ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
                })"
            self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        if options.get("sealed", False):
            @rename("__init_subclass__")
            def __init_subclass__(cls, **options):  # NOQA: F-841
                """
                Disallow subclassing of sealed records.
                """
                raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
            self.__init_subclass__ = classmethod(__init_subclass__)

        return self


class UsageKind(enum.Enum):
    """
    how the usage line of a command is produced.
    """
    AUTO = "auto"
    SUPPRESSED = "suppressed"
    CUSTOM = "custom"


class Usage(metaclass=RecordType, sealed=True):
    """
    Tagged union over the three usage behaviors.

    Build it from the nullable usage string with Usage.of(text); the two text-less
    variants are the singletons Usage.AUTO and Usage.SUPPRESSED.
    """
    __introspectable__ = ("kind", "text")

    def __init__(self, kind, text="", /):
        if not isinstance(kind, UsageKind):
            raise TypeError(f"{type(self).__typename__} 'kind' must be a usage-kind")
        if not isinstance(text, str):
            raise TypeError(f"{type(self).__typename__} 'text' must be a string")
        if (kind is UsageKind.CUSTOM) != bool(text):
            raise ValueError(f"{type(self).__typename__} 'text' is required for custom usage only")
        self._kind = kind
        self._text = text

    @classmethod
    def custom(cls, text, /):
        return cls(UsageKind.CUSTOM, text)

    @classmethod
    def of(cls, text, /):
        """
        Map the nullable usage string onto its variant.

        - None -> Usage.AUTO
        - ""   -> Usage.SUPPRESSED
        - text -> Usage.custom(text)
        """
        if text is None:
            return cls.AUTO
        if not isinstance(text, str):
            raise TypeError("Usage.of() argument must be a string or None")
        return cls.custom(text) if text else cls.SUPPRESSED

    @property
    def generated(self):
        return self._kind is UsageKind.AUTO

    @property
    def suppressed(self):
        return self._kind is UsageKind.SUPPRESSED

    def __eq__(self, other):
        if not isinstance(other, Usage):
            return NotImplemented
        return (self._kind, self._text) == (other._kind, other._text)

    def __hash__(self):
        return hash((Usage, self._kind, self._text))

    def __repr__(self):
        if self._kind is UsageKind.CUSTOM:
            return f"Usage.custom({self._text!r})"
        return f"Usage.{self._kind.name}"


Usage.AUTO = Usage(UsageKind.AUTO)
Usage.SUPPRESSED = Usage(UsageKind.SUPPRESSED)


# Private construction token; only Example.example() holds it.
_EXAMPLE_TOKEN = object()


class Example(metaclass=RecordType, sealed=True):
    """
    One entry of a command's examples section: the arguments literal and an
    optional description.

    example(arguments, description=...) and Example.example(...) are the only
    ways to build one; calling Example(...) directly raises TypeError.
    """
    __introspectable__ = ("arguments", "description")

    def __init__(self, token, arguments, description, /):
        if token is not _EXAMPLE_TOKEN:
            raise TypeError(f"{type(self).__typename__} must be built with example()")
        if not isinstance(arguments, str):
            raise TypeError(f"{type(self).__typename__} 'arguments' must be a string")
        if not isinstance(description, str):
            raise TypeError(f"{type(self).__typename__} 'description' must be a string")
        self._arguments = arguments
        self._description = description

    @classmethod
    def example(cls, arguments, /, description=""):
        return cls(_EXAMPLE_TOKEN, arguments, description)

    def __eq__(self, other):
        if not isinstance(other, Example):
            return NotImplemented
        return (self._arguments, self._description) == (other._arguments, other._description)

    def __hash__(self):
        return hash((Example, self._arguments, self._description))


def example(arguments, /, description=""):
    """
    Build an Example for a command's examples section.

    >>> example("math add 1 2", description="adds two numbers")
    Example(arguments='math add 1 2', description='adds two numbers')
    """
    return Example.example(arguments, description)


def _process_strings(cls, metadata):
    """
    Check the plain string fields. Values are stored exactly as given (no trimming).
    """
    for name in ("abstract", "discussion", "version"):
        if not isinstance(metadata[name], str):
            raise TypeError(f"{cls.__typename__} {name!r} must be a string")


def _process_optionals(cls, metadata):
    """
    Check the nullable string fields; None and "" are distinct states and both kept.
    """
    for name in ("command_name", "super_command_name", "usage"):
        if not isinstance(metadata[name], str | None):
            raise TypeError(f"{cls.__typename__} {name!r} must be a string or None")


def _process_switches(cls, metadata):
    for name in ("should_display", "always_compact_usage_options"):
        if not isinstance(metadata[name], bool):
            raise TypeError(f"{cls.__typename__} {name!r} must be a boolean")


def _process_layout(cls, metadata):
    """
    Check the optional layout integers and drop the absent ones, so the class-level
    defaults stay in effect for them.
    """
    for name in ("help_message_indent", "help_message_label_column_width"):
        if metadata[name] is None:
            del metadata[name]
        elif not isinstance(metadata[name], int) or isinstance(metadata[name], bool):
            raise TypeError(f"{cls.__typename__} {name!r} must be an integer or None")


def _process_tree(cls, metadata):
    """
    Check the subcommand references and freeze their order.

    References are command types; they are neither sorted nor deduplicated, and the
    default subcommand is not required to appear among them.
    """
    if not isinstance(metadata["subcommands"], Iterable) or isinstance(metadata["subcommands"], str):
        raise TypeError(f"{cls.__typename__} 'subcommands' must be an iterable of command types")
    subcommands = tuple(metadata["subcommands"])
    for subcommand in subcommands:
        if not isinstance(subcommand, type):
            raise TypeError(f"{cls.__typename__} 'subcommands' must be an iterable of command types")
    metadata["subcommands"] = subcommands

    if not isinstance(metadata["default_subcommand"], type | None):
        raise TypeError(f"{cls.__typename__} 'default_subcommand' must be a command type or None")


def _process_help(cls, metadata):
    if not isinstance(metadata["help_names"], NameSpecification | None):
        raise TypeError(f"{cls.__typename__} 'help_names' must be a name-specification or None")

    if not isinstance(metadata["examples"], Iterable) or isinstance(metadata["examples"], str):
        raise TypeError(f"{cls.__typename__} 'examples' must be an iterable of examples")
    examples = tuple(metadata["examples"])
    for item in examples:
        if not isinstance(item, Example):
            raise TypeError(f"{cls.__typename__} 'examples' must be an iterable of examples")
    metadata["examples"] = examples


class CommandConfiguration(metaclass=RecordType):
    """
    Immutable metadata for one command.

    Fields
    - command_name: str | None
      Literal name on the command line; None derives it from the command type's name.
    - super_command_name: str | None
      Dash-prefixed command family the command belongs to (experimental, informational).
    - abstract: str
      One-line summary for help output.
    - usage: str | None
      None generates the usage line, "" hides it, any other text replaces it.
      See usage_policy for the tagged form.
    - discussion: str
      Extended description.
    - version: str
      A non-empty version enables the --version flag.
    - should_display: bool
      Whether the command shows up in its parent's subcommand listing.
    - subcommands: list of command types
      One level of the command tree, in display order.
    - default_subcommand: command type | None
      Dispatched to when no subcommand is named; expected to be one of subcommands.
    - help_names: NameSpecification | None
      None inherits the parent's help names (-h, --help at the root).
    - help_message_indent: int (2)
    - help_message_label_column_width: int (26)
    - always_compact_usage_options: bool
      Render the options group of the usage line in compact form.
    - examples: list of Example
      Rendered verbatim, in order.

    Reading a sequence field returns a fresh list; assigning any field raises
    AttributeError. Configurations compare and hash by value.
    """
    __introspectable__ = (
        "command_name",
        "super_command_name",
        "abstract",
        "usage",
        "discussion",
        "version",
        "should_display",
        "subcommands",
        "default_subcommand",
        "help_names",
        "help_message_indent",
        "help_message_label_column_width",
        "always_compact_usage_options",
        "examples",
    )

    # Stored defaults for the optional layout parameters.
    _help_message_indent = 2
    _help_message_label_column_width = 26

    def __init__(
            self,
            *,
            command_name=None,
            super_command_name=None,
            abstract="",
            usage=None,
            discussion="",
            version="",
            should_display=True,
            subcommands=(),
            default_subcommand=None,
            help_names=None,
            help_message_indent=None,
            help_message_label_column_width=None,
            always_compact_usage_options=False,
            examples=(),
    ):
        cls = type(self)
        metadata = {
            "command_name": command_name,
            "super_command_name": super_command_name,
            "abstract": abstract,
            "usage": usage,
            "discussion": discussion,
            "version": version,
            "should_display": should_display,
            "subcommands": subcommands,
            "default_subcommand": default_subcommand,
            "help_names": help_names,
            "help_message_indent": help_message_indent,
            "help_message_label_column_width": help_message_label_column_width,
            "always_compact_usage_options": always_compact_usage_options,
            "examples": examples,
        }
        _process_optionals(cls, metadata)
        _process_strings(cls, metadata)
        _process_switches(cls, metadata)
        _process_layout(cls, metadata)
        _process_tree(cls, metadata)
        _process_help(cls, metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @classmethod
    @warnings.deprecated(
        "CommandConfiguration.legacy() is deprecated; use CommandConfiguration(...) with the usage parameter",
        category=DeprecatedInitializerWarning,
    )
    def legacy(
            cls,
            *,
            command_name=None,
            abstract="",
            discussion="",
            version="",
            should_display=True,
            subcommands=(),
            default_subcommand=None,
            help_names=None,
            help_message_indent=None,
            help_message_label_column_width=None,
            always_compact_usage_options=False,
            examples=(),
    ):
        """
        Build a configuration with the parameter set that predates the usage override.

        Configurations built this way never show a usage line (usage is ""), which is
        what commands written before the override existed have always rendered. The
        canonical constructor with usage omitted generates one instead.

        Every call emits a DeprecatedInitializerWarning through warnings.warn; Python
        shows only its message. Capture it and pass it to charter.faults.report() to
        print the rich form with its title and hint.
        """
        return cls(
            command_name=command_name,
            abstract=abstract,
            usage="",
            discussion=discussion,
            version=version,
            should_display=should_display,
            subcommands=subcommands,
            default_subcommand=default_subcommand,
            help_names=help_names,
            help_message_indent=help_message_indent,
            help_message_label_column_width=help_message_label_column_width,
            always_compact_usage_options=always_compact_usage_options,
            examples=examples,
        )

    @property
    def usage_policy(self):
        """
        The usage field as a Usage variant (AUTO, SUPPRESSED or custom text).
        """
        return Usage.of(self._usage)

    def _fields(self):
        return tuple(getattr(self, "_" + name) for name in type(self).__introspectable__)

    def __eq__(self, other):
        if not isinstance(other, CommandConfiguration):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash((CommandConfiguration, self._fields()))

    def __replace__(self, /, **changes):
        """
        Support copy.replace(configuration, **changes); unchanged fields carry over.
        """
        if unknown := changes.keys() - set(type(self).__introspectable__):
            raise TypeError(f"{type(self).__typename__} has no field(s) {", ".join(map(repr, sorted(unknown)))}")
        fields = dict(zip(type(self).__introspectable__, self._fields()))
        return type(self)(**fields | changes)


__all__ = (
    "UsageKind",
    "Usage",
    "Example",
    "example",
    "CommandConfiguration",
)
