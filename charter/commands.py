"""
Charter command layer: command types and read-only views over their configuration.

What this module provides
- ParsableCommand: base class for command types. A command type carries its
  CommandConfiguration as the class attribute `configuration` and names itself
  through command_name().
- Helpers that read configurations the way a parsing/help engine must:
  • usage_of(command): the usage policy (generated, suppressed or literal).
  • version_flags(command): ("--version",) when a version is configured.
  • help_names(*path): help flag spellings, inherited toward the root.
  • displayed_subcommands(command): children that appear in listings.
  • default_subcommand(command): the default child, if it is a listed child.
  • walk(command): every path of the subcommand tree, depth first.

Quick example:
    >>> class Add(ParsableCommand):
    ...     configuration = CommandConfiguration(abstract="Print the sum of the values.")
    ...
    >>> class Math(ParsableCommand):
    ...     configuration = CommandConfiguration(
    ...         subcommands=[Add],
    ...         default_subcommand=Add,
    ...         help_names=NameSpecification(Name.long, Name.custom_short("?")),
    ...     )
    ...
    >>> help_names(Math, Add)
    ('--help', '-?')
    >>> [" ".join(map(command_name, path)) for path in walk(Math)]
    ['math', 'math add']
"""
from abc import ABC, abstractmethod

from .configuration import CommandConfiguration, Usage
from .names import NameSpecification
from .utils import hyphenate


class ParsableCommand(ABC):
    """
    Base class for command types.

    Subclasses describe themselves with a class-level `configuration` and implement
    run(). The subcommand tree is made of these types, referenced by the
    `subcommands`/`default_subcommand` fields of each configuration.
    """
    configuration = CommandConfiguration()

    def __init_subclass__(cls, **options):
        super().__init_subclass__(**options)
        if not isinstance(cls.__dict__.get("configuration", cls.configuration), CommandConfiguration):
            raise TypeError(f"{cls.__name__} 'configuration' must be a command-configuration")

    @classmethod
    def command_name(cls):
        """
        The configured command name, or the hyphen-lowercase form of the class name.
        """
        if (name := cls.configuration.command_name) is not None:
            return name
        return hyphenate(cls.__name__)

    @abstractmethod
    def run(self):
        """
        Execution entry point; concrete commands override it. Command types that only
        group subcommands may leave it abstract, as they are never instantiated.
        """


def configuration_of(command, /):
    """
    Return the configuration carried by a command type.
    """
    if not isinstance(command, type) or not isinstance(getattr(command, "configuration", None), CommandConfiguration):
        raise TypeError("configuration_of() argument must be a command type")
    return command.configuration


def command_name(command, /):
    """
    Name of a command type; plain types with a configuration are accepted as well.
    """
    if isinstance(command, type) and issubclass(command, ParsableCommand):
        return command.command_name()
    configuration = configuration_of(command)
    return configuration.command_name if configuration.command_name is not None else hyphenate(command.__name__)


def usage_of(command, /):
    return Usage.of(configuration_of(command).usage)


def version_flags(command, /):
    """
    The version flag spellings offered for command: none when no version is configured.
    """
    return ("--version",) if configuration_of(command).version != "" else ()


def help_names(*path):
    """
    Resolve the help flag spellings for the last command of path.

    path runs from the root command to the command being rendered. The nearest
    command (starting from the end) with help_names set decides; an explicitly
    empty specification yields no help flags. Without any, ("-h", "--help").
    """
    for command in reversed(path):
        if (names := configuration_of(command).help_names) is not None:
            return names.names_for("help")
    return NameSpecification.short_and_long.names_for("help")


def displayed_subcommands(command, /):
    """
    Children of command that should be listed, in configured order.
    """
    return [subcommand for subcommand in configuration_of(command).subcommands
            if configuration_of(subcommand).should_display]


def default_subcommand(command, /):
    """
    The configured default child, or None when unset or not among the subcommands.
    """
    configuration = configuration_of(command)
    if configuration.default_subcommand in configuration.subcommands:
        return configuration.default_subcommand
    return None


def walk(command, /):
    """
    Yield every path (tuple of command types from the root) of the tree, depth first.

    Parents come before their children and children keep their configured order. A
    child that already appears on its own path is not descended into again.
    """
    def descend(path):
        yield path
        for subcommand in configuration_of(path[-1]).subcommands:
            if subcommand not in path:
                yield from descend(path + (subcommand,))

    configuration_of(command)
    yield from descend((command,))


__all__ = (
    "ParsableCommand",
    "configuration_of",
    "command_name",
    "usage_of",
    "version_flags",
    "help_names",
    "displayed_subcommands",
    "default_subcommand",
    "walk",
)
