"""
Flag naming strategies.

A NameSpecification is an ordered collection of naming elements that turn a
key (for example "help") into concrete command-line spellings:

- Name.short                       -> "-h"        (first character of the key)
- Name.long                        -> "--help"    (key converted to hyphen-case)
- Name.custom_short("?")           -> "-?"
- Name.custom_long("usage")        -> "--usage"
- Name.custom_long("help", with_single_dash=True) -> "-help"

Quick example:
    >>> NameSpecification.short_and_long.names_for("help")
    ('-h', '--help')
    >>> NameSpecification(Name.long, Name.custom_short("?")).names_for("help")
    ('--help', '-?')
"""
import enum

from .utils import hyphenate


class NameKind(enum.Enum):
    """
    kinds of naming elements.
    """
    SHORT = "short"
    LONG = "long"
    CUSTOM_SHORT = "custom-short"
    CUSTOM_LONG = "custom-long"


class Name:
    """
    One naming element of a specification.

    Instances are immutable and compared by value. Use the class attributes
    Name.short / Name.long or the custom_short() / custom_long() factories.
    """
    __slots__ = ("_kind", "_value", "_flag")

    def __init__(self, kind, value="", flag=False, /):
        if not isinstance(kind, NameKind):
            raise TypeError("name 'kind' must be a name-kind")
        if not isinstance(value, str):
            raise TypeError("name 'value' must be a string")
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_flag", bool(flag))

    def __setattr__(self, name, value):
        raise AttributeError(f"name is read-only, cannot set {name!r}")

    @property
    def kind(self):
        return self._kind

    @property
    def value(self):
        return self._value

    @property
    def allowing_joined(self):
        """
        custom short names only: whether "-xVALUE" spelling is accepted by the parser.
        """
        return self._kind is NameKind.CUSTOM_SHORT and self._flag

    @property
    def with_single_dash(self):
        """
        custom long names only: whether the name is spelled with one dash.
        """
        return self._kind is NameKind.CUSTOM_LONG and self._flag

    @classmethod
    def custom_short(cls, char, /, allowing_joined=False):
        if not isinstance(char, str) or len(char) != 1 or char.isspace() or char == "-":
            raise TypeError("custom_short() argument must be a single non-dash character")
        return cls(NameKind.CUSTOM_SHORT, char, allowing_joined)

    @classmethod
    def custom_long(cls, name, /, with_single_dash=False):
        if not isinstance(name, str) or not name.strip():
            raise TypeError("custom_long() argument must be a non-empty string")
        return cls(NameKind.CUSTOM_LONG, name.strip(), with_single_dash)

    def spell(self, key, /):
        """
        Return the concrete spelling of this element for the given key.
        """
        match self._kind:
            case NameKind.SHORT:
                return "-" + hyphenate(key)[:1]
            case NameKind.LONG:
                return "--" + hyphenate(key)
            case NameKind.CUSTOM_SHORT:
                return "-" + self._value
            case NameKind.CUSTOM_LONG:
                return ("-" if self._flag else "--") + self._value

    def __eq__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return (self._kind, self._value, self._flag) == (other._kind, other._value, other._flag)

    def __hash__(self):
        return hash((Name, self._kind, self._value, self._flag))

    def __repr__(self):
        match self._kind:
            case NameKind.SHORT:
                return "Name.short"
            case NameKind.LONG:
                return "Name.long"
            case NameKind.CUSTOM_SHORT:
                return f"Name.custom_short({self._value!r}, allowing_joined={self._flag!r})"
            case NameKind.CUSTOM_LONG:
                return f"Name.custom_long({self._value!r}, with_single_dash={self._flag!r})"


Name.short = Name(NameKind.SHORT)
Name.long = Name(NameKind.LONG)


class NameSpecification:
    """
    Ordered, duplicate-free collection of naming elements.

    Duplicated elements collapse to their first occurrence; spelling order
    follows element order.
    """
    __slots__ = ("_elements",)

    def __init__(self, *elements):
        for element in elements:
            if not isinstance(element, Name):
                raise TypeError("name-specification elements must be names")
        object.__setattr__(self, "_elements", tuple(dict.fromkeys(elements)))

    def __setattr__(self, name, value):
        raise AttributeError(f"name-specification is read-only, cannot set {name!r}")

    @property
    def elements(self):
        return self._elements

    def names_for(self, key, /):
        """
        Spell every element for key, dropping repeated spellings.
        """
        if not isinstance(key, str) or not key:
            raise TypeError("names_for() argument must be a non-empty string")
        return tuple(dict.fromkeys(element.spell(key) for element in self._elements))

    def __bool__(self):
        return bool(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def __eq__(self, other):
        if not isinstance(other, NameSpecification):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self):
        return hash((NameSpecification, self._elements))

    def __repr__(self):
        return f"NameSpecification({", ".join(map(repr, self._elements))})"


NameSpecification.short = NameSpecification(Name.short)
NameSpecification.long = NameSpecification(Name.long)
NameSpecification.short_and_long = NameSpecification(Name.short, Name.long)


__all__ = (
    "NameKind",
    "Name",
    "NameSpecification",
)
