"""
Charter utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the configuration and command layers.

Overview
- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated wrappers for clean tracebacks and help.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr). Containers are
    handed out as fresh copies, so every reader owns an independent value.

- hyphenate(identifier)
  • Convert a CamelCase type identifier into a hyphen-lowercase command name
    ("HTTPServer" -> "http-server", "AddItem" -> "add-item").

Quick examples
    >>> @rename("do_work")
    ... def work(): ...
    ...
    >>> class X:
    ...     _items = (1, 2)
    ...     items = mirror("items")
    ... X().items
    [1, 2]
    >>> hyphenate("StatsCommand")
    'stats-command'
"""
import builtins
import functools
import re
from collections.abc import Sequence, Mapping, Set


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - Function form: rename(callable, name) -> callable
    - Decorator form: rename(name) -> (decorator)

    Notes
    - Only metadata changes; behavior is untouched.
    - Some built-in or C-implemented callables are not updatable and will
      raise TypeError.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                """Decorator wrapper that applies the new name to the target callable."""
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _immortalize(object):
    """
    Recursively copy container values.

    Behavior
    - Sequence (non-string): a new list with each element processed.
    - Mapping: a new dict with the same keys and processed values.
    - Set: a new set with each element processed.
    - Anything else: returned as-is (types, records and scalars are immutable here).
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return list(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_immortalize, object.values())))
    elif isinstance(object, Set):
        return set(map(_immortalize, object))
    else:
        return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" on the instance and returns a copy
    for container types. There is no setter, so assignment raises AttributeError.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        """
        Property getter that hands out an independent copy of the backing field.
        """
        return _immortalize(getattr(self, "_" + name))

    return property(getter)


@functools.cache
def hyphenate(identifier, /):
    """
    Convert a type identifier into a hyphen-lowercase name.

    Word boundaries are placed before an uppercase letter that follows a
    lowercase letter or digit, and before the last capital of an acronym
    that is followed by a lowercase letter. Underscores become hyphens.

    Examples
    - hyphenate("Math")          -> "math"
    - hyphenate("AddItem")       -> "add-item"
    - hyphenate("HTTPServer")    -> "http-server"
    - hyphenate("Base64Encode")  -> "base64-encode"
    - hyphenate("_Private")      -> "private"
    """
    if not isinstance(identifier, str):
        raise TypeError("hyphenate() argument must be a string")
    words = re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "-", identifier.strip("_"))
    return re.sub(r"[-_]+", "-", words).lower()


__all__ = (
    "rename",
    "mirror",
    "hyphenate",
)
