"""
Charter faults (warnings) and rendering.

Scope
- ConfigurationWarning: base warning that carries a message + options and knows
  how to render itself with rich in a short, lowercased, actionable way.
- DeprecatedInitializerWarning: emitted by CommandConfiguration.legacy().
- report(): print a warning to the shared stderr console.

Construction in this package never fails for semantic reasons, so there are no
error types here; wrong argument types surface as plain TypeError at the call site.

Styling
- The host application may override palette keys through a __styles__ mapping in
  __main__ (same keys as the defaults in ConfigurationWarning.__rich__).
"""
from collections import defaultdict
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class ConfigurationWarning(Warning):
    """
    Base warning for configuration-level notices.

    Options
    - title: short headline (defaults to "configuration warning").
    - hint: one-sentence suggestion shown after an arrow.
    - colorful: apply the palette (default False).
    - fancy: wrap the body in a rounded panel (default False).
    """

    def __init__(self, message="", /, **options):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__} message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            "title": "bold #FFC2E0",
            "message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        header = Text.assemble("[ ", text(self.options.get("title", "configuration warning"), "title"), " ]")
        message = text(self.message, "message")
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

        if self.options.get("fancy", False):
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DeprecatedInitializerWarning(ConfigurationWarning, DeprecationWarning):
    """
    Issued when a configuration is built through the pre-usage legacy initializer.
    """

    def __init__(self, message="", /, **options):
        options.setdefault("title", "deprecated initializer")
        options.setdefault("hint", "pass usage=\"\" to CommandConfiguration(...) to keep the usage line suppressed")
        super().__init__(message, **options)


def report(warning, /):
    """
    print a configuration warning to the shared stderr console.

    routing
    - warnings raised by this package (e.g. CommandConfiguration.legacy()) go through
      warnings.warn, whose default output is the plain message only.
    - to show the rich form (title, message, hint), capture them and report them:

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ConfigurationWarning)
            configuration = CommandConfiguration.legacy(...)
        for warning in caught:
            report(warning.message)
    """
    if not isinstance(warning, ConfigurationWarning):
        raise TypeError("report() argument must be a configuration warning")
    console.print(warning)


__all__ = (
    "ConfigurationWarning",
    "DeprecatedInitializerWarning",
    "report",
)
