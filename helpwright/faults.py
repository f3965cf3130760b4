"""
Helpwright faults and rendering.

Scope
- FaultCode: stable numeric identifiers for the preconditions help rendering
  validates.
- HelpFault: base error type (a ValueError) carrying a message plus options
  (title, hint, ...) that knows how to render itself with rich.
- MissingSyntaxError / InvalidHeaderLevelError: the two validated
  preconditions (empty command-line syntax, header level below 1).

Everything else the writers receive (None lists, None tables, empty text) is
a legitimate "nothing to render" case and never reaches this module.

Integration
- Faults are raised synchronously; output already written to the sink stays.
- Hosts may remap codes through a __codes__ mapping and restyle rendering
  through a __styles__ mapping defined in __main__.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes used by help rendering (stable identifiers).

    grouping
    - help preconditions (131xx)
      • MISSING_SYNTAX, INVALID_HEADER_LEVEL
    """
    MISSING_SYNTAX              = 13101
    INVALID_HEADER_LEVEL        = 13102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class HelpFault(ValueError):
    """
    Base type for help rendering faults.

    Subclasses set __code__, __title__ and __hint__ defaults; any of them can
    be overridden per instance through keyword options (code, title, hint).
    """
    __code__ = Unset
    __title__ = "help fault"
    __hint__ = ""

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType({
            "code": self.__code__,
            "title": self.__title__,
            "hint": self.__hint__,
            "colorful": True,
        } | options)

    @property
    def code(self):
        return self.options["code"]

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if self.options["colorful"] else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"
        header = Text.assemble(
            "[ ",
            text(code, styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        renders = [header, text(self.message or "", styler("error-message"))]
        if self.options["hint"]:
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint"))))
        return Group(*renders)


class MissingSyntaxError(HelpFault):
    __code__ = FaultCode.MISSING_SYNTAX
    __title__ = "missing syntax"
    __hint__ = "pass the command line syntax (usually the program name) as the first argument"


class InvalidHeaderLevelError(HelpFault):
    __code__ = FaultCode.INVALID_HEADER_LEVEL
    __title__ = "invalid header level"
    __hint__ = "header levels start at 1"


__all__ = (
    "FaultCode",
    "HelpFault",
    "MissingSyntaxError",
    "InvalidHeaderLevelError",
)
