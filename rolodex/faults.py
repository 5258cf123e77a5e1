"""
rolodex faults (parse failures) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every way a command line
  can be rejected. Codes are grouped by domain so logs and searches stay
  predictable.
- ParseFailure: base type that carries the user-facing message plus read-only
  options and knows how to render itself (plain or rich).
- trigger(): central entry point to surface a failure (raise, or print when the
  caller runs in shell mode).
- getdoc(): optional description lookup for a code from the host application.

Classification
- cardinality: a single-valued prefix given zero or several times.
- format: a raw value that does not match its validator (carries the
  validator's constraint message).
- numeric: malformed digits, a number too large for the supported range, or a
  zero where only positive ids make sense.
- exclusion: two modifiers that may not be combined.
- whitespace: a single-word token (tag, keyword) holding internal spaces.
- routing: an unknown command word (interpreter only).

Every failure is recoverable: the caller re-prompts. Nothing here exits the
process.
"""
import inspect
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
    - cardinality (210xx): MISSING_VALUE, REPEATED_VALUE, BLANK_VALUE
    - format (220xx): INVALID_VALUE
    - numeric (230xx): MALFORMED_NUMBER, NUMBER_TOO_LARGE, ZERO_NUMBER
    - exclusion (240xx): EXCLUSIVE_MODIFIERS
    - whitespace (250xx): SPACED_TOKEN
    - routing (260xx): UNKNOWN_COMMAND

    spacing leaves room for additions without reshuffling existing codes.
    """
    # --- cardinality errors (21xxx) ---
    MISSING_VALUE       = 21001
    REPEATED_VALUE      = 21002
    BLANK_VALUE         = 21003

    # --- format errors (22xxx) ---
    INVALID_VALUE       = 22001

    # --- numeric errors (23xxx) ---
    MALFORMED_NUMBER    = 23001
    NUMBER_TOO_LARGE    = 23002
    ZERO_NUMBER         = 23003

    # --- mutual exclusion errors (24xxx) ---
    EXCLUSIVE_MODIFIERS = 24001

    # --- whitespace errors (25xxx) ---
    SPACED_TOKEN        = 25001

    # --- routing errors (26xxx) ---
    UNKNOWN_COMMAND     = 26001

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseFailure(Exception):
    """
    classified rejection of a command line.

    the message is the exact user-facing text; options carry rendering
    context (title, code, hint, shell, fancy, colorful, prog) and any payload
    the raiser wants to attach (prefix, value, ...). a failure never carries a
    partially built invocation.
    """
    __title__ = "parse failure"
    __code__ = Unset

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__}() message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({
            "title": type(self).__title__,
            "code": type(self).__code__,
        } | options)

    @property
    def code(self):
        return self.options["code"]

    @property
    def hint(self):
        return self.options.get("hint")

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)

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

        code = self.options["code"]
        prog = text(getattr(main, "__prog__", self.options.get("prog", "rolodex")), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else "?", styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        parts = [message]
        if hint := self.options.get("hint"):
            parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if self.options.get("fancy", False):
            return Panel(Group(*parts), title=header, title_align="left")

        return Group(header, *parts)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class CardinalityError(ParseFailure):
    __title__ = "wrong number of values"
    __code__ = FaultCode.MISSING_VALUE


class FormatViolationError(ParseFailure, ValueError):
    __title__ = "invalid value"
    __code__ = FaultCode.INVALID_VALUE


class NumericViolationError(ParseFailure):
    __title__ = "invalid number"
    __code__ = FaultCode.MALFORMED_NUMBER


class MalformedNumberError(NumericViolationError): ...


class NumberTooLargeError(NumericViolationError):
    __title__ = "number too large"
    __code__ = FaultCode.NUMBER_TOO_LARGE


class ZeroNumberError(NumericViolationError):
    __title__ = "zero is not allowed"
    __code__ = FaultCode.ZERO_NUMBER


class MutualExclusionError(ParseFailure):
    __title__ = "conflicting modifiers"
    __code__ = FaultCode.EXCLUSIVE_MODIFIERS


class WhitespaceViolationError(ParseFailure):
    __title__ = "unexpected spaces"
    __code__ = FaultCode.SPACED_TOKEN


class UnknownCommandError(ParseFailure):
    __title__ = "unknown command"
    __code__ = FaultCode.UNKNOWN_COMMAND


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseFailure).
    - options are merged into the fault via __replace__(**options) first.
    - in shell mode the fault is printed on the stderr console; otherwise it
      is raised.

    typical options
    - shell, fancy, colorful, prog, hint, docs.
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

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances; when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return inspect.cleandoc(getattr(__import__("__main__"), "__docs__", {})[code])
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParseFailure",
    "CardinalityError",
    "FormatViolationError",
    "NumericViolationError",
    "MalformedNumberError",
    "NumberTooLargeError",
    "ZeroNumberError",
    "MutualExclusionError",
    "WhitespaceViolationError",
    "UnknownCommandError",
    "trigger",
    "getdoc",
)
