r"""
rolodex validated values.

Overview
- Value
  • Base of every scalar domain value. The only way to obtain one is the
    validating constructor: Name(raw) normalizes raw, checks it and either
    returns a frozen instance or raises a ParseFailure. An invalid value is
    never observable.
  • is_valid(raw) is the matching pure predicate.
  • Instances are immutable, hash and compare by (type, value), and print as
    their normalized text.

- Concrete values (all sealed)
  • Name: any characters, 1-100 long after trimming and collapsing spaces.
  • ClientName: booking client name; letters, digits, space, - ' . / \ only,
    at least one letter, 1-100 long.
  • Tag: ASCII letters and digits only, 1-50 long.
  • Phone: digit groups with an optional leading '+', at least 3 digits, 1-50 long.
  • Email: local@domain, 1-50 long.
  • Address: anything non-blank, at most 200 long.
  • Description: booking description, 1-500 long.
  • Datetime: "YYYY-MM-DD HH:MM", resolved strictly against the calendar.
  • Date: "YYYY-MM-DD", resolved strictly against the calendar.
  • Index: 1-based position; digits only, fits a signed 32-bit integer, non-zero.

- Helpers
  • parse_unsigned(text): overflow-checked parse of a digit string.
  • parse_tags(raws): validate raw tags into a frozenset (duplicates collapse).

Normalization always trims; Name and ClientName also collapse internal
whitespace runs to a single space, so Name("  Rachel   Walker ") equals
Name("Rachel Walker").
"""
import datetime
import re

from .faults import ParseFailure, FormatViolationError, MalformedNumberError, NumberTooLargeError, ZeroNumberError
from .messages import MESSAGE_INVALID_INDEX, MESSAGE_INDEX_TOO_LARGE
from .utils import Sealed, rename, view

INT_MAX = 2 ** 31 - 1


def parse_unsigned(text, /, *, maximum=INT_MAX):
    """
    parse a non-empty string of ASCII digits, checking for overflow.

    raises
    - ValueError: text is empty or holds anything but 0-9.
    - OverflowError: the number is greater than maximum.

    the length is checked before int() runs, so an arbitrarily long literal
    is reported as too large rather than tripping the interpreter's own
    digit limit.
    """
    if not isinstance(text, str):
        raise TypeError("parse_unsigned() argument must be a string")
    if not re.fullmatch(r"[0-9]+", text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    significant = text.lstrip("0") or "0"
    if len(significant) > len(str(maximum)) or int(significant) > maximum:
        raise OverflowError(f"integer {text} is greater than {maximum}")
    return int(significant)


class ValueType(type):
    """
    metaclass of validated values.

    - derives __typename__ from the class name (CamelCase → kebab-case) for
      messages and representations.
    - seals classes declared with `final=True` against further subclassing.
    """

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(cls, name, bases, namespace | {
            "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
        })

        if options.get("final", False):
            @rename("__init_subclass__")
            def __init_subclass__(cls, **options):  # NOQA: F-841
                raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
            self.__init_subclass__ = classmethod(__init_subclass__)

        return self


class Value(Sealed, metaclass=ValueType):
    """
    immutable, validated scalar.

    subclasses provide
    - __constraints__: the user-facing constraint message.
    - _normalize(text): canonical form (default: trimmed).
    - _predicate(text): True when the normalized text is acceptable.
    - _convert(text): payload stored as .value (default: the text itself).
    subclasses with several failure kinds override _validate(text) instead.
    """
    __constraints__ = ""

    value = view("value")

    def __new__(cls, raw, /):
        if cls is Value:
            raise TypeError("type 'Value' cannot be instantiated directly")
        if not isinstance(raw, str):
            raise TypeError(f"{cls.__name__}() argument must be a string")
        text = cls._normalize(raw)
        cls._validate(text)
        with super().__new__(cls) as self:
            setattr(self, "-value", cls._convert(text))
        return self

    @classmethod
    def is_valid(cls, raw, /):
        """
        return True if raw would be accepted by the constructor.
        """
        if not isinstance(raw, str):
            raise TypeError(f"{cls.__name__}.is_valid() argument must be a string")
        try:
            cls._validate(cls._normalize(raw))
        except ParseFailure:
            return False
        return True

    @classmethod
    def _normalize(cls, text):
        return text.strip()

    @classmethod
    def _predicate(cls, text):
        return True

    @classmethod
    def _validate(cls, text):
        if not cls._predicate(text):
            raise FormatViolationError(
                cls.__constraints__,
                title="invalid %s" % cls.__typename__.replace("-", " "),
                value=text,
            )

    @classmethod
    def _convert(cls, text):
        return text

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{type(self).__typename__}({str(self)!r})"

    def __rich_repr__(self):
        yield str(self)


class Name(Value, final=True):
    __constraints__ = "Names can take any values, should not be blank, and must be at most 100 characters long."

    @classmethod
    def _normalize(cls, text):
        return " ".join(text.split())

    @classmethod
    def _predicate(cls, text):
        return 1 <= len(text) <= 100


class ClientName(Value, final=True):
    __constraints__ = (
        "Client name is invalid!\n"
        "Requirements:\n"
        "• Must be 1-100 characters long\n"
        "• Must contain at least one letter\n"
        "• Can include letters, numbers, spaces, hyphens (-), apostrophes ('), periods (.), and slashes (/)\n"
        "Examples: 'John Doe', 'Mary-Jane O'Brien', 'Ahmad S/O Rahman'"
    )

    @classmethod
    def _normalize(cls, text):
        return " ".join(text.split())

    @classmethod
    def _predicate(cls, text):
        return (
            1 <= len(text) <= 100
            and re.fullmatch(r"[A-Za-z0-9 .'\\/-]+", text) is not None
            and re.search(r"[A-Za-z]", text) is not None
        )


class Tag(Value, final=True):
    __constraints__ = "Tag names should be alphanumeric (no spaces or hyphens) and at most 50 characters long."

    @classmethod
    def _predicate(cls, text):
        return re.fullmatch(r"[A-Za-z0-9]{1,50}", text) is not None


class Phone(Value, final=True):
    __constraints__ = (
        "Phone numbers should only contain digits, optionally preceded by '+' and separated by single "
        "spaces or hyphens, have at least 3 digits, and be at most 50 characters long."
    )

    @classmethod
    def _predicate(cls, text):
        return (
            1 <= len(text) <= 50
            and re.fullmatch(r"\+?[0-9]+(?:[ -][0-9]+)*", text) is not None
            and sum(char.isdigit() for char in text) >= 3
        )


_ALPHANUMERIC = r"[^\W_]+"
_EMAIL = re.compile(
    rf"{_ALPHANUMERIC}(?:[+_.-]{_ALPHANUMERIC})*"  # local part
    rf"@(?:{_ALPHANUMERIC}(?:-{_ALPHANUMERIC})*\.)*"  # domain labels
    rf"(?=[^.]{{2,}}$){_ALPHANUMERIC}(?:-{_ALPHANUMERIC})*",  # last label, 2+ chars
    re.ASCII
)


class Email(Value, final=True):
    __constraints__ = (
        "Emails should be of the format local-part@domain and at most 50 characters long.\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). It may not start or end with a special character.\n"
        "2. This is followed by a '@' and then a domain name made of labels separated by periods.\n"
        "Each label consists of alphanumeric characters, possibly separated by hyphens, and the last "
        "label must be at least 2 characters long."
    )

    @classmethod
    def _predicate(cls, text):
        return 1 <= len(text) <= 50 and _EMAIL.fullmatch(text) is not None


class Address(Value, final=True):
    __constraints__ = "Addresses can take any values, should not be blank, and must be at most 200 characters long."

    @classmethod
    def _predicate(cls, text):
        return 1 <= len(text) <= 200


class Description(Value, final=True):
    __constraints__ = "Booking description must be between 1 and 500 characters long."

    @classmethod
    def _predicate(cls, text):
        return 1 <= len(text) <= 500


class Datetime(Value, final=True):
    """
    booking date and time, "YYYY-MM-DD HH:MM".

    the shape is checked first; a well-shaped text that does not exist on the
    calendar (month 13, 30 February, 24:00) fails with its own message.
    """
    __constraints__ = (
        "Invalid date/time format or value!\n"
        "Please use the format: YYYY-MM-DD HH:MM (e.g., 2024-12-25 14:30)"
    )
    __layout__ = "%Y-%m-%d %H:%M"
    __shape__ = r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}"

    @classmethod
    def _validate(cls, text):
        if not re.fullmatch(cls.__shape__, text):
            raise FormatViolationError(cls.__constraints__, title="invalid datetime", value=text)
        try:
            datetime.datetime.strptime(text, cls.__layout__)
        except ValueError:
            raise FormatViolationError(
                f"\"{text}\" is not a valid datetime",
                title="invalid datetime",
                hint="check that the month, day, hour and minute exist",
                value=text,
            ) from None

    @classmethod
    def _convert(cls, text):
        return datetime.datetime.strptime(text, cls.__layout__)

    def __str__(self):
        return self.value.strftime(type(self).__layout__)


class Date(Value, final=True):
    """calendar date, "YYYY-MM-DD"."""
    __constraints__ = (
        "Invalid date format or value!\n"
        "Please use the format: YYYY-MM-DD (e.g., 2024-12-25)"
    )
    __layout__ = "%Y-%m-%d"
    __shape__ = r"[0-9]{4}-[0-9]{2}-[0-9]{2}"

    @classmethod
    def _validate(cls, text):
        if not re.fullmatch(cls.__shape__, text):
            raise FormatViolationError(cls.__constraints__, title="invalid date", value=text)
        try:
            datetime.datetime.strptime(text, cls.__layout__)
        except ValueError:
            raise FormatViolationError(
                f"\"{text}\" is not a valid date",
                title="invalid date",
                hint="check that the month and day exist",
                value=text,
            ) from None

    @classmethod
    def _convert(cls, text):
        return datetime.datetime.strptime(text, cls.__layout__).date()

    def __str__(self):
        return self.value.strftime(type(self).__layout__)


class Index(Value, final=True):
    """
    1-based position in a displayed list.

    failures are classified: non-digits are a format violation, a number
    beyond the signed 32-bit range is "too large", and zero is rejected as
    not being a position at all.
    """
    __constraints__ = MESSAGE_INVALID_INDEX

    @classmethod
    def _validate(cls, text):
        try:
            number = parse_unsigned(text)
        except ValueError:
            raise MalformedNumberError(MESSAGE_INVALID_INDEX, title="invalid index", value=text) from None
        except OverflowError:
            raise NumberTooLargeError(
                MESSAGE_INDEX_TOO_LARGE,
                hint="the largest index is %d" % INT_MAX,
                value=text,
            ) from None
        if number == 0:
            raise ZeroNumberError(MESSAGE_INVALID_INDEX, hint="indexes start at 1", value=text)

    @classmethod
    def _convert(cls, text):
        return parse_unsigned(text)

    @classmethod
    def from_one_based(cls, number, /):
        if not isinstance(number, int) or isinstance(number, bool):
            raise TypeError("Index.from_one_based() argument must be an integer")
        return cls(str(number))

    @property
    def one_based(self):
        return self.value

    @property
    def zero_based(self):
        return self.value - 1


def parse_tags(raws, /):
    """
    validate every raw tag and collect the result into a frozenset.

    each raw tag is trimmed first; the first invalid one raises
    FormatViolationError with the tag constraints.
    """
    if isinstance(raws, str):
        raise TypeError("parse_tags() argument must be an iterable of strings, not a string")
    return frozenset(Tag(raw) for raw in raws)


__all__ = (
    "INT_MAX",
    "parse_unsigned",
    "ValueType",
    "Value",
    "Name",
    "ClientName",
    "Tag",
    "Phone",
    "Email",
    "Address",
    "Description",
    "Datetime",
    "Date",
    "Index",
    "parse_tags",
)
