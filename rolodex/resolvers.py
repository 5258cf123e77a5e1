"""
rolodex command resolvers: from an argument string to one invocation.

What this module provides
- Resolver: base class. A resolver declares
  • __command__: the command word it serves (used by the interpreter),
  • __prefixes__: role → default Prefix (overridable per instance, since the
    prefix vocabulary belongs to the dispatch layer),
  • __rules__: the ordered names of its rule methods.
- DeleteResolver, FindResolver, AddResolver, BookResolver, EditResolver.

Rules
- A rule is a method rule(arguments, state) that either
  • raises a ParseFailure (resolution stops, nothing is built),
  • returns an invocation (resolution stops with that result), or
  • returns Unset (move on to the next rule).
- state is a fresh namespace per call where earlier rules leave what later
  rules need (the validated name, the parsed booking id, ...).
- Precedence is therefore the order of __rules__, nothing else: reading the
  tuple tells which diagnostic wins when an input is wrong in several ways.

Quick example
    >>> DeleteResolver().resolve(" n/Alex Yeoh b/1")
    DeleteByNameAndBooking(name=name('Alex Yeoh'), booking=1)
"""
import re
from types import MappingProxyType, SimpleNamespace

from .faults import (
    FaultCode,
    CardinalityError,
    FormatViolationError,
    MalformedNumberError,
    NumberTooLargeError,
    ZeroNumberError,
    MutualExclusionError,
    WhitespaceViolationError,
)
from .invocations import (
    DeleteByName,
    DeleteByNameAndTags,
    DeleteByNameAndBooking,
    FindByCriteria,
    AddPerson,
    AddBooking,
    EditPerson,
)
from .messages import *
from .syntax import *
from .tokenizer import Prefix, tokenize
from .utils import Unset
from .values import INT_MAX, Name, ClientName, Tag, Phone, Email, Address, Description, Datetime, Date, Index
from .values import parse_unsigned, parse_tags


class Resolver:
    """
    ordered rule list over an ArgumentMultimap.

    construction
    - Resolver(**prefixes): every keyword must name a declared role and carry
      a Prefix; omitted roles keep their defaults.

    resolution
    - resolve(raw): tokenize raw with this resolver's prefixes, then apply().
    - apply(arguments): run __rules__ in order on an existing multimap.
    """
    __command__ = Unset
    __prefixes__ = MappingProxyType({})
    __rules__ = ()

    def __init_subclass__(cls, **options):
        super().__init_subclass__(**options)
        for name in cls.__rules__:
            if not callable(getattr(cls, name, None)):
                raise TypeError(f"{cls.__name__} rule {name!r} is not a method")
        for role, prefix in cls.__prefixes__.items():
            if not isinstance(prefix, Prefix):
                raise TypeError(f"{cls.__name__} prefix for {role!r} must be a Prefix")
        cls.__prefixes__ = MappingProxyType(dict(cls.__prefixes__))

    def __init__(self, **prefixes):
        if unknown := set(prefixes) - set(type(self).__prefixes__):
            raise TypeError(f"{type(self).__name__}() got unknown prefix roles: {', '.join(sorted(unknown))}")
        for role, prefix in prefixes.items():
            if not isinstance(prefix, Prefix):
                raise TypeError(f"{type(self).__name__}() prefix for {role!r} must be a Prefix")
        self._prefixes = MappingProxyType(dict(type(self).__prefixes__) | prefixes)

    @property
    def prefixes(self):
        return self._prefixes

    def resolve(self, raw, /):
        """
        tokenize raw and resolve it into an invocation.

        raises a ParseFailure subclass on the first violated rule.
        """
        return self.apply(tokenize(raw, *self._prefixes.values()))

    def apply(self, arguments, /):
        state = SimpleNamespace()
        for name in type(self).__rules__:
            if (result := getattr(self, name)(arguments, state)) is not Unset:
                return result
        raise RuntimeError(f"{type(self).__name__} rules did not produce an invocation")

    def _usage(self, usage, /, **options):
        return CardinalityError(invalid_format(usage), hint="usage: %s" % usage.splitlines()[1], **options)

    def __repr__(self):
        return f"{type(self).__name__}({', '.join('%s=%r' % pair for pair in self._prefixes.items())})"


class DeleteResolver(Resolver):
    """
    delete n/NAME [t/TAG]... | delete n/NAME b/BOOKING_ID

    exactly one name is required; a booking id and tags exclude each other.
    the order below is the precedence of diagnostics: the tag-space check runs
    before any booking check, a malformed booking id is reported before the
    booking/tag conflict, and a zero id is rejected before success.
    """
    __command__ = "delete"
    __prefixes__ = {"name": PREFIX_NAME, "tag": PREFIX_TAG, "booking": PREFIX_BOOKING}
    __rules__ = (
        "_exactly_one_name",
        "_valid_name",
        "_tags_without_spaces",
        "_booking_is_digits",
        "_booking_fits",
        "_booking_not_zero",
        "_booking_or_tags",
        "_delete_by_booking",
        "_tags_not_blank",
        "_delete_by_name",
        "_delete_by_tags",
    )

    def _exactly_one_name(self, arguments, state):
        names = arguments.get_all_values(self._prefixes["name"])
        if not names:
            raise self._usage(DELETE_USAGE, prefix=self._prefixes["name"])
        if len(names) > 1:
            raise CardinalityError(
                invalid_format(DELETE_EXACTLY_ONE_NAME),
                code=FaultCode.REPEATED_VALUE,
                hint="delete one person at a time",
                prefix=self._prefixes["name"],
            )
        state.raw_name, = names
        return Unset

    def _valid_name(self, arguments, state):
        if not Name.is_valid(state.raw_name):
            raise FormatViolationError(invalid_format(Name.__constraints__), title="invalid name", value=state.raw_name)
        state.name = Name(state.raw_name)
        return Unset

    def _tags_without_spaces(self, arguments, state):
        raws = arguments.get_all_values(self._prefixes["tag"])
        for raw in raws:
            if any(char.isspace() for char in raw.strip()):
                raise WhitespaceViolationError(
                    invalid_format(DELETE_TAG_NO_SPACES),
                    hint="write t/%s" % " t/".join(raw.split()),
                    value=raw,
                )
        state.tagged = arguments.is_present(self._prefixes["tag"])
        state.tags = [tag for raw in raws if (tag := raw.strip())]
        return Unset

    def _booking_is_digits(self, arguments, state):
        state.booking = Unset
        if (raw := arguments.get_value(self._prefixes["booking"])) is None:
            return Unset
        if not re.fullmatch(r"[0-9]+", text := raw.strip()):
            raise MalformedNumberError(
                invalid_format(DELETE_BOOKING_USAGE),
                hint="booking ids are whole numbers such as b/1",
                value=raw,
            )
        state.booking = text
        return Unset

    def _booking_fits(self, arguments, state):
        if state.booking is Unset:
            return Unset
        try:
            state.booking = parse_unsigned(state.booking)
        except OverflowError:
            raise NumberTooLargeError(
                DELETE_BOOKING_TOO_LARGE,
                hint="the largest booking id is %d" % INT_MAX,
                value=state.booking,
            ) from None
        return Unset

    def _booking_not_zero(self, arguments, state):
        if state.booking == 0:
            raise ZeroNumberError(DELETE_BOOKING_ZERO, hint="booking ids start at 1")
        return Unset

    def _booking_or_tags(self, arguments, state):
        if state.booking is not Unset and state.tagged:
            raise MutualExclusionError(
                invalid_format(DELETE_BOOKING_OR_TAG),
                hint="drop either the b/ or the t/ part",
                prefixes=(self._prefixes["booking"], self._prefixes["tag"]),
            )
        return Unset

    def _delete_by_booking(self, arguments, state):
        if state.booking is Unset:
            return Unset
        return DeleteByNameAndBooking(state.name, state.booking)

    def _tags_not_blank(self, arguments, state):
        if state.tagged and not state.tags:
            raise CardinalityError(
                invalid_format(DELETE_TAG_USAGE),
                code=FaultCode.BLANK_VALUE,
                hint="write a tag right after t/",
                prefix=self._prefixes["tag"],
            )
        return Unset

    def _delete_by_name(self, arguments, state):
        if state.tags:
            return Unset
        return DeleteByName(state.name)

    def _delete_by_tags(self, arguments, state):
        return DeleteByNameAndTags(state.name, parse_tags(state.tags))


class FindResolver(Resolver):
    """
    find [n/NAME]... [t/TAG]... [d/DATE]...

    one keyword per prefix occurrence; blank occurrences are ignored as long
    as at least one keyword remains.
    """
    __command__ = "find"
    __prefixes__ = {"name": PREFIX_NAME, "tag": PREFIX_TAG, "date": PREFIX_DATE}
    __rules__ = (
        "_no_preamble",
        "_some_keyword",
        "_one_keyword_each",
        "_valid_tags",
        "_valid_dates",
        "_find",
    )

    def _no_preamble(self, arguments, state):
        if arguments.preamble.strip():
            raise self._usage(FIND_USAGE, value=arguments.preamble)
        return Unset

    def _some_keyword(self, arguments, state):
        state.keywords = {
            field: [keyword for raw in arguments.get_all_values(self._prefixes[field]) if (keyword := raw.strip())]
            for field in ("name", "tag", "date")
        }
        if not any(state.keywords.values()):
            raise self._usage(FIND_USAGE)
        return Unset

    def _one_keyword_each(self, arguments, state):
        for field, keywords in state.keywords.items():
            for keyword in keywords:
                if len(keyword.split()) > 1:
                    raise WhitespaceViolationError(
                        invalid_format(FIND_ONE_KEYWORD),
                        hint="write %s" % " ".join(self._prefixes[field] + word for word in keyword.split()),
                        value=keyword,
                    )
        return Unset

    def _valid_tags(self, arguments, state):
        state.keywords["tag"] = [str(Tag(keyword)) for keyword in state.keywords["tag"]]
        return Unset

    def _valid_dates(self, arguments, state):
        state.keywords["date"] = [str(Date(keyword)) for keyword in state.keywords["date"]]
        return Unset

    def _find(self, arguments, state):
        return FindByCriteria({field: tuple(dict.fromkeys(keywords)) for field, keywords in state.keywords.items()})


class AddResolver(Resolver):
    """
    add n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...
    """
    __command__ = "add"
    __prefixes__ = {
        "name": PREFIX_NAME,
        "phone": PREFIX_PHONE,
        "email": PREFIX_EMAIL,
        "address": PREFIX_ADDRESS,
        "tag": PREFIX_TAG,
    }
    __rules__ = (
        "_required_present",
        "_no_duplicates",
        "_valid_fields",
        "_valid_tags",
        "_add",
    )
    __required__ = ("name", "phone", "email", "address")

    def _required_present(self, arguments, state):
        missing = [role for role in self.__required__ if not arguments.is_present(self._prefixes[role])]
        if missing or arguments.preamble.strip():
            raise self._usage(ADD_USAGE, missing=tuple(missing))
        return Unset

    def _no_duplicates(self, arguments, state):
        arguments.verify_no_duplicate_prefixes_for(*(self._prefixes[role] for role in self.__required__))
        return Unset

    def _valid_fields(self, arguments, state):
        state.name = Name(arguments.get_value(self._prefixes["name"]))
        state.phone = Phone(arguments.get_value(self._prefixes["phone"]))
        state.email = Email(arguments.get_value(self._prefixes["email"]))
        state.address = Address(arguments.get_value(self._prefixes["address"]))
        return Unset

    def _valid_tags(self, arguments, state):
        state.tags = parse_tags(arguments.get_all_values(self._prefixes["tag"]))
        return Unset

    def _add(self, arguments, state):
        return AddPerson(state.name, state.phone, state.email, state.address, state.tags)


class BookResolver(Resolver):
    """
    book n/CLIENT_NAME d/YYYY-MM-DD HH:MM desc/DESCRIPTION
    """
    __command__ = "book"
    __prefixes__ = {"client": PREFIX_NAME, "datetime": PREFIX_DATE, "description": PREFIX_DESCRIPTION}
    __rules__ = (
        "_required_present",
        "_no_duplicates",
        "_valid_client",
        "_valid_datetime",
        "_valid_description",
        "_book",
    )

    def _required_present(self, arguments, state):
        missing = [role for role, prefix in self._prefixes.items() if not arguments.is_present(prefix)]
        if missing or arguments.preamble.strip():
            raise self._usage(BOOK_USAGE, missing=tuple(missing))
        return Unset

    def _no_duplicates(self, arguments, state):
        arguments.verify_no_duplicate_prefixes_for(*self._prefixes.values())
        return Unset

    def _valid_client(self, arguments, state):
        state.client = ClientName(arguments.get_value(self._prefixes["client"]))
        return Unset

    def _valid_datetime(self, arguments, state):
        state.datetime = Datetime(arguments.get_value(self._prefixes["datetime"]))
        return Unset

    def _valid_description(self, arguments, state):
        state.description = Description(arguments.get_value(self._prefixes["description"]))
        return Unset

    def _book(self, arguments, state):
        return AddBooking(state.client, state.datetime, state.description)


class EditResolver(Resolver):
    """
    edit INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...

    a single blank t/ clears every tag of the person.
    """
    __command__ = "edit"
    __prefixes__ = AddResolver.__prefixes__
    __rules__ = (
        "_valid_index",
        "_no_duplicates",
        "_valid_fields",
        "_valid_tags",
        "_something_edited",
        "_edit",
    )
    __fields__ = {"name": Name, "phone": Phone, "email": Email, "address": Address}

    def _valid_index(self, arguments, state):
        if not (preamble := arguments.preamble.strip()):
            raise self._usage(EDIT_USAGE)
        state.index = Index(preamble)
        return Unset

    def _no_duplicates(self, arguments, state):
        arguments.verify_no_duplicate_prefixes_for(*(self._prefixes[role] for role in self.__fields__))
        return Unset

    def _valid_fields(self, arguments, state):
        state.fields = {}
        for role, kind in self.__fields__.items():
            if (raw := arguments.get_value(self._prefixes[role])) is not None:
                state.fields[role] = kind(raw)
        return Unset

    def _valid_tags(self, arguments, state):
        raws = arguments.get_all_values(self._prefixes["tag"])
        if not raws:
            state.tags = None
        elif len(raws) == 1 and not raws[0].strip():
            state.tags = frozenset()
        else:
            state.tags = parse_tags(raws)
        return Unset

    def _something_edited(self, arguments, state):
        if not state.fields and state.tags is None:
            raise CardinalityError(EDIT_NOTHING, hint="usage: %s" % EDIT_USAGE.splitlines()[1])
        return Unset

    def _edit(self, arguments, state):
        return EditPerson(state.index, tags=state.tags, **state.fields)


__all__ = (
    "Resolver",
    "DeleteResolver",
    "FindResolver",
    "AddResolver",
    "BookResolver",
    "EditResolver",
)
