"""
rolodex command invocations: the closed set of fully resolved commands.

Each variant is a frozen dataclass; a resolver returns exactly one of them.
Variants carry only the fields that make sense together, so a delete by tags
can never also carry a booking id. Construction re-checks the variant's own
invariants and raises ValueError/TypeError on misuse (a programming error:
resolvers only build variants from values they already validated).
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import final

from .values import Name, ClientName, Tag, Phone, Email, Address, Description, Datetime, Index

FIND_FIELDS = ("name", "tag", "date")


def _require(object, kind, field, /):
    if not isinstance(object, kind):
        raise TypeError(f"{field!r} must be {getattr(kind, '__name__', kind)}, not {type(object).__name__}")


def _require_tags(tags, /):
    if not isinstance(tags, frozenset) or not all(isinstance(tag, Tag) for tag in tags):
        raise TypeError("'tags' must be a frozenset of Tag")


@final
@dataclass(frozen=True, slots=True)
class DeleteByName:
    name: Name

    def __post_init__(self):
        _require(self.name, Name, "name")


@final
@dataclass(frozen=True, slots=True)
class DeleteByNameAndTags:
    name: Name
    tags: frozenset[Tag]

    def __post_init__(self):
        _require(self.name, Name, "name")
        _require_tags(self.tags)
        if not self.tags:
            raise ValueError("'tags' cannot be empty, use DeleteByName instead")


@final
@dataclass(frozen=True, slots=True)
class DeleteByNameAndBooking:
    name: Name
    booking: int

    def __post_init__(self):
        _require(self.name, Name, "name")
        if not isinstance(self.booking, int) or isinstance(self.booking, bool):
            raise TypeError("'booking' must be an integer")
        if self.booking < 1:
            raise ValueError("'booking' must be a positive integer")


@final
@dataclass(frozen=True, slots=True)
class FindByCriteria:
    """
    keywords per searchable field; only fields with at least one keyword are
    kept, in the fixed order name, tag, date.
    """
    criteria: MappingProxyType

    def __init__(self, criteria):
        if not hasattr(criteria, "items"):
            raise TypeError("'criteria' must be a mapping")
        unknown = set(criteria) - set(FIND_FIELDS)
        if unknown:
            raise ValueError(f"unknown search fields: {', '.join(sorted(unknown))}")
        kept = {key: tuple(criteria[key]) for key in FIND_FIELDS if criteria.get(key)}
        if not kept:
            raise ValueError("'criteria' needs at least one keyword")
        object.__setattr__(self, "criteria", MappingProxyType(kept))

    def keywords(self, name, /):
        return self.criteria.get(name, ())


@final
@dataclass(frozen=True, slots=True)
class AddPerson:
    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        _require(self.name, Name, "name")
        _require(self.phone, Phone, "phone")
        _require(self.email, Email, "email")
        _require(self.address, Address, "address")
        _require_tags(self.tags)


@final
@dataclass(frozen=True, slots=True)
class AddBooking:
    client: ClientName
    datetime: Datetime
    description: Description

    def __post_init__(self):
        _require(self.client, ClientName, "client")
        _require(self.datetime, Datetime, "datetime")
        _require(self.description, Description, "description")


@final
@dataclass(frozen=True, slots=True)
class EditPerson:
    """
    fields left as None are kept unchanged by the executor; tags set to an
    empty frozenset clears every tag.
    """
    index: Index
    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    tags: frozenset[Tag] | None = None

    def __post_init__(self):
        _require(self.index, Index, "index")
        for name, kind in (("name", Name), ("phone", Phone), ("email", Email), ("address", Address)):
            if (value := getattr(self, name)) is not None:
                _require(value, kind, name)
        if self.tags is not None:
            _require_tags(self.tags)
        if not self.edits():
            raise ValueError("at least one field must be edited")

    def edits(self):
        """return the names of the fields this edit changes."""
        return tuple(
            name for name in ("name", "phone", "email", "address", "tags") if getattr(self, name) is not None
        )


Invocation = (
    DeleteByName
    | DeleteByNameAndTags
    | DeleteByNameAndBooking
    | FindByCriteria
    | AddPerson
    | AddBooking
    | EditPerson
)


__all__ = (
    "FIND_FIELDS",
    "DeleteByName",
    "DeleteByNameAndTags",
    "DeleteByNameAndBooking",
    "FindByCriteria",
    "AddPerson",
    "AddBooking",
    "EditPerson",
    "Invocation",
)
