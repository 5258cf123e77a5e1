"""
Default prefix vocabulary.

Resolvers accept their prefixes as keyword parameters; these are only the
defaults the bundled interpreter wires in.
"""
from .tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_BOOKING = Prefix("b/")
PREFIX_DATE = Prefix("d/")
PREFIX_DESCRIPTION = Prefix("desc/")

__all__ = (
    "PREFIX_NAME",
    "PREFIX_PHONE",
    "PREFIX_EMAIL",
    "PREFIX_ADDRESS",
    "PREFIX_TAG",
    "PREFIX_BOOKING",
    "PREFIX_DATE",
    "PREFIX_DESCRIPTION",
)
