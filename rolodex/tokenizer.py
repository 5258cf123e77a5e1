r"""
rolodex tokenizer: prefix-aware splitting of an argument string.

Overview
- Prefix
  • Immutable marker string (e.g. "n/", "t/") that opens an argument segment.
- tokenize(raw, *prefixes)
  • Scans raw left to right and cuts it at every recognized prefix occurrence.
  • Content-agnostic and total: it never validates and never fails on a str.
- ArgumentMultimap
  • The tokenizer's output: prefix → ordered raw segments, plus the preamble.

Recognition rules
- A declared prefix is recognized only at the start of the string or right
  after a whitespace character, so "john/doe" or "a@b.c/d" never split.
- When two declared prefixes start at the same position, the longer one wins.
- Unknown markers are plain text: they stay inside the segment they appear in.

Segments
- A segment is the exact text between the end of one recognized prefix and
  the start of the next recognized prefix (or end of input). It is stored
  untrimmed and never re-segmented.
- "n/" followed directly by another prefix or by the end of input yields an
  empty-string segment: present-but-empty is not the same as absent.

Quick example:
    >>> arguments = tokenize("delete n/Alex Yeoh t/friend t/vip", Prefix("n/"), Prefix("t/"))
    >>> arguments.preamble
    'delete '
    >>> arguments.get_value(Prefix("n/"))
    'Alex Yeoh '
    >>> arguments.get_all_values(Prefix("t/"))
    ['friend ', 'vip']
"""
import functools
import re
from typing import final

from .faults import CardinalityError, FaultCode
from .messages import MESSAGE_DUPLICATE_FIELDS
from .utils import Sealed, view


@final
class Prefix(str):
    """
    immutable argument marker.

    a prefix is a non-empty string without whitespace; it compares and hashes
    like the plain string it wraps, so lookups work with either form.
    """
    __slots__ = ()

    def __new__(cls, text, /):
        if not isinstance(text, str):
            raise TypeError("Prefix() argument must be a string")
        if not text:
            raise ValueError("Prefix() argument cannot be empty")
        if any(char.isspace() for char in text):
            raise ValueError(f"Prefix() argument cannot contain whitespace: {text!r}")
        return super().__new__(cls, text)

    def __repr__(self):
        return f"Prefix({str(self)!r})"

    def __rich_repr__(self):
        yield str(self)

    def __init_subclass__(cls, **options):
        raise TypeError("type 'Prefix' is not an acceptable base type")


@final
class ArgumentMultimap(Sealed):
    """
    ordered, multi-valued mapping from Prefix to raw argument text.

    reads
    - get_value(prefix): last occurrence (last-wins), None when absent.
    - get_all_values(prefix): every occurrence in encounter order, [] when absent.
    - prefix in multimap / is_present(prefix): presence, independent of emptiness.
    - preamble: untagged text before the first recognized prefix.

    instances are created by tokenize() and are read-only afterwards.
    """
    preamble = view("preamble")

    def __new__(cls, preamble="", values=(), /):
        if not isinstance(preamble, str):
            raise TypeError("ArgumentMultimap() preamble must be a string")
        arguments = {}
        for prefix, value in values:
            if not isinstance(prefix, Prefix) or not isinstance(value, str):
                raise TypeError("ArgumentMultimap() values must be (Prefix, str) pairs")
            arguments.setdefault(prefix, []).append(value)
        with super().__new__(cls) as self:
            setattr(self, "-preamble", preamble)
            setattr(self, "-arguments", arguments)
        return self

    def _occurrences(self, prefix):
        if not isinstance(prefix, str):
            raise TypeError("prefix must be a string")
        return object.__getattribute__(self, "-arguments").get(prefix, ())

    def get_value(self, prefix, /):
        """
        return the raw value of the last occurrence of prefix, or None when the
        prefix never occurred.
        """
        if occurrences := self._occurrences(prefix):
            return occurrences[-1]
        return None

    def get_all_values(self, prefix, /):
        """
        return every raw value of prefix in encounter order (a fresh list).
        """
        return list(self._occurrences(prefix))

    def is_present(self, prefix, /):
        return bool(self._occurrences(prefix))

    def __contains__(self, prefix, /):
        return isinstance(prefix, str) and self.is_present(prefix)

    def prefixes(self):
        """return the recognized prefixes in first-encounter order."""
        return tuple(object.__getattribute__(self, "-arguments"))

    def verify_no_duplicate_prefixes_for(self, *prefixes):
        """
        raise CardinalityError when any of the given single-valued prefixes
        occurs more than once; the message names all offenders at once.
        """
        duplicates = [prefix for prefix in dict.fromkeys(prefixes) if len(self._occurrences(prefix)) > 1]
        if duplicates:
            raise CardinalityError(
                MESSAGE_DUPLICATE_FIELDS % " ".join(duplicates),
                code=FaultCode.REPEATED_VALUE,
                title="repeated single-valued field",
                hint="keep only one of %s" % ", ".join(map(repr, map(str, duplicates))),
                prefixes=tuple(duplicates),
            )

    def __eq__(self, other):
        if not isinstance(other, ArgumentMultimap):
            return NotImplemented
        return (self.preamble, self._as_dict()) == (other.preamble, other._as_dict())

    __hash__ = None

    def _as_dict(self):
        return {str(prefix): list(values) for prefix, values in object.__getattribute__(self, "-arguments").items()}

    def __rich_repr__(self):
        yield "preamble", self.preamble
        for prefix, values in self._as_dict().items():
            yield prefix, values

    def __repr__(self):
        return f"argument-multimap({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"


@functools.cache
def _compile_pattern(prefixes, /):
    """
    compile the recognizer for an ordered tuple of prefixes (longest first).
    - (?:^|(?<=\s)) anchors each occurrence at a word boundary made of
      whitespace or the start of input.
    """
    alternatives = "|".join(map(re.escape, prefixes))
    return re.compile(rf"(?:^|(?<=\s))(?:{alternatives})")


def tokenize(raw, /, *prefixes):
    """
    split raw into an ArgumentMultimap keyed by the declared prefixes.

    parameters
    - raw: str
      the argument string (command word already stripped, or not: anything
      before the first recognized prefix lands in the preamble).
    - *prefixes: Prefix
      the markers to recognize; duplicates are ignored.

    returns
    - ArgumentMultimap with untrimmed segments in encounter order.

    errors
    - TypeError for a non-str raw or a non-Prefix marker (programming errors);
      tokenization itself cannot fail.
    """
    if not isinstance(raw, str):
        raise TypeError("tokenize() first argument must be a string")
    for prefix in prefixes:
        if not isinstance(prefix, Prefix):
            raise TypeError("tokenize() prefixes must be Prefix instances")

    if not prefixes:
        return ArgumentMultimap(raw)

    declared = {str(prefix): prefix for prefix in prefixes}
    ordered = tuple(sorted(declared, key=lambda prefix: (-len(prefix), prefix)))
    matches = list(_compile_pattern(ordered).finditer(raw))

    if not matches:
        return ArgumentMultimap(raw)

    values = []
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(raw)
        values.append((declared[match.group()], raw[match.end():end]))

    return ArgumentMultimap(raw[:matches[0].start()], values)


__all__ = (
    "Prefix",
    "ArgumentMultimap",
    "tokenize",
)
