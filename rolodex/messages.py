"""
Fixed user-facing message templates.

Every ParseFailure raised by the resolvers carries one of these texts, so the
shell (and the tests) can compare messages verbatim.
"""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INDEX_TOO_LARGE = "Index provided is too large!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): %s"


def invalid_format(detail, /):
    """Wrap a usage or constraint text in the generic invalid-format frame."""
    return MESSAGE_INVALID_COMMAND_FORMAT % detail


# delete
DELETE_USAGE = (
    "delete: Deletes the person identified by name, or only some of their tags or one of their bookings.\n"
    "Parameters: n/NAME [t/TAG]... or n/NAME b/BOOKING_ID\n"
    "Example: delete n/Alex Yeoh t/friend"
)
DELETE_EXACTLY_ONE_NAME = "Please provide exactly 1 name only!"
DELETE_TAG_NO_SPACES = "Tags may not contain spaces! Use a separate t/ for every tag (e.g. t/friend t/colleague)."
DELETE_TAG_USAGE = (
    "delete: Deletes tags from the person identified by name.\n"
    "Parameters: n/NAME t/TAG [t/TAG]...\n"
    "Example: delete n/Alex Yeoh t/friend"
)
DELETE_BOOKING_USAGE = (
    "delete: Deletes a booking from the person identified by name.\n"
    "Parameters: n/NAME b/BOOKING_ID\n"
    "Example: delete n/Alex Yeoh b/1"
) + " (Integer value greater than 0!)"
DELETE_BOOKING_OR_TAG = "Please provide either a booking ID (b/) or tags (t/), not both!"
DELETE_BOOKING_ZERO = "Booking ID cannot be 0!"
DELETE_BOOKING_TOO_LARGE = "Booking ID provided is too large!"

# find
FIND_USAGE = (
    "find: Finds all persons matching any of the given keywords (one keyword per prefix).\n"
    "Parameters: [n/NAME]... [t/TAG]... [d/DATE]...\n"
    "Example: find n/Alex t/friend d/2025-12-15"
)
FIND_ONE_KEYWORD = "Please provide only one keyword per prefix! Repeat the prefix for more keywords (e.g. n/Alex n/Bernice)."

# add
ADD_USAGE = (
    "add: Adds a person to the address book.\n"
    "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
    "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 t/friend"
)

# book
BOOK_USAGE = (
    "book: Adds a booking for a client.\n"
    "Parameters: n/CLIENT_NAME d/YYYY-MM-DD HH:MM desc/DESCRIPTION\n"
    "Example: book n/Alex Yeoh d/2024-12-25 14:30 desc/Annual review"
)

# edit
EDIT_USAGE = (
    "edit: Edits the details of the person identified by the index number used in the displayed list.\n"
    "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
    "Example: edit 1 p/91234567 e/johndoe@example.com"
)
EDIT_NOTHING = "At least one field to edit must be provided."


__all__ = (
    "MESSAGE_INVALID_COMMAND_FORMAT",
    "MESSAGE_UNKNOWN_COMMAND",
    "MESSAGE_INVALID_INDEX",
    "MESSAGE_INDEX_TOO_LARGE",
    "MESSAGE_DUPLICATE_FIELDS",
    "invalid_format",
    "DELETE_USAGE",
    "DELETE_EXACTLY_ONE_NAME",
    "DELETE_TAG_NO_SPACES",
    "DELETE_TAG_USAGE",
    "DELETE_BOOKING_USAGE",
    "DELETE_BOOKING_OR_TAG",
    "DELETE_BOOKING_ZERO",
    "DELETE_BOOKING_TOO_LARGE",
    "FIND_USAGE",
    "FIND_ONE_KEYWORD",
    "ADD_USAGE",
    "BOOK_USAGE",
    "EDIT_USAGE",
    "EDIT_NOTHING",
)
