"""Checks applied to user input before it is sent to the server."""

from __future__ import annotations

_IGNORED = frozenset("\n\r\t")


class MessageRejected(ValueError):
    """Raised when user input must not be sent.

    ``count`` and ``limit`` are set when a message was rejected for length.
    """

    def __init__(self, reason: str, *, count: int | None = None, limit: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.count = count
        self.limit = limit


def count_useful_chars(text: str) -> int:
    """Count the characters of ``text`` other than line breaks and tabs."""
    return sum(1 for ch in text if ch not in _IGNORED)


def has_visible_chars(text: str) -> bool:
    """Return True if ``text`` holds at least one non-whitespace character."""
    return any(not ch.isspace() for ch in text)


def check_outgoing_message(text: str, max_length: int) -> int:
    """Validate a chat message and return its count of useful characters."""
    if not text:
        raise MessageRejected("message is empty")
    if not has_visible_chars(text):
        raise MessageRejected("message contains no meaningful characters")
    count = count_useful_chars(text)
    if count > max_length:
        raise MessageRejected(
            f"message is too long: {count} characters, at most {max_length} allowed",
            count=count,
            limit=max_length,
        )
    return count


def check_new_username(new_name: str, current_username: str) -> str:
    """Validate a requested user name and return it in wire form (``@name``)."""
    if not new_name or new_name.startswith("@"):
        raise MessageRejected("name must not start with @")
    wire_name = "@" + new_name
    if wire_name == current_username:
        raise MessageRejected("name must differ from the current one")
    return wire_name