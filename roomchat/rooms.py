"""Client-side bookkeeping of open chat rooms and their message history."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable

MAIN_ROOM_NAME = "general"
SYSTEM_SENDER_NAME = "system"
UNKNOWN_USER_NAME = "Неизвестный пользователь"
SELF_MARK = " (Вы)"
PRIVATE_PREFIX = "@"


@dataclass(frozen=True)
class IncomingMessage:
    """A chat message as the client displays it."""

    room: str
    sender: str
    text: str
    timestamp: datetime = field(default_factory=datetime.now)

    def formatted_time(self) -> str:
        """Return the time of day the message was sent, as HH:MM:SS."""
        return self.timestamp.strftime("%H:%M:%S")


def selectable_rooms(rooms: Iterable[str], open_rooms: Iterable[str]) -> list[tuple[str, bool]]:
    """List public rooms in name order, each flagged if it is already open.

    Private rooms (named ``@user``) and empty names are left out.
    """
    opened = set(open_rooms)
    public = sorted({room for room in rooms if room and not room.startswith(PRIVATE_PREFIX)})
    return [(room, room in opened) for room in public]


def name_change_notice(old_name: str, new_name: str, now: datetime) -> IncomingMessage:
    """Build the system message announcing that a user changed name."""
    return IncomingMessage(
        room=MAIN_ROOM_NAME,
        sender=SYSTEM_SENDER_NAME,
        text=f"{old_name} сменил имя на {new_name}",
        timestamp=now,
    )


class RoomBook:
    """The rooms a client has open, in tab order, with their messages."""

    def __init__(self, current_username: str) -> None:
        self.current_username = current_username
        self._rooms: dict[str, list[IncomingMessage]] = {MAIN_ROOM_NAME: []}

    @property
    def room_names(self) -> list[str]:
        """Open rooms in the order they were opened."""
        return list(self._rooms)

    @property
    def title(self) -> str:
        """Window title showing the current user name."""
        return f"Чат клиента - {self.current_username}"

    def __contains__(self, room_name: object) -> bool:
        return room_name in self._rooms

    def history(self, room_name: str) -> list[IncomingMessage]:
        """Return the messages shown in a room; raises KeyError if it is not open."""
        return list(self._rooms[room_name])

    def add_message(self, msg: IncomingMessage) -> str:
        """Store a message in its room, opening the room if needed.

        A private message addressed to the current user goes to a room named
        after its sender. Messages with empty text open the room but are not
        stored. Returns the room the message went to.
        """
        if msg.room == self.current_username:
            target = msg.sender
            msg = replace(msg, room=msg.sender)
        else:
            target = msg.room
        self.enter_room(target)
        if msg.text:
            self._rooms[target].append(msg)
        return target

    def enter_room(self, room_name: str) -> bool:
        """Open a room; return False if it was already open."""
        if room_name in self._rooms:
            return False
        self._rooms[room_name] = []
        return True

    def leave_room(self, room_name: str) -> bool:
        """Close a room; return False if it was not open.

        The main room can never be left.
        """
        if room_name == MAIN_ROOM_NAME:
            raise ValueError("cannot leave the main room")
        return self._rooms.pop(room_name, None) is not None

    def rename_room(self, old_name: str, new_name: str) -> bool:
        """Rename an open room in place, keeping its position and history."""
        if old_name not in self._rooms:
            return False
        self._rooms = {
            (new_name if name == old_name else name): messages
            for name, messages in self._rooms.items()
        }
        return True

    def change_name(self, new_name: str) -> str:
        """Adopt a new user name, falling back to a placeholder when empty."""
        self.current_username = new_name if new_name else UNKNOWN_USER_NAME
        return self.current_username

    def user_labels(self, users: Iterable[str]) -> list[str]:
        """Return display labels for a room's users, marking the current user."""
        return [
            user + SELF_MARK if user == self.current_username else user
            for user in sorted(set(users))
        ]

    def echo_private(self, room: str, text: str, now: datetime) -> IncomingMessage | None:
        """Show a message the user just sent to a private room.

        The server does not echo private messages back, so the client stores
        its own copy. Returns that copy, or None for a non-private room.
        """
        if not room.startswith(PRIVATE_PREFIX):
            return None
        msg = IncomingMessage(room=room, sender=self.current_username, text=text, timestamp=now)
        self.add_message(msg)
        return msg