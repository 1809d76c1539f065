"""Client settings: the server list and the remembered user name."""

from __future__ import annotations

import os
import re
from pathlib import Path

_NUMBER = re.compile(r"[ \t\n\r\f\v]*[+-]?[0-9]+")


class ServerListError(ValueError):
    """Raised when a server cannot be added to or removed from the list."""


def default_config_path() -> Path:
    """Return where the client keeps its settings for the current user."""
    appdata = os.environ.get("APPDATA") if os.name == "nt" else None
    base = Path(appdata) if appdata else Path.home()
    return base / ".roomchat" / "client.ini"


def is_valid_server_address(server: str) -> bool:
    """Check that ``server`` is a dotted IPv4 address without leading zeros."""
    if not server:
        return False
    tokens = server.split(".")
    if len(tokens) != 4:
        return False
    for token in tokens:
        if not _NUMBER.fullmatch(token):
            return False
        if not 0 <= int(token) <= 255:
            return False
        if len(token) > 1 and token[0] == "0":
            return False
    return True


class ClientConfig:
    """Settings stored in a small sectioned text file; loaded on creation."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_config_path()
        self.servers: list[str] = []
        self.remember_me = False
        self.remembered_username = ""
        self.load()

    def _reset(self) -> None:
        self.servers = []
        self.remember_me = False
        self.remembered_username = ""

    def load(self) -> None:
        """Reload settings from the file; a missing file leaves them empty."""
        self._reset()
        if not self.path.is_file():
            return
        self.loads(self.path.read_text(encoding="utf-8"))

    def save(self) -> None:
        """Write settings to the file, creating its directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.dumps(), encoding="utf-8")

    def loads(self, text: str) -> None:
        """Replace the settings with those parsed from ``text``."""
        self._reset()
        section = ""
        for raw in text.splitlines():
            line = raw.strip()
            if not line:
                continue
            if line.startswith("[") and line.endswith("]"):
                section = line[1:-1].lower()
                continue
            if section == "servers":
                self.servers.append(line)
            elif section == "user":
                self._read_user_line(line)

    def _read_user_line(self, line: str) -> None:
        key, sep, value = line.partition("=")
        if not sep:
            return
        key = key.strip().lower()
        value = value.strip()
        if key == "remember":
            self.remember_me = value == "1"
        elif key == "username":
            self.remembered_username = value

    def dumps(self) -> str:
        """Render the settings in the file format."""
        lines = ["[servers]", *self.servers, "", "[user]"]
        lines.append("remember=" + ("1" if self.remember_me else "0"))
        if self.remember_me and self.remembered_username:
            lines.append("username=" + self.remembered_username)
        return "\n".join(lines) + "\n"

    def add_server(self, server: str) -> None:
        """Append a server address, rejecting bad formats and duplicates."""
        if not is_valid_server_address(server):
            raise ServerListError(
                f"invalid server address {server!r}: expected XXX.XXX.XXX.XXX "
                "with each XXX a number from 0 to 255"
            )
        if server in self.servers:
            raise ServerListError(f"server {server!r} is already in the list")
        self.servers.append(server)

    def remove_server(self, server: str) -> int:
        """Remove a server and return the index that should become selected."""
        try:
            index = self.servers.index(server)
        except ValueError:
            raise ServerListError(f"server {server!r} is not in the list") from None
        if len(self.servers) <= 1:
            raise ServerListError("cannot remove the last server from the list")
        del self.servers[index]
        return index if index < len(self.servers) else len(self.servers) - 1