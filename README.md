# roomchat

Building blocks for a chat organised around rooms. Message text carries light
styling as BBCode (`[b]`, `[i]`, `[u]`) and a fixed set of smileys; users talk
in a shared `general` room, open further rooms and exchange private messages
in rooms named `@user`.

The package uses only the standard library.

## What is in it

- `roomchat.bbcode` – styled text to BBCode and back. `parse_bbcode(text)`
  returns a list of `StyledRun` (text plus a `Style` with `bold`, `italic`,
  `underline`); `to_bbcode(runs)` turns runs back into BBCode, escaping
  brackets and backslashes and dropping trailing line breaks.
  `get_smileys()` lists the `Smiley` entries (emoji, tag, description).
  `BoldHandler`, `ItalicHandler` and `UnderlineHandler` toggle one attribute
  of a `Style` and report its `StyleState` (`ACTIVE`, `INACTIVE`, `MIXED`).
- `roomchat.config` – the client's server list and "remember me" data
  (`ClientConfig`, `is_valid_server_address`, `default_config_path`,
  `ServerListError`).
- `roomchat.validation` – checks applied before sending a message or changing
  a name (`check_outgoing_message`, `check_new_username`,
  `count_useful_chars`, `has_visible_chars`, `MessageRejected`).
- `roomchat.rooms` – client-side bookkeeping of open rooms, their history and
  private chats (`RoomBook`, `IncomingMessage`, `selectable_rooms`,
  `name_change_notice`).
- `roomchat.msgqueue` – a thread-safe per-session queue drained by one
  consumer (`MessageQueue`).
- `roomchat.logger` – an event log written to a file (`EventLogger`).

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Examples

Formatting messages:

```python
from roomchat.bbcode import parse_bbcode, to_bbcode

runs = parse_bbcode("plain [b]bold[/b] [i]italic[/i]")
text = to_bbcode(runs)   # "plain [b]bold[/b] [i]italic[/i]"
```

Checking input before it goes out:

```python
from roomchat.validation import MessageRejected, check_outgoing_message, count_useful_chars

count_useful_chars("a\nb")   # 2 – line breaks and tabs are not counted

try:
    check_outgoing_message("   ", 1000)
except MessageRejected as err:
    print(err)   # message contains no meaningful characters
```

Keeping a list of servers:

```python
from roomchat.config import ClientConfig, is_valid_server_address

is_valid_server_address("192.168.1.11")   # True
is_valid_server_address("010.0.0.1")      # False – no leading zeros

config = ClientConfig("settings/client.ini")
config.add_server("192.168.1.11")
config.remember_me = True
config.remembered_username = "alice"
config.save()
```

`ClientConfig()` without a path uses `default_config_path()`:
`~/.roomchat/client.ini`, or under `%APPDATA%` on Windows. The file is plain
text with a `[servers]` section, one address per line, and a `[user]` section
holding `remember=` and `username=`. `add_server` rejects bad addresses and
duplicates, `remove_server` refuses to remove the last server; both raise
`ServerListError`.

Tracking rooms on the client:

```python
from roomchat.rooms import IncomingMessage, RoomBook

book = RoomBook("@alice")
book.add_message(IncomingMessage(room="@alice", sender="@bob", text="hi"))
book.room_names   # ["general", "@bob"] – private messages open a room per sender
```

Feeding a session's messages to a consumer:

```python
import threading
from roomchat.msgqueue import MessageQueue

queue = MessageQueue(login="@alice")
worker = threading.Thread(target=queue.wait_on_queue, args=(print,))
worker.start()
queue.add({"type": 1, "content": "hello"})
queue.finish()   # wait_on_queue returns False; invalidate() makes it return True
worker.join()
```

`EventLogger(path="server.log")` writes timestamped lines; loggers with the
same name share one file handler.

## What it does not do

The package holds no network code: there is no chat server, no client
connection, no wire protocol and no command to run. It also keeps no user
accounts or message history on disk, and it has no graphical interface; the
pieces above are what such a program would build on.