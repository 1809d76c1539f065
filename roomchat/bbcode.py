"""BBCode conversion for styled chat text, plus the smiley catalogue."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from itertools import groupby
from operator import itemgetter
from typing import ClassVar, Iterable


class StyleState(enum.IntEnum):
    """Whether a style is on, off, or not uniform across a selection."""

    INACTIVE = 0
    ACTIVE = 1
    MIXED = 2


@dataclass(frozen=True)
class Style:
    """Character formatting; ``None`` means the attribute is not specified."""

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None


@dataclass(frozen=True)
class StyledRun:
    """A piece of text sharing one style; ``style`` is ``None`` when unknown."""

    text: str
    style: Style | None = None


class StyleHandler:
    """Toggles and inspects one attribute of a :class:`Style`."""

    field: ClassVar[str]
    name: ClassVar[str]

    def apply(self, style: Style, activate: bool) -> Style:
        """Return ``style`` with this attribute switched on or off."""
        return replace(style, **{self.field: activate})

    def is_active(self, style: Style) -> bool:
        return getattr(style, self.field) is True

    def state(self, style: Style) -> StyleState:
        value = getattr(style, self.field)
        if value is None:
            return StyleState.MIXED
        return StyleState.ACTIVE if value else StyleState.INACTIVE


class BoldHandler(StyleHandler):
    field = "bold"
    name = "Bold"


class ItalicHandler(StyleHandler):
    field = "italic"
    name = "Italic"


class UnderlineHandler(StyleHandler):
    field = "underline"
    name = "Underline"


@dataclass(frozen=True)
class Smiley:
    """One entry of the smiley menu."""

    emoji: str
    bbcode_tag: str
    image_path: str
    description: str


def get_smileys() -> list[Smiley]:
    """Return every smiley offered to the user, in menu order."""
    return [
        Smiley("😊", "[smile]", "", "Улыбка"),
        Smiley("😂", "[laugh]", "", "Смех"),
        Smiley("😢", "[cry]", "", "Плач"),
        Smiley("😠", "[angry]", "", "Злость"),
        Smiley("😍", "[love]", "", "Влюбленность"),
        Smiley("😎", "[cool]", "", "Круто"),
        Smiley("🤔", "[think]", "", "Размышление"),
        Smiley("👍", "[thumbsup]", "", "Одобрение"),
        Smiley("👎", "[thumbsdown]", "", "Неодобрение"),
        Smiley("❤️", "[heart]", "", "Сердце"),
        Smiley("🎉", "[party]", "", "Праздник"),
        Smiley("🔥", "[fire]", "", "Огонь"),
    ]


def apply_tag(tag: str, style: Style) -> Style:
    """Return ``style`` with the effect of an opening BBCode tag added."""
    if tag == "b":
        return replace(style, bold=True)
    if tag == "i":
        return replace(style, italic=True)
    if tag == "u":
        return replace(style, underline=True)
    return style


def _escape(fragment: str) -> str:
    # Replacement order matters: backslashes introduced for brackets are doubled too.
    return fragment.replace("[", "\\[").replace("]", "\\]").replace("\\", "\\\\")


def _wrap(fragment: str, style: Style | None) -> str:
    if style is None:
        return fragment
    opening = []
    closing = []
    if style.bold is True:
        opening.append("[b]")
    if style.italic is True:
        opening.append("[i]")
    if style.underline is True:
        opening.append("[u]")
    if style.underline is True:
        closing.append("[/u]")
    if style.italic is True:
        closing.append("[/i]")
    if style.bold is True:
        closing.append("[/b]")
    return "".join(opening) + fragment + "".join(closing)


def to_bbcode(runs: Iterable[StyledRun]) -> str:
    """Convert styled text into BBCode, dropping trailing line breaks."""
    chars = [(ch, run.style) for run in runs for ch in run.text]
    while chars and chars[-1][0] in ("\n", "\r"):
        chars.pop()
    parts = []
    for style, group in groupby(chars, key=itemgetter(1)):
        fragment = "".join(ch for ch, _ in group)
        parts.append(_wrap(_escape(fragment), style))
    return "".join(parts)


def parse_bbcode(text: str) -> list[StyledRun]:
    """Parse BBCode into styled runs; closing tags pop the innermost open tag."""
    pieces: list[tuple[Style, list[str]]] = []
    stack: list[str] = []
    style = Style()

    def write(ch: str) -> None:
        if pieces and pieces[-1][0] == style:
            pieces[-1][1].append(ch)
        else:
            pieces.append((style, [ch]))

    pos = 0
    length = len(text)
    while pos < length:
        if text[pos] == "[" and pos + 1 < length:
            end = text.find("]", pos)
            if end != -1:
                tag = text[pos + 1:end]
                pos = end + 1
                if tag.startswith("/"):
                    if stack:
                        stack.pop()
                    style = Style()
                    for open_tag in stack:
                        style = apply_tag(open_tag, style)
                else:
                    stack.append(tag)
                    style = apply_tag(tag, style)
                continue

        if text[pos] == "\\" and pos + 1 < length:
            write(text[pos + 1])
            pos += 2
        else:
            write(text[pos])
            pos += 1

    return [StyledRun("".join(chars), run_style) for run_style, chars in pieces]