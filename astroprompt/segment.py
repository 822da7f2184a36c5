"""Styled text segments and the ANSI styles that paint them."""

from __future__ import annotations

from dataclasses import dataclass

Color = str | int | tuple[int, int, int]

_RESET = "\x1b[0m"

_NAMED_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "purple": 5,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}


def _color_code(color: Color, base: int) -> str:
    """Return the SGR code of a colour; base is 30 for foreground, 40 for background."""
    if isinstance(color, str):
        try:
            return str(base + _NAMED_COLORS[color.lower()])
        except KeyError:
            raise ValueError(f"unknown colour name: {color!r}") from None
    if isinstance(color, bool):
        raise ValueError(f"invalid colour: {color!r}")
    if isinstance(color, int):
        if not 0 <= color <= 255:
            raise ValueError(f"fixed colour out of range: {color}")
        return f"{base + 8};5;{color}"
    if isinstance(color, tuple) and len(color) == 3:
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            raise ValueError(f"RGB colour out of range: {color!r}")
        red, green, blue = color
        return f"{base + 8};2;{red};{green};{blue}"
    raise ValueError(f"invalid colour: {color!r}")


@dataclass(frozen=True)
class Style:
    """A terminal text style: colours and text effects."""

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def __post_init__(self) -> None:
        # Validate colours eagerly so a bad style fails where it is made.
        if self.foreground is not None:
            _color_code(self.foreground, 30)
        if self.background is not None:
            _color_code(self.background, 40)

    @property
    def is_plain(self) -> bool:
        return self.prefix == ""

    @property
    def prefix(self) -> str:
        """The escape sequence that switches this style on."""
        effects = (
            (self.bold, "1"),
            (self.dimmed, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.blink, "5"),
            (self.reverse, "7"),
            (self.hidden, "8"),
            (self.strikethrough, "9"),
        )
        codes = [code for enabled, code in effects if enabled]
        if self.background is not None:
            codes.append(_color_code(self.background, 40))
        if self.foreground is not None:
            codes.append(_color_code(self.foreground, 30))
        if not codes:
            return ""
        return "\x1b[" + ";".join(codes) + "m"

    def paint(self, text: str) -> str:
        """Wrap text in this style's escape sequences."""
        prefix = self.prefix
        if not prefix:
            return text
        return f"{prefix}{text}{_RESET}"


@dataclass
class Segment:
    """A single configurable element of a module.

    A segment without a style inherits the style of the module holding it.
    """

    name: str
    value: str = ""
    style: Style | None = None

    def ansi_string(self) -> str:
        """The painted value, without any prefix or suffix."""
        if self.style is None:
            return self.value
        return self.style.paint(self.value)

    def is_empty(self) -> bool:
        """True when the value holds nothing but whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()