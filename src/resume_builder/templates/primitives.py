"""Drawing primitives produced by the layout engine.

Coordinates are millimetres from the top-left corner of an A4 portrait
page.  A :class:`Text` ``y`` is the text baseline, as in the PDF renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "A4_HEIGHT",
    "A4_WIDTH",
    "Color",
    "Line",
    "Page",
    "Primitive",
    "Rect",
    "Text",
]

A4_WIDTH = 210.0
A4_HEIGHT = 297.0

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
GRAY: Color = (128, 128, 128)


@dataclass(frozen=True)
class Text:
    content: str
    x: float
    y: float
    font_size: float
    bold: bool = False
    color: Color = BLACK
    font: str = "helvetica"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float
    color: Color = BLACK
    filled: bool = True


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color = BLACK
    width: float = 0.5


Primitive = Text | Rect | Line


@dataclass(frozen=True)
class Page:
    """An ordered list of primitives on one fixed-size page."""

    primitives: tuple[Primitive, ...]
    width: float = A4_WIDTH
    height: float = A4_HEIGHT

    def texts(self) -> list[Text]:
        return [p for p in self.primitives if isinstance(p, Text)]

    def text_contents(self) -> list[str]:
        return [t.content for t in self.texts()]

    def find_text(self, content: str) -> Text | None:
        """Return the first Text whose content equals *content*."""
        for text in self.texts():
            if text.content == content:
                return text
        return None
