"""Text measurement and word wrapping using the PDF core-font metrics.

Widths come from fpdf2's built-in Helvetica/Times/Courier tables, the same
fonts the renderer draws with, so wrapped lines fit once rendered.
"""

from __future__ import annotations

from fpdf import FPDF

__all__ = ["TextMeasurer", "to_latin1"]


def to_latin1(text: str) -> str:
    """Replace characters the PDF core fonts cannot encode."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class TextMeasurer:
    """Measures strings in millimetres for a given font."""

    def __init__(self) -> None:
        self._pdf = FPDF(unit="mm", format="A4")

    def width(
        self, text: str, *, size: float, bold: bool = False, font: str = "helvetica"
    ) -> float:
        self._pdf.set_font(font, "B" if bold else "", size)
        return self._pdf.get_string_width(to_latin1(text))

    def wrap(
        self,
        text: str,
        max_width: float,
        *,
        size: float,
        bold: bool = False,
        font: str = "helvetica",
    ) -> list[str]:
        """Split *text* into lines no wider than *max_width*.

        Breaks at whitespace; a single word wider than the budget is broken
        between characters.  Explicit newlines start a new line.  Blank
        input yields no lines.
        """

        def fits(candidate: str) -> bool:
            return self.width(candidate, size=size, bold=bold, font=font) <= max_width

        lines: list[str] = []
        for paragraph in text.splitlines():
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if fits(candidate):
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                    current = ""
                if fits(word):
                    current = word
                    continue
                for char in word:
                    if current and not fits(current + char):
                        lines.append(current)
                        current = ""
                    current += char
            if current:
                lines.append(current)
        return lines
