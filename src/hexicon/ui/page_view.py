from __future__ import annotations

from rich.style import Style
from rich.text import Text

from hexicon.config import Layout
from hexicon.core.layout import format_byte, format_rank, header_labels
from hexicon.core.session import Page
from hexicon.ui.palette import PALETTE, Palette


def _append_row(text: Text, row: bytes, group_size: int, palette: Palette) -> None:
    byte_style = Style(color=palette.byte_fg)
    zero_style = Style(color=palette.byte_zero_fg)
    for idx, b in enumerate(row):
        if idx and idx % group_size == 0:
            text.append(" ")
        text.append(format_byte(b), style=zero_style if b == 0 else byte_style)


def page_text(page: Page, group_size: int, layout: Layout, palette: Palette = PALETTE) -> Text:
    """Render a page as header, one line per 16-byte row, and a closing newline.

    Plain text matches `hexicon.core.layout.header_line` / `format_row` exactly;
    styles only apply when the console supports colour.
    """
    text = Text()
    text.append(layout.alignment)
    text.append(header_labels(group_size), style=Style(color=palette.header_fg))
    for rank, row in page.rows():
        text.append("\n")
        text.append(format_rank(rank, layout.offset_digits), style=Style(color=palette.offset_fg))
        text.append(": ", style=Style(color=palette.offset_punct))
        _append_row(text, row, group_size, palette)
    text.append("\n")
    return text
