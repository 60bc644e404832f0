from __future__ import annotations

from hexicon.config import PAGE_SIZE


def regress_target(position: int) -> int:
    """Return where the stream must be placed so the next render shows the previous page.

    A page-aligned cursor sits just past the page on screen, so stepping back one
    displayed page means skipping two pages (or one when only a single page precedes
    it). An unaligned cursor came from a short page at EOF: align down, then step back
    one page if one exists.
    """
    if position <= 0:
        return 0

    if position % PAGE_SIZE == 0:
        step = 2 * PAGE_SIZE if position > PAGE_SIZE else PAGE_SIZE
        return max(0, position - step)

    aligned = position - (position & 0xFF)
    if aligned >= PAGE_SIZE:
        aligned -= PAGE_SIZE
    return max(0, aligned)
