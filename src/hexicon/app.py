from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from hexicon.core.session import QUIT, REGRESS, Session
from hexicon.ui.page_view import page_text
from hexicon.ui.palette import PALETTE, Palette

logger = logging.getLogger(__name__)


class HexiconApp:
    """Interactive page loop: render, wait for one command character, repeat.

    `-` regresses without rendering; `.` or end of input ends the loop; any
    other character renders the next page.
    """

    def __init__(
        self,
        session: Session,
        *,
        console: Console | None = None,
        commands: TextIO | None = None,
        palette: Palette = PALETTE,
    ) -> None:
        self.session = session
        self.console = console or Console()
        self._commands = commands
        self.palette = palette

    @property
    def commands(self) -> TextIO:
        return self._commands if self._commands is not None else sys.stdin

    def show_page(self) -> None:
        page = self.session.render_page()
        text = page_text(page, self.session.group_size, self.session.layout, self.palette)
        self.console.print(text, end="", soft_wrap=True, highlight=False)

    def read_command(self) -> str:
        return self.commands.read(1)

    def run(self) -> int:
        command = ""
        while True:
            if command == REGRESS:
                self.session.regress()
            else:
                self.show_page()
            command = self.read_command()
            self.session.last_command = command
            if command == QUIT:
                break
            if command == "":
                logger.debug("command input exhausted")
                break
        return 0
