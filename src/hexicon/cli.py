from __future__ import annotations

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

from hexicon.app import HexiconApp
from hexicon.config import ConfigError, Settings, load_settings
from hexicon.core.io import ByteStream
from hexicon.core.modes import group_size, is_valid_mode
from hexicon.core.session import Session
from hexicon.ui.palette import PALETTES

EXIT_FAILURE = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130

USAGE = """\
Usage: hexicon [display] [infile]
> b  : will display groups of  8.
> w  : will display groups of 16.
> d  : will display groups of 32.

> -  : will regress to a displayed section.
> .  : will terminate the program.
"""


def usage(console: Console) -> None:
    console.print(USAGE, markup=False, emoji=False, highlight=False, soft_wrap=True)


def reject(console: Console, argument: str) -> int:
    console.print(f'??? : "{argument}"', markup=False, emoji=False, highlight=False, soft_wrap=True)
    usage(console)
    return EXIT_FAILURE


def setup_logging(settings: Settings) -> logging.Logger:
    log = logging.getLogger("hexicon")
    log.setLevel(settings.log_level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    return log


def main(argv: list[str] | None = None) -> int:
    console = Console()
    try:
        settings = load_settings(os.environ)
    except ConfigError as exc:
        print(f"hexicon: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    setup_logging(settings)

    # Both values are taken verbatim; a leading "-" is a mode or file name, never an option.
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        usage(console)
        return EXIT_FAILURE
    mode, path = args

    if not is_valid_mode(mode):
        return reject(console, mode)
    try:
        stream = ByteStream.open(path)
    except OSError:
        return reject(console, path)

    with stream:
        session = Session(stream, group_size(mode), settings.layout)
        app = HexiconApp(session, console=console, palette=PALETTES[settings.palette])
        try:
            return app.run()
        except KeyboardInterrupt:
            return EXIT_INTERRUPTED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
