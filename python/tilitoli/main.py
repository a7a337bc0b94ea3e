"""Tili-Toli sliding puzzle.

Usage::

    tilitoli                      # Rich terminal, size menu
    tilitoli -s 3 --seed 7        # reproducible 3×3 scramble
    tilitoli -f pyqt --image cat.png
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from tilitoli.config import DEFAULT_LOG_LEVEL, DEFAULT_SIZE, LOG_FORMAT, MAX_SIZE, MIN_SIZE


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "tilitoli.frontend.cli.rich.app",
    Frontend.pyqt: "tilitoli.frontend.gui.pyqt.app",
}


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        envvar="TILITOLI_FRONTEND",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="TILITOLI_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="TILITOLI_SEED",
        help="Seed for reproducible scrambles.",
    ),
    image: Optional[Path] = typer.Option(
        None, "--image",
        exists=True, dir_okay=False,
        help="Picture to split across the tiles (GUI only).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel(DEFAULT_LOG_LEVEL), "--log-level",
        envvar="TILITOLI_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Tili-Toli sliding puzzle."""
    logging.basicConfig(level=log_level.value, format=LOG_FORMAT)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, seed=seed, image=image)


if __name__ == "__main__":
    app()
