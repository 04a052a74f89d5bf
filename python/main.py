#!/usr/bin/env python3
"""Slide Puzzle.

Usage::

    python main.py                         # interactive menu
    python main.py -f rich -s 4            # Rich terminal, 4×4
    python main.py -f pygame -i photo.jpg  # picture puzzle from photo.jpg
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_SIZE, LOG_LEVEL, MAX_SIZE, MIN_SIZE  # noqa: E402

logger = logging.getLogger("slide_puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _launch(frontend: Frontend, size: int, image: Optional[Path]) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    logger.debug("Launching %s frontend (size=%d, image=%s)", frontend, size, image)
    if frontend is Frontend.pygame:
        mod.run(size=size, image=image)
    else:
        mod.run(size=size)


def _menu_loop(size: int, image: Optional[Path]) -> None:
    while True:
        print()
        print("  ====================================")
        print("         S L I D E   P U Z Z L E     ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Picture puzzle, Pygame)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice == "1":
            _launch(Frontend.rich, size, image)
        elif choice == "2":
            _launch(Frontend.pygame, size, image)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    image: Optional[Path] = typer.Option(
        None, "-i", "--image",
        exists=True, dir_okay=False, readable=True,
        help="Picture to cut into tiles (Pygame frontend).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity at DEBUG level.",
    ),
) -> None:
    """Slide Puzzle."""
    _configure_logging(verbose)

    if frontend is None:
        _menu_loop(size, image)
        return

    _launch(frontend, size, image)


if __name__ == "__main__":
    app()
