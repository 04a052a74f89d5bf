"""Rich terminal frontend — the puzzle as a coloured number grid.

Tiles are labelled ``1 .. size²-1`` (tile-id + 1) and the empty slot is a
blank cell.  Move with the arrow keys / WASD or type a tile's label (3×3)
to slide that tile.
"""

from __future__ import annotations

import logging
import time

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import DEFAULT_SIZE, GRID_SIZES
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction
from frontend.cli.input_handler import get_key, get_key_timeout
from frontend.tiles import format_time

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, *, border_style: str = "bright_blue") -> Table:
    """Return a Rich Table of the grid in placement order."""
    width = len(str(board.empty_tile))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style=border_style,
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, tile in enumerate(row):
            if tile == board.empty_tile:
                cells.append(" ")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{tile + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.clock.seconds), style="bold yellow")
    return stats


def _label_to_position(board: Board, key: str) -> int | None:
    """Return the position of the tile whose label is *key*, if any."""
    if not key.isdigit():
        return None
    tile = int(key) - 1
    if not 0 <= tile < board.empty_tile:
        return None
    return board.placement.index(tile)


# -- solver helper ------------------------------------------------------------


def _auto_solve(game: GamePlay) -> str:
    if game.size != 3:
        return "[yellow]Auto-solve is only available on 3×3.[/yellow]"
    path = Solver.solve(game.board)
    if path is None:
        return "[red]No solution found.[/red]"
    if not path:
        return "[green]Already solved![/green]"

    for i, position in enumerate(path, 1):
        game.move_tile(position)
        _draw_game(game, f"[cyan]Solving… move {i}/{len(path)}[/cyan]")
        time.sleep(0.08)

    return f"[bold green]Solved by the computer in {len(path)} moves.[/bold green]"


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for i, s in enumerate(GRID_SIZES):
        if i:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(Text("  ← →  change size", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                body,
                title="[bold]S L I D E   P U Z Z L E[/bold]",
                border_style="bright_blue",
                padding=(1, 4),
            )
        )
    )


def _draw_game(game: GamePlay, status: str = "", *, preview: bool = False) -> None:
    console.clear()
    size = game.size
    board_view = _render_board(game.board)
    if preview:
        board_view = Columns(
            [board_view, _render_board(Board.identity(size), border_style="dim")],
            padding=(0, 4),
        )

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    if size == 3:
        controls.append(" / ", style="dim")
        controls.append("1-8", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    if size == 3:
        controls.append("V", style="bold cyan")
        controls.append("  solve   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    console.print()
    console.print(
        Align.center(
            Panel(
                Align.center(board_view),
                title=f"[bold cyan]Slide Puzzle  {size}×{size}[/bold cyan]",
                border_style="bright_blue",
                padding=(1, 2),
            )
        )
    )
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()
    size = game.size

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("Puzzle Solved!", style="bold green")
    congrats.append("  Fantastic work!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_board(game.board, border_style="green")),
            Align.center(congrats),
            Align.center(_stats(game)),
        ),
        title=f"[bold green]Slide Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play_game(size: int) -> None:
    game = GamePlay(size)
    status = ""
    preview = False

    while True:
        while not game.is_won:
            _draw_game(game, status, preview=preview)
            status = ""

            # Poll so the clock display keeps moving while idle.
            while True:
                key = get_key_timeout(0.25)
                if key is not None:
                    break
                if game.clock.catch_up():
                    _draw_game(game, status, preview=preview)

            game.clock.catch_up()
            if key in _DIRECTIONS:
                game.move(_DIRECTIONS[key])
            elif key == "hint":
                preview = not preview
            elif key == "solve":
                status = _auto_solve(game)
            elif key == "restart":
                game.restart()
                status = "[yellow]Shuffled![/yellow]"
            elif key == "quit":
                game.clock.stop()
                return
            else:
                position = _label_to_position(game.board, key)
                if position is not None and not game.move_tile(position).accepted:
                    status = "[dim]That tile can't move.[/dim]"

        game.clock.stop()
        _draw_win(game)

        while True:
            key = get_key()
            if key in ("restart", "enter"):
                game.restart()
                preview = False
                break
            if key == "quit":
                return


def _menu_loop(sel_size: int) -> None:
    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        idx = GRID_SIZES.index(sel_size)
        if key == "left":
            sel_size = GRID_SIZES[max(0, idx - 1)]
        elif key == "right":
            sel_size = GRID_SIZES[min(len(GRID_SIZES) - 1, idx + 1)]
        elif key in ("1", "enter"):
            logger.debug("Starting %d×%d game", sel_size, sel_size)
            _play_game(sel_size)


# -- public entry point -------------------------------------------------------


def run(size: int = DEFAULT_SIZE) -> None:
    """Launch the Rich CLI with its size menu."""
    _menu_loop(size if size in GRID_SIZES else DEFAULT_SIZE)
