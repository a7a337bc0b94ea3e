"""Rich terminal frontend — tables, colours, and panels.

Renders the board purely from the engine's tile descriptors and drives the
game clock from a :class:`ManualScheduler` that is advanced between key
polls.  Includes a built-in menu for size selection.
"""

from __future__ import annotations

import logging
import random
import sys
import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilitoli.config import MENU_SIZES
from tilitoli.engine.gameplay import GamePlay
from tilitoli.engine.gamestate import ManualScheduler
from tilitoli.frontend.cli.input_handler import read_key
from tilitoli.models.board import Direction
from tilitoli.models.outcome import TileDescriptor

logger = logging.getLogger(__name__)

console = Console()

# How long to wait for a key before repainting the clock.
_POLL_SECONDS = 0.25

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: int) -> str:
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


def _stats_text(game: GamePlay) -> Text:
    stats = game.stats()
    text = Text()
    text.append("  Moves: ", style="dim")
    text.append(str(stats.moves), style="bold yellow")
    text.append("    Time: ", style="dim")
    text.append(_format_time(stats.elapsed_seconds), style="bold yellow")
    return text


# -- board rendering ----------------------------------------------------------


def _render_board(tiles: list[TileDescriptor], size: int) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(size * size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    for r in range(size):
        cells: list[str] = []
        for tile in tiles[r * size : (r + 1) * size]:
            if tile.is_blank:
                cells.append("[dim]·[/dim]")
            elif tile.in_place:
                cells.append(f"[bold green]{tile.value:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile.value:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for i, s in enumerate(MENU_SIZES):
        if i:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]T I L I - T O L I[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay) -> None:
    console.clear()

    size = game.size
    board_table = _render_board(game.tile_descriptors(), size)

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Tili-Toli  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # repaint just that line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats_text(game)))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    stats = game.stats()
    clock = _format_time(stats.elapsed_seconds)
    stats_raw = (
        f"\033[2mMoves: \033[0m\033[33;1m{stats.moves}\033[0m"
        f"    \033[2mTime: \033[0m\033[33;1m{clock}\033[0m"
    )
    visible_len = len(f"Moves: {stats.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    size = game.size
    board_table = _render_board(game.tile_descriptors(), size)

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(board_table),
        Align.center(congrats),
        Align.center(_stats_text(game)),
    )

    panel = Panel(
        group,
        title=f"[bold green]Tili-Toli  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play_game(size: int, rng: random.Random | None) -> None:
    scheduler = ManualScheduler()
    game = GamePlay(size, scheduler=scheduler, rng=rng)

    try:
        while True:
            _draw_game(game)

            # Poll with a timeout so the clock keeps ticking between keys.
            last = time.monotonic()
            shown = game.stats().elapsed_seconds
            while True:
                key = read_key(_POLL_SECONDS)
                now = time.monotonic()
                scheduler.advance(now - last)
                last = now
                if key is not None:
                    break
                if game.stats().elapsed_seconds != shown:
                    shown = game.stats().elapsed_seconds
                    _update_time(game)

            if key in _DIRECTIONS:
                result = game.move(_DIRECTIONS[key])
                if result.won:
                    _draw_win(game)
                    if not _wait_again():
                        return
                    game.new_game(size)
            elif key == "restart":
                game.new_game(size)
            elif key == "quit":
                return
    finally:
        game.stop()


def _wait_again() -> bool:
    while True:
        key = read_key()
        if key in ("restart", "enter"):
            return True
        if key == "quit":
            return False


# -- menu loop ----------------------------------------------------------------


def _menu_start(size: int) -> int:
    """Return the position in MENU_SIZES closest to *size*."""
    return min(range(len(MENU_SIZES)), key=lambda i: abs(MENU_SIZES[i] - size))


def _menu_loop(default_size: int, rng: random.Random | None) -> None:
    pos = _menu_start(default_size)

    while True:
        sel_size = MENU_SIZES[pos]
        _draw_menu(sel_size)
        key = read_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            pos = max(0, pos - 1)
        elif key == "right":
            pos = min(len(MENU_SIZES) - 1, pos + 1)
        elif key in ("1", "enter"):
            _play_game(sel_size, rng)


# -- public entry point -------------------------------------------------------


def run(size: int, seed: int | None = None, image: Path | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    if image is not None:
        logger.warning("picture mode is not available in the terminal; ignoring %s", image)
    rng = random.Random(seed) if seed is not None else None
    _menu_loop(size, rng)
