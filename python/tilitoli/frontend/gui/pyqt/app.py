"""PyQt6 GUI frontend — fully self-contained.

Includes size selection, gameplay with an optional picture split across the
tiles, and a win screen.  Picture decoding is Qt's job (``QPixmap``); the
engine only stores the handle and hands back crop offsets.
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import QObject, QSize, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QFont, QIcon, QKeyEvent, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from tilitoli.config import MENU_SIZES
from tilitoli.engine.gameplay import GamePlay
from tilitoli.models.board import Direction
from tilitoli.models.outcome import MoveResult, TileDescriptor

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp)"


# ---------------------------------------------------------------------------
# Clock scheduling on the Qt event loop
# ---------------------------------------------------------------------------
class _QtTask:
    __slots__ = ("_timer",)

    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler:
    """Recurring tasks backed by ``QTimer`` objects parented to *owner*."""

    def __init__(self, owner: QObject) -> None:
        self._owner = owner

    def every(self, interval: float, callback: Callable[[], None]) -> _QtTask:
        timer = QTimer(self._owner)
        timer.timeout.connect(callback)
        timer.start(int(interval * 1000))
        return _QtTask(timer)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(_btn_css(bg, hover, fg))
    return btn


def _btn_css(bg: str, hover: str, fg: str) -> str:
    return (
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; font-weight:bold; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )


def _fmt(secs: int) -> str:
    m, s = divmod(secs, 60)
    return f"{m:02d}:{s:02d}"


def _crop(picture: QPixmap, tile: TileDescriptor, size: int, tile_px: int) -> QPixmap:
    """Cut a tile's piece out of *picture* from its background offset.

    The picture is stretched to ``size`` tiles per side, then shifted by
    ``x% * (picture - tile)`` as CSS ``background-position`` would do.
    """
    board_px = size * tile_px
    scaled = picture.scaled(
        board_px,
        board_px,
        Qt.AspectRatioMode.IgnoreAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )
    px, py = tile.background_position
    x = round(px / 100 * (board_px - tile_px))
    y = round(py / 100 * (board_px - tile_px))
    return scaled.copy(x, y, tile_px, tile_px)


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Main menu with size selection, play, quit."""

    def __init__(self, default_size: int) -> None:
        super().__init__()
        self.setObjectName("page")
        self.selected_size = min(MENU_SIZES, key=lambda s: abs(s - default_size))

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        title = QLabel("TILI - TOLI")
        title.setFont(QFont("Helvetica", 34, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        root.addSpacerItem(QSpacerItem(0, 24))

        sub = QLabel("Select grid size")
        sub.setFont(QFont("Helvetica", 15))
        sub.setStyleSheet(f"color:{_SUBTEXT};")
        sub.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(sub)

        root.addSpacerItem(QSpacerItem(0, 8))

        self._size_btns: dict[int, QPushButton] = {}
        hbox = QHBoxLayout()
        hbox.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hbox.setSpacing(10)
        for s in MENU_SIZES:
            btn = _styled_btn(f"{s}×{s}", min_w=64, min_h=46, font_size=13)
            btn.clicked.connect(lambda _, sz=s: self._pick_size(sz))
            hbox.addWidget(btn)
            self._size_btns[s] = btn
        root.addLayout(hbox)

        root.addSpacerItem(QSpacerItem(0, 18))

        self.play_btn = _styled_btn(
            "P L A Y", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=16, min_w=240, min_h=52,
        )
        root.addWidget(self.play_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._refresh_size_highlight()

    def _pick_size(self, s: int) -> None:
        self.selected_size = s
        self._refresh_size_highlight()

    def _refresh_size_highlight(self) -> None:
        for s, btn in self._size_btns.items():
            if s == self.selected_size:
                btn.setStyleSheet(_btn_css(_GREEN, _GREEN_H, _BASE))
            else:
                btn.setStyleSheet(_btn_css(_SURFACE0, _SURFACE1, _TEXT))


class _GamePage(QWidget):
    """The puzzle board with tile buttons, picture controls and live stats."""

    won = pyqtSignal()
    picture_changed = pyqtSignal(object)

    def __init__(
        self,
        size: int,
        picture: QPixmap | None,
        rng: random.Random | None,
    ) -> None:
        super().__init__()
        self.setObjectName("page")
        self._size = size
        self.game = GamePlay(size, scheduler=QtScheduler(self), rng=rng)
        self.game.set_image(picture)

        self._tile_px = max(40, min(96, 420 // size))
        f_sz = max(12, self._tile_px // 4)

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        t = QLabel(f"Tili-Toli  {size}×{size}")
        t.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        t.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(t)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._btns: list[QPushButton] = []
        for index in range(size * size):
            b = QPushButton()
            b.setFixedSize(self._tile_px, self._tile_px)
            b.setIconSize(QSize(self._tile_px, self._tile_px))
            b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, i=index: self._click(i))
            self._grid.addWidget(b, *divmod(index, size))
            self._btns.append(b)

        # picture controls
        pics = QHBoxLayout()
        pics.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._pick_btn = _styled_btn("Choose image…", font_size=12, min_h=36)
        self._pick_btn.clicked.connect(self._choose_picture)
        pics.addWidget(self._pick_btn)
        self._clear_btn = _styled_btn("Remove image", font_size=12, min_h=36)
        self._clear_btn.clicked.connect(lambda: self.set_picture(None))
        pics.addWidget(self._clear_btn)
        root.addLayout(pics)

        hint = QLabel("Arrows / WASD  move     R  new game     M  menu")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        # repaint the stats label a few times per clock tick
        self._refresh = QTimer(self)
        self._refresh.timeout.connect(self._show_stats)
        self._refresh.start(200)

        self._sync()

    # -- rendering --

    def _sync(self) -> None:
        picture = self.game.state.image
        self._clear_btn.setVisible(picture is not None)
        for tile in self.game.tile_descriptors():
            b = self._btns[tile.index]
            if tile.is_blank:
                b.setText("")
                b.setIcon(QIcon())
                b.setStyleSheet(
                    f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                )
            elif tile.background_position is not None:
                b.setText("")
                b.setIcon(QIcon(_crop(picture, tile, self._size, self._tile_px)))
                b.setStyleSheet("QPushButton{border:none;padding:0;}")
            else:
                b.setIcon(QIcon())
                b.setText(str(tile.value))
                bg, hv = (_GREEN, _GREEN_H) if tile.in_place else (_BLUE, _BLUE_H)
                b.setStyleSheet(
                    f"QPushButton{{background:{bg};color:{_BASE};"
                    f"border:none;border-radius:8px;font-weight:bold;}}"
                    f"QPushButton:hover{{background:{hv};}}"
                )
        self._show_stats()

    def _show_stats(self) -> None:
        stats = self.game.stats()
        self._stats.setText(f"Moves: {stats.moves}    Time: {_fmt(stats.elapsed_seconds)}")

    # -- input --

    def _click(self, index: int) -> None:
        self._after(self.game.attempt_move(index))

    def move(self, d: Direction) -> None:
        self._after(self.game.move(d))

    def _after(self, result: MoveResult) -> None:
        if not result.moved:
            return
        self._sync()
        if result.won:
            self.won.emit()

    def restart(self) -> None:
        self.game.new_game(self._size)
        self._sync()

    def close_game(self) -> None:
        self.game.stop()
        self._refresh.stop()

    # -- picture --

    def _choose_picture(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose image", "", _IMAGE_FILTER)
        if not path:
            return
        picture = QPixmap(path)
        if picture.isNull():
            logger.warning("could not load image %s", path)
            return
        self.set_picture(picture)

    def set_picture(self, picture: QPixmap | None) -> None:
        self.game.set_image(picture)
        self.picture_changed.emit(picture)
        self._sync()


class _WinPage(QWidget):
    """Victory screen with stats and navigation buttons."""

    def __init__(self, size: int, moves: int, time_s: int) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(10)
        root.setContentsMargins(30, 30, 30, 30)

        star = QLabel("★  S O L V E D  ★")
        star.setFont(QFont("Helvetica", 32, QFont.Weight.Bold))
        star.setStyleSheet(f"color:{_GREEN};")
        star.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(star)

        root.addSpacerItem(QSpacerItem(0, 20))

        for txt, col in [
            (f"Grid:   {size}×{size}", _SUBTEXT),
            (f"Moves:  {moves}", _YELLOW),
            (f"Time:   {_fmt(time_s)}", _YELLOW),
        ]:
            lbl = QLabel(txt)
            lbl.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
            lbl.setStyleSheet(f"color:{col};")
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            root.addWidget(lbl)

        root.addSpacerItem(QSpacerItem(0, 24))

        self.again_btn = _styled_btn(
            "PLAY AGAIN", bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=16, min_w=240, min_h=50,
        )
        root.addWidget(self.again_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.menu_btn = _styled_btn("M E N U", min_w=240, font_size=13)
        root.addWidget(self.menu_btn, alignment=Qt.AlignmentFlag.AlignCenter)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_MENU = 0
_IDX_GAME = 1
_IDX_WIN = 2

_KEY_DIRECTIONS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


class _MainWindow(QMainWindow):
    def __init__(
        self,
        default_size: int,
        picture: QPixmap | None,
        rng: random.Random | None,
    ) -> None:
        super().__init__()
        self._picture = picture
        self._rng = rng

        self.setWindowTitle("Tili-Toli")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(520, 640)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._menu = _MenuPage(default_size)
        self._menu.play_btn.clicked.connect(self._on_play)
        self._menu.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # placeholders (replaced dynamically)
        self._game_page: _GamePage | None = None
        self._stack.addWidget(QWidget())  # 1
        self._stack.addWidget(QWidget())  # 2

        self._stack.setCurrentIndex(_IDX_MENU)

    # -- navigation ---

    def _replace(self, idx: int, page: QWidget) -> None:
        old = self._stack.widget(idx)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(idx, page)
        self._stack.setCurrentIndex(idx)

    def _show_menu(self) -> None:
        if self._game_page is not None:
            self._game_page.close_game()
        self._stack.setCurrentIndex(_IDX_MENU)

    def _on_play(self) -> None:
        if self._game_page is not None:
            self._game_page.close_game()
        page = _GamePage(self._menu.selected_size, self._picture, self._rng)
        page.won.connect(self._show_win)
        page.picture_changed.connect(self._remember_picture)
        self._game_page = page
        self._replace(_IDX_GAME, page)

    def _remember_picture(self, picture: QPixmap | None) -> None:
        self._picture = picture

    def _show_win(self) -> None:
        gp = self._game_page
        assert gp is not None
        stats = gp.game.stats()
        page = _WinPage(gp.game.size, stats.moves, stats.elapsed_seconds)
        page.again_btn.clicked.connect(self._on_play)
        page.menu_btn.clicked.connect(self._show_menu)
        self._replace(_IDX_WIN, page)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key == Qt.Key.Key_Return:
                self._on_play()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_GAME and self._game_page is not None:
            gp = self._game_page
            if key in _KEY_DIRECTIONS:
                gp.move(_KEY_DIRECTIONS[key])
            elif key == Qt.Key.Key_R:
                gp.restart()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_WIN:
            if key in (Qt.Key.Key_R, Qt.Key.Key_Return):
                self._on_play()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int, seed: int | None = None, image: Path | None = None) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)

    picture: QPixmap | None = None
    if image is not None:
        picture = QPixmap(str(image))
        if picture.isNull():
            logger.warning("could not load image %s", image)
            picture = None

    rng = random.Random(seed) if seed is not None else None
    window = _MainWindow(size, picture, rng)
    window.show()
    qapp.exec()
