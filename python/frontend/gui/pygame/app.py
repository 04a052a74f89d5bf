"""Pygame GUI frontend for the picture puzzle.

Drop an image file on the window (or pass one on the command line), pick a
grid size, and click tiles next to the gap to slide them.  Without an image
a generated gradient picture is used.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path

import pygame

from backend.config import CLOCK_TICK_MS, DEFAULT_SIZE, GRID_SIZES
from backend.engine.gameplay import GamePlay
from backend.models.board import Direction
from frontend.tiles import format_time, tile_source_rect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PEACH = (250, 179, 135)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 96
BOARD_MAX = WIN_W - 2 * MARGIN

_TICK_EVENT = pygame.USEREVENT + 1


class _Screen(enum.Enum):
    DROP = "drop"
    PLAYING = "playing"
    WIN = "win"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------
def _crop_square(img: pygame.Surface) -> pygame.Surface:
    """Return the centred square region of *img*."""
    w, h = img.get_size()
    side = min(w, h)
    return img.subsurface(pygame.Rect((w - side) // 2, (h - side) // 2, side, side)).copy()


def _default_image(side: int = 480) -> pygame.Surface:
    """Draw a diagonal-gradient picture with a few rings as the fallback image."""
    img = pygame.Surface((side, side))
    for y in range(side):
        t = y / (side - 1)
        colour = tuple(int(a + (b - a) * t) for a, b in zip(COL_BLUE, COL_PEACH))
        pygame.draw.line(img, colour, (0, y), (side - 1, y))
    centre = (side // 2, side // 2)
    for i, colour in enumerate((COL_MANTLE, COL_LAVENDER, COL_GREEN, COL_YELLOW)):
        pygame.draw.circle(img, colour, centre, side // 2 - 40 - i * 45, width=14)
    return img


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        img = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        logger.warning("Could not load image %s: %s", path, exc)
        return None
    return _crop_square(img.convert())


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, default_size: int, image: Path | None = None) -> None:
        self._sel_size = default_size if default_size in GRID_SIZES else DEFAULT_SIZE

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Slide Puzzle")
        self._frame_clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 36, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._image: pygame.Surface = _default_image()
        self._tile_images: dict[int, pygame.Surface] = {}
        self._game: GamePlay | None = None
        self._timer_on = False
        self._show_original = False

        self._build_btns()

        if image is not None and self._set_image(image):
            self._start_game()
        else:
            self._screen = _Screen.DROP

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        self._size_btns: dict[int, _Btn] = {
            s: _Btn((0, 0, 80, 36), f"{s}x{s}", self._f_btn_sm) for s in GRID_SIZES
        }

        self._start_btn = _Btn(
            (_cx(220), 470, 220, 50), "P L A Y", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._new_btn = _Btn((WIN_W - MARGIN - 110, 14, 110, 32), "NEW IMAGE", self._f_btn_sm)
        self._hint_btn = _Btn(
            (WIN_W - MARGIN - 90, 52, 90, 32), "HINT", self._f_btn_sm,
            bg=COL_LAVENDER, hover=COL_BLUE, fg=COL_BASE,
        )
        self._shuffle_btn = _Btn(
            (WIN_W - MARGIN - 120, 0, 120, 36), "SHUFFLE", self._f_btn_sm,
            bg=COL_PEACH, hover=COL_YELLOW, fg=COL_BASE,
        )
        self._again_btn = _Btn(
            (_cx(220), 430, 220, 50), "PLAY AGAIN", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )

    def _game_btns(self) -> list[_Btn]:
        return [*self._size_btns.values(), self._new_btn, self._hint_btn, self._shuffle_btn]

    # ── layout ──────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for the current size."""
        sz = self._sel_size
        tile_px = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        return tile_px, _cx(total) + TILE_GAP, BOARD_TOP + TILE_GAP, total

    def _cell_rect(self, position: int) -> pygame.Rect:
        tpx, ox, oy, _ = self._tile_layout()
        r, c = divmod(position, self._sel_size)
        return pygame.Rect(ox + c * (tpx + TILE_GAP), oy + r * (tpx + TILE_GAP), tpx, tpx)

    def _position_at(self, pos: tuple[int, int]) -> int | None:
        for p in range(self._sel_size * self._sel_size):
            if self._cell_rect(p).collidepoint(pos):
                return p
        return None

    # ── image handling ──────────────────────────────────────────────────────

    def _set_image(self, path: Path) -> bool:
        img = _load_image(path)
        if img is None:
            return False
        self._image = img
        logger.debug("Loaded image %s (%dx%d)", path, *img.get_size())
        return True

    def _slice_tiles(self) -> None:
        """Cut the current image into one surface per tile-id."""
        sz = self._sel_size
        tpx, _, _, _ = self._tile_layout()
        side = sz * tpx
        full = pygame.transform.smoothscale(self._image, (side, side))
        self._tile_images = {
            tile: full.subsurface(pygame.Rect(tile_source_rect(tile, sz, side))).copy()
            for tile in range(sz * sz - 1)
        }

    # ── clock ───────────────────────────────────────────────────────────────

    def _start_timer(self) -> None:
        if not self._timer_on:
            pygame.time.set_timer(_TICK_EVENT, CLOCK_TICK_MS)
            self._timer_on = True

    def _stop_timer(self) -> None:
        if self._game is not None:
            self._game.clock.stop()
        if self._timer_on:
            pygame.time.set_timer(_TICK_EVENT, 0)
            self._timer_on = False

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._stop_timer()
        self._game = GamePlay(self._sel_size)
        self._slice_tiles()
        self._show_original = False
        self._screen = _Screen.PLAYING
        self._start_timer()

    def _to_drop_screen(self) -> None:
        self._stop_timer()
        self._game = None
        self._screen = _Screen.DROP

    def _after_move(self, solved: bool) -> None:
        if solved:
            self._stop_timer()
            self._screen = _Screen.WIN

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_size_row(self, y: int, x: int | None = None) -> None:
        """Draw the size buttons in a row at *y*, centred unless *x* is given."""
        bw, gap = self._size_btns[GRID_SIZES[0]].rect.width, 8
        if x is None:
            x = _cx(len(GRID_SIZES) * bw + (len(GRID_SIZES) - 1) * gap)
        for i, (s, btn) in enumerate(self._size_btns.items()):
            btn.rect.topleft = (x + i * (bw + gap), y)
            btn.bg = COL_GREEN if s == self._sel_size else COL_SURFACE0
            btn.fg = COL_BASE if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)

    def _draw_drop(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("SLIDE  PUZZLE", True, COL_TEXT), 60)

        zone = pygame.Rect(MARGIN * 2, 140, WIN_W - MARGIN * 4, 200)
        pygame.draw.rect(self._surf, COL_MANTLE, zone, border_radius=16)
        pygame.draw.rect(self._surf, COL_OVERLAY0, zone, width=2, border_radius=16)
        _blit_center(
            self._surf,
            self._f_title.render("Drop your picture here", True, COL_TEXT),
            zone.centery - 24,
        )
        _blit_center(
            self._surf,
            self._f_small.render("or press Play to use the built-in one", True, COL_SUBTEXT),
            zone.centery + 10,
        )

        _blit_center(self._surf, self._f_body.render("Select difficulty", True, COL_SUBTEXT), 380)
        self._draw_size_row(410)
        self._start_btn.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        board = game.board
        _, _, _, total = self._tile_layout()

        self._surf.blit(self._f_title.render("Slide Puzzle", True, COL_TEXT), (MARGIN, 16))
        stats = f"Moves: {game.moves}    Time: {format_time(game.clock.seconds)}"
        self._surf.blit(self._f_body.render(stats, True, COL_YELLOW), (MARGIN, 58))
        self._new_btn.draw(self._surf)
        self._hint_btn.draw(self._surf)

        board_rect = pygame.Rect(_cx(total), BOARD_TOP, total, total)
        pygame.draw.rect(self._surf, COL_MANTLE, board_rect, border_radius=10)

        if self._show_original:
            inner = board_rect.inflate(-2 * TILE_GAP, -2 * TILE_GAP)
            self._surf.blit(pygame.transform.smoothscale(self._image, inner.size), inner.topleft)
        else:
            for position, tile in enumerate(board.placement):
                rect = self._cell_rect(position)
                if tile == board.empty_tile:
                    pygame.draw.rect(self._surf, COL_OVERLAY0, rect, width=2, border_radius=6)
                    continue
                self._surf.blit(self._tile_images[tile], rect.topleft)

        row_y = BOARD_TOP + total + 14
        self._draw_size_row(row_y, x=MARGIN)
        self._shuffle_btn.rect.y = row_y
        self._shuffle_btn.draw(self._surf)

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile next to the gap     Arrows  move     H  hint     R  shuffle",
                True,
                COL_OVERLAY0,
            ),
            WIN_H - 24,
        )

    def _draw_win(self) -> None:
        self._draw_game()
        veil = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
        veil.fill((0, 0, 0, 140))
        self._surf.blit(veil, (0, 0))

        card = pygame.Rect(_cx(360), 170, 360, 340)
        pygame.draw.rect(self._surf, COL_BASE, card, border_radius=18)
        game = self._game
        assert game is not None

        _blit_center(self._surf, self._f_big.render("Puzzle Solved!", True, COL_GREEN), 200)
        _blit_center(
            self._surf,
            self._f_body.render("Fantastic work! You completed the puzzle.", True, COL_SUBTEXT),
            254,
        )
        _blit_center(
            self._surf,
            self._f_title.render(f"Time   {format_time(game.clock.seconds)}", True, COL_YELLOW),
            300,
        )
        _blit_center(
            self._surf, self._f_title.render(f"Moves   {game.moves}", True, COL_YELLOW), 340
        )
        self._again_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _pick_size(self, pos: tuple[int, int]) -> bool:
        for s, btn in self._size_btns.items():
            if btn.hit(pos):
                changed = s != self._sel_size
                self._sel_size = s
                return changed
        return False

    def _ev_drop(self, ev: pygame.event.Event) -> None:
        if ev.type == pygame.MOUSEMOTION:
            for b in (*self._size_btns.values(), self._start_btn):
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._start_btn.hit(ev.pos):
                self._start_game()
            else:
                self._pick_size(ev.pos)
        elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_RETURN:
            self._start_game()

    def _ev_game(self, ev: pygame.event.Event) -> None:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for b in self._game_btns():
                b.motion(ev.pos)
            self._show_original = self._hint_btn.hit(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._new_btn.hit(ev.pos):
                self._to_drop_screen()
            elif self._shuffle_btn.hit(ev.pos):
                self._start_game()
            elif self._pick_size(ev.pos):
                self._start_game()
            else:
                position = self._position_at(ev.pos)
                if position is not None:
                    self._after_move(game.move_tile(position).solved)
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                self._after_move(game.move(_dirs[ev.key]).solved)
            elif ev.key == pygame.K_h:
                self._show_original = True
            elif ev.key == pygame.K_r:
                self._start_game()
            elif ev.key == pygame.K_ESCAPE:
                self._to_drop_screen()
        elif ev.type == pygame.KEYUP and ev.key == pygame.K_h:
            self._show_original = False
        elif ev.type == _TICK_EVENT:
            game.clock.tick()

    def _ev_win(self, ev: pygame.event.Event) -> None:
        if ev.type == pygame.MOUSEMOTION:
            self._again_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._again_btn.hit(ev.pos):
                self._start_game()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_game()
            elif ev.key == pygame.K_ESCAPE:
                self._to_drop_screen()

    def _ev_dropfile(self, ev: pygame.event.Event) -> None:
        if self._set_image(Path(ev.file)):
            self._start_game()

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.DROP: self._ev_drop,
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        _draw = {
            _Screen.DROP: self._draw_drop,
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if ev.type == pygame.DROPFILE:
                    self._ev_dropfile(ev)
                    continue
                _dispatch[self._screen](ev)

            _draw[self._screen]()
            pygame.display.flip()
            self._frame_clock.tick(30)

        self._stop_timer()
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = DEFAULT_SIZE, image: Path | None = None) -> None:
    """Launch the Pygame GUI, on the drop screen unless *image* is given."""
    app = PygameApp(size, image)
    app.run_loop()
