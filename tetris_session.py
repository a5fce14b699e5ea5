"""Game session: grid, active piece and the per-tick update loop"""
import enum
import logging
from typing import Optional

from tetris_config import CONFIG
from tetris_grid import Grid
from tetris_piece import MAX_PIECE_WIDTH, Piece
from tetris_rng import PieceRandom
from tetris_scheduler import TickScheduler

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    PLAYING = "playing"
    OVER = "over"


class GameSession:
    def __init__(self, scheduler: TickScheduler, renderer=None,
                 cols: Optional[int] = None, rows: Optional[int] = None,
                 standard_fps: Optional[float] = None, fast_fps: Optional[float] = None,
                 seed: Optional[int] = None):
        cols = CONFIG["COLS"] if cols is None else cols
        rows = CONFIG["ROWS"] if rows is None else rows
        self.standard_fps = CONFIG["STANDARD_FPS"] if standard_fps is None else standard_fps
        self.fast_fps = CONFIG["FAST_FPS"] if fast_fps is None else fast_fps
        if self.standard_fps <= 0 or self.fast_fps <= 0:
            raise ValueError("fps values must be positive")
        if cols < MAX_PIECE_WIDTH:
            raise ValueError(f"grid needs at least {MAX_PIECE_WIDTH} columns, got {cols}")

        self.scheduler = scheduler
        self.renderer = renderer
        self.grid = Grid(cols, rows)
        self.rng = PieceRandom(CONFIG["SEED"] if seed is None else seed)
        self.piece: Optional[Piece] = None
        self.state = GameState.PLAYING
        self.fps = self.standard_fps
        self.lines_cleared = 0

    @property
    def is_over(self) -> bool:
        return self.state is GameState.OVER

    def start(self):
        self.tick()

    def spawn_piece(self) -> Piece:
        return Piece.spawn(self.rng.next_kind(), self.grid, self.rng)

    def tick(self):
        if self.is_over:
            return

        if self.piece is None:
            self.piece = self.spawn_piece()
            log.debug("spawned %s at x=%d y=%d", self.piece.kind.name, self.piece.x, self.piece.y)

        if self.piece.would_collide(0, 1):
            if self.piece.is_game_over_after_move(0, 1):
                self.state = GameState.OVER
                log.info("Game Over! %d rows cleared", self.lines_cleared)
            if self.is_over:
                # last frame shows the blocked piece; nothing is rescheduled
                self.render()
                return
            self.piece.lock_into(self.grid)
            log.debug("locked %s at x=%d y=%d", self.piece.kind.name, self.piece.x, self.piece.y)
            self.piece = None
        else:
            self.piece.try_move(0, 1)

        cleared = self.grid.clear_full_rows()
        if cleared:
            self.lines_cleared += cleared
            log.info("cleared %d row(s)", cleared)

        self.render()
        self.scheduler.schedule(1000 / self.fps, self.tick)

    def render(self):
        if self.renderer is not None:
            self.renderer.draw(self)

    def soft_drop(self, held: bool):
        self.fps = self.fast_fps if held else self.standard_fps

    def reset(self):
        self.scheduler.cancel()
        self.grid.reset()
        self.piece = None
        self.state = GameState.PLAYING
        self.fps = self.standard_fps
        self.lines_cleared = 0
        log.info("restarting session")
        self.start()
