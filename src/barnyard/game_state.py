"""High level game session.

:class:`GameSession` owns the board, the active and upcoming pieces and all
counters, and exposes the command surface a driver calls.  It has no clock:
the driver either calls :meth:`GameSession.step` for one gravity step or
feeds elapsed time to :meth:`GameSession.tick`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, List, Optional

from .board import Board, Grid
from .clearing import Region, best_group, resolve_board
from .config import GameConfig
from .effects import lock_piece
from .events import Event, EventHub, GameOver, PieceLocked, WolvesBlast
from .generator import PieceGenerator
from .movement import ghost_row, move_horizontal, rotate, soft_drop_step
from .piece import Piece, PieceKind
from .scoring import ScoringRules
from .utils import collides, fall_interval_ms, level_for_locks, render_grid


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of everything a renderer or HUD needs."""

    board: Grid
    overlay: Grid
    active: Optional[Piece]
    upcoming: Optional[Piece]
    ghost_row: Optional[int]
    score: int
    display_score: int
    level: int
    locks: int
    clears: int
    fall_interval: int
    best_group: Optional[Region]
    paused: bool
    game_over: bool


class GameSession:
    """Mutable state for one board, changed only through its commands."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[Random] = None,
        rules: Optional[ScoringRules] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else Random(self.config.seed)
        self.rules = rules or ScoringRules(clear_threshold=self.config.clear_threshold)
        self.generator = PieceGenerator(self.config, self.rng)
        self.events = EventHub()
        self.board = Board(self.config.cols, self.config.rows)
        self.active: Optional[Piece] = None
        self.upcoming: Optional[Piece] = None
        self.score = 0
        self.level = 1
        self.locks = 0
        self.clears = 0
        self.fall_interval = self.config.base_fall_ms
        self.fall_accum = 0
        self.paused = False
        self.game_over = False
        self.restart()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def restart(self) -> None:
        """Replace the whole session state with a fresh game."""

        board = Board(self.config.cols, self.config.rows)
        board.sprinkle_overlay(
            self.rng,
            eggs=self.config.initial_eggs,
            turds=self.config.initial_turds,
            depth=self.config.overlay_depth,
            max_tries=self.config.overlay_tries,
        )
        self.board = board
        self.score = 0
        self.level = 1
        self.locks = 0
        self.clears = 0
        self.fall_interval = self.config.base_fall_ms
        self.fall_accum = 0
        self.paused = False
        self.game_over = False
        self.active = None
        self.upcoming = self.generator.spawn()
        self._spawn_next()
        LOGGER.info("New game on a %dx%d board", self.board.height, self.board.width)

    def set_paused(self, paused: bool) -> None:
        self.paused = bool(paused)

    def subscribe(self, listener: Callable[[Event], None]) -> Callable[[], None]:
        """Register ``listener`` for engine events; returns an unsubscribe hook."""

        return self.events.subscribe(listener)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def move_left(self) -> bool:
        return self._move(-1)

    def move_right(self) -> bool:
        return self._move(1)

    def rotate_cw(self) -> bool:
        return self._rotate(True)

    def rotate_ccw(self) -> bool:
        return self._rotate(False)

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it if it is resting."""

        return self.step()

    def step(self) -> bool:
        """Perform one gravity step.

        Returns ``True`` if the piece moved down, ``False`` if it locked or
        the session is not accepting commands.
        """

        if not self._accepting():
            return False
        if soft_drop_step(self.board, self.active):
            return True
        self._lock()
        return False

    def tick(self, elapsed_ms: float) -> bool:
        """Advance the fall accumulator and step once it reaches the interval.

        Returns ``True`` when a gravity step was taken.
        """

        if not self._accepting():
            return False
        self.fall_accum += elapsed_ms
        if self.fall_accum < self.fall_interval:
            return False
        self.fall_accum = 0
        self.step()
        return True

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def display_score(self) -> int:
        return max(0, self.score)

    def ghost_row(self) -> Optional[int]:
        if self.active is None:
            return None
        return ghost_row(self.board, self.active)

    def best_group(self) -> Optional[Region]:
        return best_group(self.board)

    def render_grid(self) -> List[List[int]]:
        active = None if self.game_over else self.active
        return render_grid(self.board, active)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            board=self.board.grid.copy(),
            overlay=self.board.overlay.copy(),
            active=self.active.copy() if self.active else None,
            upcoming=self.upcoming.copy() if self.upcoming else None,
            ghost_row=self.ghost_row(),
            score=self.score,
            display_score=self.display_score,
            level=self.level,
            locks=self.locks,
            clears=self.clears,
            fall_interval=self.fall_interval,
            best_group=self.best_group(),
            paused=self.paused,
            game_over=self.game_over,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _accepting(self) -> bool:
        return not (self.paused or self.game_over) and self.active is not None

    def _move(self, dx: int) -> bool:
        if not self._accepting():
            return False
        return move_horizontal(self.board, self.active, dx)

    def _rotate(self, clockwise: bool) -> bool:
        if not self._accepting():
            return False
        return rotate(self.board, self.active, clockwise)

    def _update_level(self) -> None:
        self.level = level_for_locks(self.locks, self.config.locks_per_level)
        self.fall_interval = fall_interval_ms(
            self.level,
            self.config.base_fall_ms,
            self.config.min_fall_ms,
            self.config.fall_decay,
        )

    def _lock(self) -> None:
        """Commit the active piece, resolve the board and bring in the next one."""

        piece = self.active
        result = lock_piece(self.board, piece, self.rng)
        if result.topped_out:
            self._end_game()
            return

        self.locks += 1
        self._update_level()
        resolved = resolve_board(self.board, self.score, self.rules)
        self.score = resolved.score
        self.clears += len(resolved.cleared)
        LOGGER.debug(
            "Locked %s piece (locks=%d, level=%d, cleared=%d, score=%d)",
            piece.kind.value,
            self.locks,
            self.level,
            len(resolved.cleared),
            self.score,
        )
        self._spawn_next()

        if piece.kind is PieceKind.WOLVES:
            self.events.emit(WolvesBlast(popped=result.popped))
        for cleared in resolved.cleared:
            self.events.emit(cleared)
        self.events.emit(PieceLocked(kind=piece.kind, locks=self.locks, level=self.level))
        if self.game_over:
            self._announce_game_over()

    def _spawn_next(self) -> None:
        self.active = self.upcoming if self.upcoming is not None else self.generator.spawn()
        self.upcoming = self.generator.spawn()
        if collides(self.board, self.active):
            self.game_over = True

    def _end_game(self) -> None:
        self.game_over = True
        self._announce_game_over()

    def _announce_game_over(self) -> None:
        LOGGER.info("Game over. Score: %d, level: %d", self.display_score, self.level)
        self.events.emit(
            GameOver(score=self.score, level=self.level, locks=self.locks, clears=self.clears)
        )
