"""Simple pygame front-end for the barnyard engine.

This module glues a :class:`~barnyard.game_state.GameSession` to a pygame
window: it decodes key presses into session commands, feeds the frame clock
into the session's fall accumulator and draws the board, overlay, ghost and
active piece.  Engine events are only logged here; richer presentation
(particles, sound) would subscribe the same way.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import pygame

from .config import GameConfig
from .events import Event, GameOver, RegionCleared, WolvesBlast
from .game_state import GameSession
from .piece import Piece
from .tiles import TILE_COLORS, TILE_LABELS, Mark, Tile, group_name

# Size of a single board cell in pixels
CELL_SIZE = 36
# Frames per second to run the game loop at
FPS = 60

MARK_COLORS = {
    Mark.EGG: (250, 245, 230),
    Mark.TURD: (120, 80, 50),
}

LOGGER = logging.getLogger(__name__)


def describe(event: Event) -> str:
    """Return a one-line banner for ``event``."""

    if isinstance(event, RegionCleared):
        text = f"Cleared {event.region_size} {event.animal.name.lower()} ({group_name(event.animal)})"
        if event.egg_count:
            text += f" eggs x{event.egg_count}"
        if event.turd_count:
            text += f" turds x{event.turd_count}"
        return text
    if isinstance(event, WolvesBlast):
        return f"Wolves BOOM ({len(event.popped)} tiles)"
    if isinstance(event, GameOver):
        return f"Game over. Score: {max(0, event.score)}"
    return type(event).__name__


def draw_cell(screen: pygame.Surface, font: pygame.font.Font, x: int, y: int, tile: Tile) -> None:
    rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, TILE_COLORS[tile], rect.inflate(-2, -2), border_radius=8)
    label = font.render(TILE_LABELS[tile], True, (20, 20, 20) if tile != Tile.BLACK_SHEEP else (230, 230, 230))
    screen.blit(label, label.get_rect(center=rect.center))


def draw_session(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    """Render board, overlay, ghost and active piece."""

    board = session.board
    screen.fill((5, 5, 7))
    for y in range(board.height):
        for x in range(board.width):
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, (30, 30, 36), rect, 1)
            mark = board.get_mark(x, y)
            if mark != Mark.NONE:
                pygame.draw.circle(screen, MARK_COLORS[mark], rect.center, CELL_SIZE // 6)
            tile = board.get_cell(x, y)
            if tile != Tile.EMPTY:
                draw_cell(screen, font, x, y, tile)

    piece: Optional[Piece] = session.active
    if piece is None or session.game_over:
        return
    if not session.paused:
        drop = session.ghost_row() - piece.y
        for x, y in piece.cells(0, drop):
            if y >= 0:
                rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                pygame.draw.rect(screen, (60, 60, 70), rect.inflate(-6, -6), 2, border_radius=8)
    for x, y, tile in piece.tiles():
        if y >= 0:
            draw_cell(screen, font, x, y, tile)


def handle_key(event: pygame.event.Event, session: GameSession) -> None:
    """Process keyboard events for piece movement."""

    if event.key == pygame.K_p:
        session.set_paused(not session.paused)
    elif event.key == pygame.K_r:
        session.restart()
    elif event.key == pygame.K_LEFT:
        session.move_left()
    elif event.key == pygame.K_RIGHT:
        session.move_right()
    elif event.key in (pygame.K_UP, pygame.K_x):
        session.rotate_cw()
    elif event.key == pygame.K_z:
        session.rotate_ccw()
    elif event.key == pygame.K_DOWN:
        session.soft_drop()


class GameRunner:
    """Manage the game loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._running = False
        self._session: Optional[GameSession] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    def _on_event(self, event: Event) -> None:
        LOGGER.info(describe(event))

    async def _run_loop(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode(
            (self.config.cols * CELL_SIZE, self.config.rows * CELL_SIZE)
        )
        font = pygame.font.SysFont(None, CELL_SIZE - 8)
        clock = pygame.time.Clock()

        self._session = GameSession(self.config)
        self._session.subscribe(self._on_event)
        LOGGER.info("Game started")

        self._running = True
        while self._running:
            dt = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self._session)

            self._session.tick(dt)
            draw_session(screen, font, self._session)
            state = "Game over - " if self._session.game_over else ("Paused - " if self._session.paused else "")
            pygame.display.set_caption(
                f"Barnyard - {state}Score: {self._session.display_score}  Level: {self._session.level}"
            )
            pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def pause(self) -> None:
        if not self._running or self._session is None:
            LOGGER.info("Pause ignored: game not running")
            return
        self._session.set_paused(True)

    def resume(self) -> None:
        if not self._running or self._session is None:
            LOGGER.info("Resume ignored: game not running")
            return
        self._session.set_paused(False)

    def stop(self) -> None:
        self._running = False

    def run(self) -> None:
        asyncio.run(self._run_loop())


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    GameRunner().run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
