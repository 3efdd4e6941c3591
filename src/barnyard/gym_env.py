"""Gymnasium-compatible wrapper around a :class:`GameSession`.

Observation is a flat vector suitable for SB3 MlpPolicy. It includes:
  - rendered board, active piece painted in, scaled to [0, 1] (rows*cols)
  - overlay marks scaled to [0, 1] (rows*cols)
  - active piece kind one-hot (3)
  - upcoming piece kind one-hot (3)

Each action is a single command followed by one gravity step, so an agent
always makes progress.  The reward is the change in score.
"""

from __future__ import annotations

from enum import IntEnum
from random import Random
from typing import Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .game_state import GameSession
from .piece import Piece, PieceKind
from .tiles import Mark, TILE_LABELS, Tile


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE_CW = 3
    ROTATE_CCW = 4
    SOFT_DROP = 5


_KINDS = list(PieceKind)


class BarnyardGymEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 60,
    }

    def __init__(
        self,
        *,
        config: Optional[GameConfig] = None,
        max_steps: Optional[int] = None,
        render_mode: Optional[str] = "ansi",
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self._session = GameSession(self.config, rng=Random(self.config.seed))
        cells = self.config.rows * self.config.cols
        self._obs_size = cells * 2 + len(_KINDS) * 2
        self.action_space = spaces.Discrete(len(Action))
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(self._obs_size,), dtype=np.float32
        )
        self._steps = 0
        self._max_steps = max_steps

    @property
    def session(self) -> GameSession:
        return self._session

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._session.rng.seed(seed)
        self._session.restart()
        self._steps = 0
        return self._observation(), self._info()

    def step(self, action: int):
        session = self._session
        before = session.score
        command = Action(int(action))
        if command is Action.LEFT:
            session.move_left()
        elif command is Action.RIGHT:
            session.move_right()
        elif command is Action.ROTATE_CW:
            session.rotate_cw()
        elif command is Action.ROTATE_CCW:
            session.rotate_ccw()
        elif command is Action.SOFT_DROP:
            session.soft_drop()
        if not session.game_over:
            session.step()
        self._steps += 1
        terminated = bool(session.game_over)
        truncated = self._max_steps is not None and self._steps >= self._max_steps
        reward = float(session.score - before)
        return self._observation(), reward, terminated, truncated, self._info()

    def render(self):
        lines = []
        for row in self._session.render_grid():
            lines.append("".join(TILE_LABELS[Tile(v)] for v in row))
        lines.append(f"score={self._session.display_score} level={self._session.level}")
        return "\n".join(lines)

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _observation(self) -> np.ndarray:
        session = self._session
        board = np.array(session.render_grid(), dtype=np.float32).reshape(-1) / float(max(Tile))
        overlay = session.board.overlay.astype(np.float32).reshape(-1) / float(max(Mark))
        parts = [board, overlay, self._one_hot(session.active), self._one_hot(session.upcoming)]
        return np.concatenate(parts, dtype=np.float32)

    def _one_hot(self, piece: Optional[Piece]) -> np.ndarray:
        out = np.zeros((len(_KINDS),), dtype=np.float32)
        if piece is not None:
            out[_KINDS.index(piece.kind)] = 1.0
        return out

    def _info(self) -> Dict:
        session = self._session
        return {
            "score": session.score,
            "level": session.level,
            "locks": session.locks,
            "clears": session.clears,
        }
