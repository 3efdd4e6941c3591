"""Facts the engine reports to presentation collaborators.

Renderers, particle systems and audio subscribe to a session's
:class:`EventHub`; the engine itself never draws or plays anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

from .piece import PieceKind
from .tiles import Tile


@dataclass(frozen=True)
class RegionCleared:
    region_size: int
    animal: Tile
    egg_count: int
    turd_count: int
    cells: Tuple[Tuple[int, int], ...] = ()


@dataclass(frozen=True)
class WolvesBlast:
    popped: Tuple[Tuple[int, int, Tile], ...]


@dataclass(frozen=True)
class PieceLocked:
    kind: PieceKind
    locks: int
    level: int


@dataclass(frozen=True)
class GameOver:
    score: int
    level: int
    locks: int
    clears: int


Event = Union[RegionCleared, WolvesBlast, PieceLocked, GameOver]
Listener = Callable[[Event], None]


class EventHub:
    """Fan events out to subscribers in subscription order."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: Event) -> None:
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)
