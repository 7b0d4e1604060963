"""InputQueue - serializes player input onto the frame loop."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from flappy.log import get_logger
from flappy.types import GameState

if TYPE_CHECKING:
    from flappy.engine import Game

logger = get_logger("input")


@dataclass(frozen=True)
class Impulse:
    """Spacebar or click on the play surface."""


@dataclass(frozen=True)
class Restart:
    """Explicit start/restart from an overlay button."""


class InputQueue:
    """Routes input commands to typed handlers between ticks.

    Commands may be enqueued from any event callback; they only touch the
    game when the frame loop drains them.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[[Any, Game], bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(
        self,
        cmd_type: type[Any],
        handler: Callable[[Any, Game], bool],
    ) -> None:
        """Register ``handler(cmd, game) -> bool``. Later calls overwrite."""
        self._handlers[cmd_type] = handler

    def enqueue(self, cmd: Any) -> None:
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, game: Game) -> list[tuple[Any, bool]]:
        """Apply all pending commands in arrival order.

        Raises ``TypeError`` if no handler is registered for a command's type.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(
                    f"No handler registered for {type(cmd).__qualname__}"
                )
            accepted = handler(cmd, game)
            if not accepted:
                logger.debug("rejected %s in state %s", type(cmd).__name__, game.state.value)
            results.append((cmd, accepted))
        return results


def _on_impulse(cmd: Impulse, game: Game) -> bool:
    game.apply_impulse()
    return True


def _on_restart(cmd: Restart, game: Game) -> bool:
    if game.state is GameState.PLAYING:
        return False
    game.reset()
    return True


def make_input_queue() -> InputQueue:
    """InputQueue with the standard Impulse and Restart handlers."""
    queue = InputQueue()
    queue.handle(Impulse, _on_impulse)
    queue.handle(Restart, _on_restart)
    return queue
