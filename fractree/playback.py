"""
Paced playback of a draw command sequence.

Generation is instantaneous; animating the tree is a presentation concern.
A Player dispatches commands onto a surface in batches with a fixed delay
between batches, in their original order, and can be cancelled at any time
from another thread (e.g. when the window is closed or the parameters
change).
"""

import logging
import threading
import time
from collections.abc import Callable, Iterable

from fractree.commands import DrawCommand
from fractree.surface import Surface, dispatch

_LOGGER = logging.getLogger(__name__)


class Player:
    """
    Dispatch draw commands onto a surface, optionally paced.

    Args:
        surface: Where commands are drawn
        delay: Seconds to wait between batches (0 plays immediately)
        batch_size: Commands dispatched per batch
        sleep: Wait function, replaceable for tests
        on_batch: Called after each batch (e.g. to refresh a window)
    """

    def __init__(
        self,
        surface: Surface,
        delay: float = 0.0,
        batch_size: int = 1,
        sleep: Callable[[float], None] = time.sleep,
        on_batch: Callable[[], None] | None = None,
    ):
        if delay < 0:
            raise ValueError("delay must be nonnegative")
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.surface = surface
        self.delay = delay
        self.batch_size = batch_size
        self._sleep = sleep
        self._on_batch = on_batch
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop dispatching; safe to call from any thread, at any time."""
        self._cancelled.set()

    def play(self, commands: Iterable[DrawCommand]) -> int:
        """
        Dispatch `commands` in order until exhausted or cancelled.

        Returns:
            Number of commands dispatched
        """
        dispatched = 0
        in_batch = 0
        for command in commands:
            if self._cancelled.is_set():
                break
            dispatch(command, self.surface)
            dispatched += 1
            in_batch += 1
            if in_batch == self.batch_size:
                in_batch = 0
                self._end_batch()
        else:
            if in_batch:
                self._end_batch(last=True)

        _LOGGER.debug(
            "Player.play: dispatched %d commands (cancelled=%s)",
            dispatched,
            self.cancelled,
        )
        return dispatched

    def restart(self, commands: Iterable[DrawCommand]) -> int:
        """
        Play a fresh sequence on a cleared surface.

        Used when parameters or canvas size change: the in-flight sequence
        is no longer valid and must not be resumed.
        """
        self._cancelled.clear()
        clear = getattr(self.surface, "clear", None)
        if clear is not None:
            clear()
        return self.play(commands)

    def _end_batch(self, last: bool = False) -> None:
        if self._on_batch is not None:
            self._on_batch()
        if self.delay > 0 and not last and not self._cancelled.is_set():
            self._sleep(self.delay)
