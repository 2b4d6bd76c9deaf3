from __future__ import annotations

import logging
import time
from typing import Optional

from .config import SaveConfig
from .manager import SaveManager

logger = logging.getLogger(__name__)


class TickLoop:
    """A headless loop that drains the save manager's deferred actions.

    Hosts with their own update loop call ``SaveManager.tick`` directly; this
    class covers CLI and test runs where nothing else drives the ticks.
    """

    def __init__(self, manager: SaveManager, config: Optional[SaveConfig] = None) -> None:
        self.manager = manager
        self.config = config or manager.config
        self._running: bool = False
        self._step: int = 0
        self._last_time: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        """Start the loop state.

        Safe to call multiple times; subsequent calls are no-ops.
        """
        if self._running:
            logger.debug("TickLoop.start() called while already running")
            return
        self._running = True
        self._step = 0
        self._last_time = time.perf_counter()
        logger.info("TickLoop started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.info("TickLoop stopped at step=%s", self._step)

    def update(self, dt: float) -> None:
        """Perform a single scheduling tick.

        Args:
            dt: Delta time in seconds since last update.
        """
        if not self._running:
            logger.debug("update() called while not running; ignored")
            return
        self._step += 1
        logger.debug("Tick #%d (dt=%.4f)", self._step, dt)
        self.manager.tick()

        if self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()

    def run(self) -> None:
        """Run a blocking loop until stopped or max_steps reached.

        Throttles to tick_rate if configured.
        """
        self.start()
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)

        while self._running:
            now = time.perf_counter()
            dt = 0.0 if self._last_time is None else now - self._last_time
            self._last_time = now

            self.update(dt)

            if target_dt > 0:
                remaining = target_dt - (time.perf_counter() - now)
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)
