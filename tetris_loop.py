
"""Fixed-interval tick driver"""
import logging
import threading
from tetris_config import CONFIG
from tetris_state import GameState, Command, Snapshot

log = logging.getLogger(__name__)

class GameLoop:
    """Advances a GameState once per interval and applies commands between ticks.

    Ticks and commands share one lock so each runs as a single step against
    the state. While the game is paused or over the timer is stopped: elapsed
    time is discarded, and resuming starts a fresh interval.
    """
    def __init__(self, state: GameState, interval_ms=None):
        self.state = state
        self.interval_ms = interval_ms if interval_ms is not None else CONFIG["TIMER_DELAY_MS"]
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive, got %r" % (self.interval_ms,))
        self.acc = 0.0
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        return not (self.state.paused or self.state.game_over)

    def start(self):
        with self._lock:
            self.acc = 0.0
            self.state.start()

    def update(self, dt_ms) -> int:
        ticks = 0
        with self._lock:
            if not self.running:
                self.acc = 0.0
                return 0
            self.acc += dt_ms
            while self.acc >= self.interval_ms and self.running:
                self.acc -= self.interval_ms
                self.state.tick()
                ticks += 1
            if not self.running: self.acc = 0.0
        return ticks

    def tick(self):
        with self._lock:
            self.state.tick()
            if not self.running: self.acc = 0.0

    def dispatch(self, command: Command):
        with self._lock:
            log.debug("command %s", command.name)
            self.state.handle(command)
            if command is Command.RESTART or not self.running:
                self.acc = 0.0

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self.state.snapshot()
