
import os

COLS, ROWS = 10, 22
HIDDEN_ROWS = 2

CONFIG = {
    "TIMER_DELAY_MS": 400,
    "BLOCK_SIZE": 30,
    "FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}

def load_env(environ=os.environ):
    """Apply TETRIS_<KEY> overrides from the environment onto CONFIG."""
    for key, default in CONFIG.items():
        raw = environ.get("TETRIS_" + key)
        if raw is None: continue
        if default is None or isinstance(default, int):
            CONFIG[key] = int(raw)
        else:
            CONFIG[key] = type(default)(raw)
    return CONFIG
