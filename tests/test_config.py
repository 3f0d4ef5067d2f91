import logging

import pytest

import tetris_config
from tetris_layout import compute_dims, to_screen
from tetris_log import setup_logging


@pytest.fixture
def config(monkeypatch):
    monkeypatch.setattr(tetris_config, "CONFIG", dict(tetris_config.CONFIG))
    return tetris_config.CONFIG


def test_env_overrides_coerce_types(config):
    tetris_config.load_env({"TETRIS_TIMER_DELAY_MS": "250", "TETRIS_SEED": "9",
                            "TETRIS_LOG_LEVEL": "DEBUG", "UNRELATED": "x"})
    assert config["TIMER_DELAY_MS"] == 250
    assert config["SEED"] == 9
    assert config["LOG_LEVEL"] == "DEBUG"


def test_bad_override_raises(config):
    with pytest.raises(ValueError):
        tetris_config.load_env({"TETRIS_FPS": "fast"})


def test_layout_shows_twenty_rows():
    dims = compute_dims()
    assert dims.board_h == 20 * dims.cell
    assert to_screen(dims, 0, 2) == (0, 0)
    assert to_screen(dims, 3, 21) == (3 * dims.cell, 19 * dims.cell)


def test_setup_logging_accepts_level_names(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    setup_logging("debug")
    assert calls["level"] == logging.DEBUG
