from __future__ import annotations

import json

import pytest

from csv_browser.config import load_global_config
from csv_browser.core.exceptions import ConfigError


def _write(tmp_path, payload) -> None:
    (tmp_path / "global.json").write_text(
        payload if isinstance(payload, str) else json.dumps(payload)
    )


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_global_config(tmp_path)

    assert cfg.preview_rows == 10
    assert cfg.canvas.width == 600
    assert cfg.canvas.height == 400
    assert cfg.canvas.x_range == (60.0, 570.0)
    assert cfg.canvas.y_range == (350.0, 40.0)


def test_values_are_read(tmp_path):
    _write(
        tmp_path,
        {
            "ui_title": "T",
            "preview_rows": 5,
            "canvas": {"width": 800, "height": 500, "margin": {"left": 80}},
        },
    )
    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "T"
    assert cfg.preview_rows == 5
    assert cfg.canvas.width == 800
    assert cfg.canvas.margin.left == 80
    assert cfg.canvas.margin.top == 40


def test_invalid_json_raises(tmp_path):
    _write(tmp_path, "{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_bad_values_raise(tmp_path):
    _write(tmp_path, {"preview_rows": 0})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)

    _write(tmp_path, {"preview_rows": "many"})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_canvas_smaller_than_margins_raises(tmp_path):
    _write(tmp_path, {"canvas": {"width": 80, "height": 400}})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_non_object_canvas_or_margin_raises(tmp_path):
    _write(tmp_path, {"canvas": []})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)

    _write(tmp_path, {"canvas": {"margin": 5}})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
