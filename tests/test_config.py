from pathlib import Path

import pytest

from configs.settings import DEFAULT_CONFIG_PATH, AppConfig, default_config, load_config
from exceptions import ConfigValidationError, InvalidConfigError


def test_load_config() -> None:
    config = load_config(Path("configs/default.yaml"))

    assert config.canvas.default_size == 16
    assert config.canvas.size_range.sizes() == [8, 16, 24, 32]
    assert config.canvas.default_color == "#000000"
    assert config.export.default_filename == "pixel-art.png"
    assert config.ui.window_title == "PixelArt Studio"


def test_default_config_matches_default_yaml() -> None:
    assert load_config(DEFAULT_CONFIG_PATH) == default_config()


def test_missing_sections_use_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas:\n  default_size: 24\n")

    config = load_config(path)

    assert config.canvas.default_size == 24
    assert config.canvas.max_size == 32
    assert config.export.padding_px == 16
    assert isinstance(config, AppConfig)


def test_empty_file_uses_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path) == default_config()


def test_missing_file() -> None:
    with pytest.raises(InvalidConfigError):
        load_config(Path("does/not/exist.yaml"))


def test_malformed_yaml(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas: [unclosed\n")

    with pytest.raises(InvalidConfigError):
        load_config(path)


def test_default_size_off_step(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas:\n  default_size: 12\n")

    with pytest.raises(InvalidConfigError, match="default_size"):
        load_config(path)


def test_inverted_range(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas:\n  min_size: 32\n  max_size: 8\n  default_size: 16\n")

    with pytest.raises(InvalidConfigError, match="min_size"):
        load_config(path)


def test_schema_violation(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas:\n  default_color: blue\n")

    with pytest.raises(ConfigValidationError):
        load_config(path)


def test_max_size_off_step(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas:\n  max_size: 30\n  size_step: 8\n")

    with pytest.raises(InvalidConfigError, match="max_size"):
        load_config(path)
