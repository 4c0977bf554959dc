from __future__ import annotations

import argparse
from pathlib import Path

import pytest
from PIL import Image

from rasterart import __version__, cli
from rasterart.config import make_render_config
from rasterart.render.surface import Color
from rasterart.settings.store import SettingsStore

_SMALL = ["--points", "20", "--lines", "3", "--circles", "2", "--cubes", "1"]


def test_parse_args() -> None:
    args = cli.parse_args(["--width", "10", "--seed", "3", "--circles", "4"])
    assert args.width == 10
    assert args.seed == 3
    assert args.circles == 4
    assert args.lines is None


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_config_merges_cli_over_settings(rasterart_home: Path) -> None:
    args = argparse.Namespace(
        width=50, height=40, seed=3, circles=2, output="x.png", background=[1, 2, 3]
    )
    cfg = make_render_config(args=args)
    assert (cfg.width, cfg.height, cfg.seed) == (50, 40, 3)
    assert cfg.scene.circles == 2
    assert cfg.output_path == Path("x.png")
    assert cfg.background == Color(1, 2, 3)
    assert cfg.backend == "pillow"


def test_config_rejects_invalid_override(rasterart_home: Path) -> None:
    with pytest.raises(ValueError):
        make_render_config(args=argparse.Namespace(width=0))


def test_main_writes_png(tmp_path: Path, rasterart_home: Path) -> None:
    out = tmp_path / "art.png"
    argv = ["--width", "64", "--height", "48", "--seed", "5", "-o", str(out)]
    cli.main(argv + _SMALL)
    with Image.open(out) as img:
        assert img.size == (64, 48)


def test_seed_is_reproducible(tmp_path: Path, rasterart_home: Path) -> None:
    outs = [tmp_path / "a.png", tmp_path / "b.png"]
    for out in outs:
        argv = ["--width", "40", "--height", "40", "--seed", "11", "-o", str(out)]
        cli.main(argv + _SMALL)
    with Image.open(outs[0]) as a, Image.open(outs[1]) as b:
        assert a.tobytes() == b.tobytes()


def test_save_settings_persists_overrides(tmp_path: Path, rasterart_home: Path) -> None:
    out = tmp_path / "saved.png"
    argv = ["--width", "30", "--height", "20", "--circles", "4", "-o", str(out)]
    cli.main(argv + ["--points", "3", "--lines", "0", "--save-settings"])
    stored = SettingsStore.load()
    assert (stored.width, stored.height, stored.circles, stored.points) == (
        30,
        20,
        4,
        3,
    )
    assert stored.output_path == str(out)

    # a later run without flags picks the saved values up
    cfg = make_render_config(args=cli.parse_args([]))
    assert (cfg.width, cfg.height) == (30, 20)
    assert cfg.scene.circles == 4


def test_settings_not_saved_without_flag(tmp_path: Path, rasterart_home: Path) -> None:
    argv = ["--width", "16", "--height", "16", "-o", str(tmp_path / "n.png")]
    cli.main(argv + _SMALL)
    assert not SettingsStore.settings_path().exists()
