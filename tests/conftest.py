from __future__ import annotations

import random
from pathlib import Path
from typing import Iterator

import pytest

from rasterart.core.rand import RandomSource, use_random_source
from rasterart.render.surface import RecordingSurface


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def rng() -> Iterator[RandomSource]:
    """Deterministic random source installed for the duration of a test."""
    with use_random_source(random.Random(1234)) as src:
        yield src


@pytest.fixture
def rasterart_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("RASTERART_HOME", str(tmp_path))
    return tmp_path
