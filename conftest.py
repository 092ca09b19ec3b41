# -*- coding: utf-8 -*-
"""
Общие фикстуры тестов libv.
"""

import json

import pytest

from libv.math import Vec, Vec3
from libv.utils.config import Config, CONFIG_ENV


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path):
    """Каждый тест – с чистой конфигурацией, без файла в рабочем каталоге."""
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "libv.json"))
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Записать JSON‑конфиг и вернуть путь к нему."""
    def _write(data):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV, str(path))
        Config.reset()
        return path
    return _write


# тройки значений для сверки Vec3 и Vec[T, 3]
TRIPLES = [
    (1.0, 2.0, 3.0),
    (-1.5, 0.25, 4.0),
    (0.1, 0.2, 0.3),
    (3.0, -7.0, 11.5),
    (1e-3, 1e3, -2.5),
]


@pytest.fixture(params=TRIPLES, ids=lambda t: "x".join(str(c) for c in t))
def triple(request):
    return request.param


@pytest.fixture
def V3():
    return Vec[float, 3]


@pytest.fixture
def V4():
    return Vec[float, 4]


@pytest.fixture
def unit_axes():
    return Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
