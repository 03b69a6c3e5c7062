"""Shared fixtures: fake browser, device pages, printers.json writer."""

import json
from pathlib import Path

import pytest

from core.registry import build_registry
from tests.utils import (
    E52645_URL,
    E57540_URL,
    LASER_408_URL,
    SAMSUNG_URL,
    FakeBrowser,
    read_fixture,
)


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def browser() -> FakeBrowser:
    """A fake browser serving all four device pages with their configured serials."""
    b = FakeBrowser()
    b.pages[SAMSUNG_URL] = read_fixture("samsung_m4080fx_counters.html")
    b.pages[LASER_408_URL] = read_fixture("hp_laser_408_counters.json")
    b.pages[E57540_URL] = read_fixture("hp_e57540dn_usage.html")
    b.pages[E52645_URL] = read_fixture("hp_e52645dn_usage.html")
    return b


@pytest.fixture
def write_printers(tmp_path):
    """Write a printers.json from [(model name, [(ip, serial), ...]), ...]."""

    def _write(groups, name="printers.json") -> Path:
        doc = {
            "printers": [
                {model: [{"ipAddress": ip, "serialNumber": sn, "model": model} for ip, sn in entries]}
                for model, entries in groups
            ]
        }
        path = tmp_path / name
        path.write_text(json.dumps(doc), encoding="utf-8")
        return path

    return _write
