"""Pytest fixtures for maxprotein tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from maxprotein.config import settings as settings_module
from maxprotein.config.settings import Settings
from maxprotein.optimizer.models import Food


def abbrev_line(
    description: str = "~Chicken, broiler, breast, raw~",
    kcal: str = "120",
    protein_g: str = "22.5",
    amount_g: str = "118",
    amount: str = "~.5 breast, bone and skin removed~",
    ndb_no: str = "~05062~",
) -> str:
    """Build one 53-field ABBREV.txt line."""
    fields = ["0"] * 53
    fields[0] = ndb_no
    fields[1] = description
    fields[2] = "72.85"
    fields[3] = kcal
    fields[4] = protein_g
    fields[48] = amount_g
    fields[49] = amount
    fields[50] = ""
    fields[51] = ""
    fields[52] = "0"
    return "^".join(fields)


def write_abbrev(path: Path, lines: list[str], newline: str = "\n") -> Path:
    path.write_text(newline.join(lines) + newline, encoding="latin-1")
    return path


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Use default settings instead of ~/.maxprotein/config.yaml."""
    settings = Settings()
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings


@pytest.fixture
def scenario_foods():
    """Three foods where greedy and exhaustive agree at a 300 kcal budget."""
    return [
        Food("Food A", "1 cup", 100, kcal=100, protein_g=5),
        Food("Food B", "1 cup", 100, kcal=200, protein_g=20),
        Food("Food C", "1 cup", 100, kcal=150, protein_g=15),
    ]


@pytest.fixture
def greedy_trap_foods():
    """Greedy's first pick blocks two smaller foods with more combined protein."""
    return [
        Food("Steak", "1 steak", 200, kcal=300, protein_g=30),
        Food("Tuna", "1 can", 165, kcal=150, protein_g=20),
        Food("Cottage cheese", "1 cup", 226, kcal=150, protein_g=20),
    ]


@pytest.fixture
def abbrev_file(tmp_path):
    """A small ABBREV.txt with three valid foods and one zero-calorie food."""
    lines = [
        abbrev_line("~Butter, salted~", "717", "0.85", "5", "~1 pat~", "~01001~"),
        abbrev_line("~Egg, whole, raw~", "143", "12.56", "50", "~1 large~", "~01123~"),
        abbrev_line("~Water, tap~", "0", "0", "237", "~1 cup~", "~14411~"),
        abbrev_line("~Chicken, breast, raw~", "120", "22.5", "118", "~.5 breast~", "~05062~"),
    ]
    return write_abbrev(tmp_path / "ABBREV.txt", lines)
