"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import Any, Dict, List

from csbalancing.logger import reset_logger
from csbalancing.models import Customer, CustomerSuccess


def map_entities(scores: List[int], cls=Customer) -> list:
    """Build records with ids 1..n from a list of scores."""
    return [cls(id=index + 1, score=score) for index, score in enumerate(scores)]


def build_size_entities(size: int, score: int, cls=Customer) -> list:
    """Build ``size`` records sharing one score."""
    return [cls(id=i + 1, score=score) for i in range(size)]


def array_seq(count: int, start_at: int) -> List[int]:
    return list(range(start_at, start_at + count))


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Fresh global logger per test, console output off, no log files."""
    monkeypatch.setenv("CSB_LOG_CONSOLE", "false")
    monkeypatch.delenv("CSB_LOG_DIR", raising=False)
    monkeypatch.delenv("CSB_LOG_LEVEL", raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def standard_customers() -> List[Customer]:
    """Customer set shared by most reference scenarios."""
    return map_entities([10, 10, 10, 20, 20, 30, 30, 30, 20, 60])


@pytest.fixture
def scenario_one() -> Dict[str, Any]:
    """Reference scenario with dict records, as callers pass them."""
    return {
        "customer_success": [
            {"id": 1, "score": 60},
            {"id": 2, "score": 20},
            {"id": 3, "score": 95},
            {"id": 4, "score": 75},
        ],
        "customers": [
            {"id": 1, "score": 90},
            {"id": 2, "score": 20},
            {"id": 3, "score": 70},
            {"id": 4, "score": 40},
            {"id": 5, "score": 60},
            {"id": 6, "score": 10},
        ],
        "customer_success_away": [2, 4],
    }


@pytest.fixture
def scenario_file(tmp_path, scenario_one) -> Path:
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(scenario_one, indent=2))
    return path


@pytest.fixture
def cs_entities():
    """Factory for representatives from a list of scores."""
    def _build(scores: List[int]) -> List[CustomerSuccess]:
        return map_entities(scores, cls=CustomerSuccess)
    return _build


@pytest.fixture
def customer_entities():
    """Factory for customers from a list of scores."""
    def _build(scores: List[int]) -> List[Customer]:
        return map_entities(scores)
    return _build


@pytest.fixture
def large_scenario():
    """999 representatives scored 1..999 and 10,000 customers at 998."""
    css = map_entities(array_seq(999, 1), cls=CustomerSuccess)
    customers = build_size_entities(10000, 998)
    return css, customers, [999]
