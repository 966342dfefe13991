"""
Scenario files: JSON documents bundling the three balancing inputs.

    {
      "customer_success": [{"id": 1, "score": 60}, ...],
      "customers": [{"id": 1, "score": 90}, ...],
      "customer_success_away": [2, 4]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .models import Customer, CustomerSuccess
from .schema import validate_scenario


class ScenarioError(ValueError):
    """Raised when a scenario file cannot be read or fails validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass
class Scenario:
    customer_success: List[CustomerSuccess]
    customers: List[Customer]
    customer_success_away: List[int] = field(default_factory=list)


def read_scenario_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ScenarioError(f"Input file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ScenarioError(f"Invalid JSON in {path}: {e}") from e


def parse_scenario(data: Dict[str, Any]) -> Scenario:
    errors = validate_scenario(data)
    if errors:
        raise ScenarioError(f"Invalid scenario ({len(errors)} errors)", errors)
    return Scenario(
        customer_success=[CustomerSuccess.from_dict(r) for r in data["customer_success"]],
        customers=[Customer.from_dict(r) for r in data["customers"]],
        customer_success_away=list(data.get("customer_success_away", [])),
    )


def load_scenario(path: Path) -> Scenario:
    return parse_scenario(read_scenario_json(path))
