"""
Record types for Customer Success balancing.

Representatives and customers are plain dataclasses with fixed fields.
``customer_count`` is always present and starts at zero, so nothing
downstream has to check whether it was ever set.

``from_dict`` takes values as given. Strict checks belong to
``schema.validate_scenario``; a record without a usable score is simply
never matched.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

Score = Optional[float]


def has_usable_score(score: Any) -> bool:
    """True for a real, non-NaN number."""
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    return not math.isnan(score)


@dataclass
class CustomerSuccess:
    """A Customer Success representative and its running assignment count."""

    id: int
    score: Score
    customer_count: int = 0

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "CustomerSuccess":
        # camelCase key accepted for records exported by older tooling
        count = row.get("customer_count", row.get("customerCount")) or 0
        return cls(id=row.get("id"), score=row.get("score"), customer_count=count)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "score": self.score, "customer_count": self.customer_count}


@dataclass(frozen=True)
class Customer:
    id: int
    score: Score

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "Customer":
        return cls(id=row.get("id"), score=row.get("score"))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "score": self.score}


CustomerSuccessLike = Union[CustomerSuccess, Mapping[str, Any]]
CustomerLike = Union[Customer, Mapping[str, Any]]


def coerce_customer_success(items: Iterable[CustomerSuccessLike]) -> List[CustomerSuccess]:
    """Accept dataclass instances or ``{"id", "score"}`` mappings."""
    return [
        item if isinstance(item, CustomerSuccess) else CustomerSuccess.from_dict(item)
        for item in items
    ]


def coerce_customers(items: Iterable[CustomerLike]) -> List[Customer]:
    return [item if isinstance(item, Customer) else Customer.from_dict(item) for item in items]
