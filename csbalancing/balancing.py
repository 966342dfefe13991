"""
Customer Success balancing.

Each customer goes to the available representative whose score is the
closest one at or above the customer's score. The result is the id of
the representative holding the most customers, or 0 when there is no
single winner.

Invariant:
No function here raises on edge-case input. Every failure mode
degrades to the 0 sentinel.
"""

from bisect import bisect_left
from dataclasses import replace
from operator import attrgetter
from typing import Dict, Iterable, List, Tuple

from .logger import get_logger
from .models import (
    Customer,
    CustomerLike,
    CustomerSuccess,
    CustomerSuccessLike,
    coerce_customer_success,
    coerce_customers,
    has_usable_score,
)

NO_MATCH = 0


def filter_available_customer_success(
    all_customer_success: List[CustomerSuccess],
    customer_success_away: Iterable[int],
) -> List[CustomerSuccess]:
    """Return the representatives that are not away, in input order."""
    away = set(customer_success_away)
    return [cs for cs in all_customer_success if cs.id not in away]


def find_closest_customer_success_id(
    customer: Customer,
    available_customer_success: List[CustomerSuccess],
) -> int:
    """
    Find the representative with the smallest non-negative score gap.

    Representatives scoring below the customer are never eligible, and
    neither is anyone without a numeric score. On an exact tie the first
    one in list order wins, so the result depends on input order.

    Returns:
        The matched id, or 0 when nobody qualifies
    """
    closest_id = NO_MATCH
    min_diff = float("inf")

    if not has_usable_score(customer.score):
        return closest_id

    for cs in available_customer_success:
        if not has_usable_score(cs.score):
            continue
        diff = cs.score - customer.score
        if 0 <= diff < min_diff:
            min_diff = diff
            closest_id = cs.id

    return closest_id


def update_customer_count(
    customer_success_id: int,
    available_customer_success: List[CustomerSuccess],
) -> List[CustomerSuccess]:
    """
    Increment the count of the first representative with this id.

    Unknown ids and the 0 sentinel are a no-op. Returns the same list.
    """
    if customer_success_id == NO_MATCH:
        return available_customer_success

    for cs in available_customer_success:
        if cs.id == customer_success_id:
            cs.customer_count += 1
            break

    return available_customer_success


def find_max_customer_count_id(available_customer_success: List[CustomerSuccess]) -> int:
    """
    Return the id with the highest customer count.

    Representatives with no customers are skipped. A count equal to the
    best seen so far is a tie: the result is 0 and the scan stops there,
    even if a later representative has a higher count.
    """
    max_count = float("-inf")
    customer_success_id = NO_MATCH

    for cs in available_customer_success:
        if not cs.customer_count:
            continue
        if cs.customer_count > max_count:
            max_count = cs.customer_count
            customer_success_id = cs.id
        elif cs.customer_count == max_count:
            return NO_MATCH

    return customer_success_id


class ScoreIndex:
    """
    Lookup structure giving the same answers as
    ``find_closest_customer_success_id`` and ``update_customer_count``
    without scanning the pool for every customer.

    Representatives are sorted by score with a stable sort, so among equal
    scores the earlier one in the pool still comes first. Representatives
    without a numeric score are left out of the search but can still be
    counted by id.
    """

    def __init__(self, available_customer_success: List[CustomerSuccess]):
        scored = [cs for cs in available_customer_success if has_usable_score(cs.score)]
        ordered = sorted(scored, key=attrgetter("score"))
        self._scores = [cs.score for cs in ordered]
        self._ids = [cs.id for cs in ordered]
        self._by_id: Dict[int, CustomerSuccess] = {}
        for cs in available_customer_success:
            self._by_id.setdefault(cs.id, cs)

    def closest_id(self, customer: Customer) -> int:
        if not has_usable_score(customer.score):
            return NO_MATCH
        pos = bisect_left(self._scores, customer.score)
        if pos == len(self._scores):
            return NO_MATCH
        return self._ids[pos]

    def record(self, customer_success_id: int) -> None:
        cs = self._by_id.get(customer_success_id)
        if cs is not None:
            cs.customer_count += 1


def _assign(pool: List[CustomerSuccess], customers: List[Customer]) -> int:
    index = ScoreIndex(pool)
    assigned = 0
    for customer in customers:
        closest_id = index.closest_id(customer)
        if closest_id != NO_MATCH:
            index.record(closest_id)
            assigned += 1
    return assigned


def _working_pool(
    customer_success: Iterable[CustomerSuccessLike],
    customer_success_away: Iterable[int],
) -> List[CustomerSuccess]:
    available = filter_available_customer_success(
        coerce_customer_success(customer_success), customer_success_away
    )
    # Copies, so counting never touches the caller's records
    return [replace(cs) for cs in available]


def assign_customers(
    customer_success: Iterable[CustomerSuccessLike],
    customers: Iterable[CustomerLike],
    customer_success_away: Iterable[int] = (),
) -> List[CustomerSuccess]:
    """Run the matching stage and return the available pool with counts."""
    pool = _working_pool(customer_success, customer_success_away)
    _assign(pool, coerce_customers(customers))
    return pool


def run_balancing(
    customer_success: Iterable[CustomerSuccessLike],
    customers: Iterable[CustomerLike],
    customer_success_away: Iterable[int],
) -> Tuple[int, List[CustomerSuccess]]:
    """
    Run the whole pipeline once.

    Returns:
        (winning id or 0, available pool with its customer counts)
    """
    logger = get_logger()

    pool = _working_pool(customer_success, customer_success_away)
    customer_list = coerce_customers(customers)
    if customer_list and not pool:
        logger.warning("No Customer Success available", customers=len(customer_list))

    assigned = _assign(pool, customer_list)
    winner_id = find_max_customer_count_id(pool)

    tie = winner_id == NO_MATCH and assigned > 0
    logger.record_run(len(customer_list), assigned, winner_id, tie)
    logger.debug(
        "Balancing run complete",
        available=len(pool),
        customers=len(customer_list),
        assigned=assigned,
        winner_id=winner_id,
        tie=tie,
    )
    return winner_id, pool


def customer_success_balancing(
    customer_success: Iterable[CustomerSuccessLike],
    customers: Iterable[CustomerLike],
    customer_success_away: Iterable[int],
) -> int:
    """
    Return the id of the representative serving the most customers.

    Args:
        customer_success: Representatives as dataclasses or {id, score} dicts
        customers: Customers as dataclasses or {id, score} dicts
        customer_success_away: Ids of representatives excluded from matching

    Returns:
        The winning id, or 0 on a tie or when nobody was assigned
    """
    winner_id, _ = run_balancing(customer_success, customers, customer_success_away)
    return winner_id
