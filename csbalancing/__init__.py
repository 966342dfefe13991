__version__ = "0.1.0"

from .balancing import (
    NO_MATCH,
    assign_customers,
    customer_success_balancing,
    filter_available_customer_success,
    find_closest_customer_success_id,
    find_max_customer_count_id,
    run_balancing,
    update_customer_count,
)
from .models import Customer, CustomerSuccess

__all__ = [
    "NO_MATCH",
    "Customer",
    "CustomerSuccess",
    "assign_customers",
    "customer_success_balancing",
    "filter_available_customer_success",
    "find_closest_customer_success_id",
    "find_max_customer_count_id",
    "run_balancing",
    "update_customer_count",
]
