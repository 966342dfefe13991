from typing import Any, Dict, List

REQUIRED_LIST_FIELDS = ["customer_success", "customers"]
OPTIONAL_LIST_FIELDS = ["customer_success_away"]
RECORD_INT_FIELDS = ["id", "score"]


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _validate_records(name: str, records: List[Any]) -> List[str]:
    errors: List[str] = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            errors.append(f"{name}[{i}] must be an object with 'id' and 'score'")
            continue
        for f in RECORD_INT_FIELDS:
            if f not in record:
                errors.append(f"{name}[{i}] missing required field: {f}")
            elif not _is_int(record[f]):
                errors.append(f"{name}[{i}] field '{f}' must be an integer")
    return errors


def validate_scenario(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.

    A scenario holds ``customer_success`` and ``customers`` record lists
    and an optional ``customer_success_away`` id list.
    """
    if not isinstance(data, dict):
        return ["Scenario must be a JSON object"]

    errors: List[str] = []

    for f in REQUIRED_LIST_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {f}")
        elif not isinstance(data[f], list):
            errors.append(f"Field '{f}' must be a list")
        else:
            errors.extend(_validate_records(f, data[f]))

    for f in OPTIONAL_LIST_FIELDS:
        if f not in data:
            continue
        if not isinstance(data[f], list):
            errors.append(f"Field '{f}' must be a list if provided")
        elif not all(_is_int(v) for v in data[f]):
            errors.append(f"Field '{f}' must contain only integer ids")

    # Representative ids: 0 is the no-match sentinel, duplicates are ambiguous
    if isinstance(data.get("customer_success"), list):
        seen = set()
        for record in data["customer_success"]:
            if not isinstance(record, dict) or not _is_int(record.get("id")):
                continue
            cs_id = record["id"]
            if cs_id <= 0:
                errors.append(f"customer_success id {cs_id} must be positive")
            if cs_id in seen:
                errors.append(f"Duplicate customer_success id: {cs_id}")
            seen.add(cs_id)

    return errors
