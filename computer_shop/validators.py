"""
Validators for assembled computers and catalog entries.

Returns (is_valid, errors) tuple. Errors are reported, not raised:
the facade logs them and carries on with the order.
"""
from typing import Any

from computer_shop.types import Component, Computer


def validate_computer(data: Any) -> tuple[bool, list[str]]:
    """Every one of the five fields must be a non-empty string."""
    if not isinstance(data, Computer):
        return False, ["Product must be a Computer"]
    errors = []
    for name in ("cpu", "gpu", "ram", "storage", "cooling"):
        value = getattr(data, name)
        if not isinstance(value, str):
            errors.append(f"{name} must be a string")
        elif not value.strip():
            errors.append(f"Missing {name}")
    return len(errors) == 0, errors


def validate_component(data: Any) -> tuple[bool, list[str]]:
    """Validate a single catalog entry."""
    if not isinstance(data, Component):
        return False, ["Catalog item must be a Component"]
    errors = []
    if not data.name:
        errors.append("Component missing name")
    if isinstance(data.price, bool) or not isinstance(data.price, (int, float)):
        errors.append(f"{data.name or '?'}: invalid price {data.price!r}")
    elif data.price < 0:
        errors.append(f"{data.name or '?'}: negative price {data.price}")
    return len(errors) == 0, errors


def validate_catalog(data: Any) -> tuple[bool, list[str]]:
    """Validate a whole catalog (any iterable of Components)."""
    items = list(data) if data is not None else []
    if not items:
        return False, ["Catalog is empty"]
    errors = []
    for i, item in enumerate(items):
        ok, errs = validate_component(item)
        if not ok:
            errors.extend(f"Catalog[{i}]: {e}" for e in errs)
    return len(errors) == 0, errors
