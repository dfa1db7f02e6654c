from __future__ import annotations

import math

TEXT_FIELDS = ("name", "category", "validity", "imageReference")
REQUIRED_FIELDS = ("name", "category", "validity", "price", "imageReference")


def _parse_price(value) -> float | None:
    # bool is an int subclass; "true" is not a price
    if isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return price


def validate_gift_payload(payload) -> tuple[dict, list[str]]:
    """
    Check a create/replace body and return (fields, errors).

    ``fields`` holds the cleaned values (text stripped, price as float) and is
    only meaningful when ``errors`` is empty.
    """
    if not isinstance(payload, dict):
        return {}, ["Request body must be a JSON object"]

    fields: dict = {}
    errors: list[str] = []
    for key in REQUIRED_FIELDS:
        value = payload.get(key)
        if key == "price":
            if value is None or value == "":
                errors.append("Missing field: price")
                continue
            price = _parse_price(value)
            if price is None:
                errors.append("price must be a number greater than 0")
            else:
                fields["price"] = price
            continue
        if value and not isinstance(value, str):
            errors.append(f"{key} must be text")
            continue
        text = value.strip() if value else ""
        if not text:
            errors.append(f"Missing field: {key}")
        else:
            fields[key] = text
    return fields, errors


def next_gift_id(records: list[dict]) -> int:
    ids = [r.get("id") for r in records if isinstance(r, dict)]
    ids = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
    return max(ids) + 1 if ids else 1


def find_gift_index(records: list[dict], gift_id: int) -> int | None:
    for i, r in enumerate(records):
        if isinstance(r, dict) and r.get("id") == gift_id:
            return i
    return None


def build_gift(gift_id: int, fields: dict) -> dict:
    return {
        "id": gift_id,
        "name": fields["name"],
        "category": fields["category"],
        "validity": fields["validity"],
        "price": fields["price"],
        "imageReference": fields["imageReference"],
    }
