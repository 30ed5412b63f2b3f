"""Map the legacy and current wire schemas onto the canonical record shape.

Rows and payloads written by older versions of the front-end use a mix of
snake_case and camelCase names (``style_preferences`` vs ``stylePreferences``,
``value`` vs ``amount``...). Everything entering the repositories goes through
one of the ``normalize_*_payload`` helpers so the rest of the code only ever
sees canonical names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

_MISSING: Final = object()

# Canonical field -> accepted wire names, in precedence order.
CLIENT_FIELD_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "first_name": ("first_name", "firstName"),
    "last_name": ("last_name", "lastName"),
    "email": ("email",),
    "phone": ("phone",),
    "status": ("status",),
    "source": ("source",),
    "budget": ("budget",),
    "style_preferences": ("style_preferences", "stylePreferences"),
    "room_types": ("room_types", "roomTypes"),
    "last_contact_date": ("last_contact_date", "lastContactDate", "last_contact"),
    "next_follow_up_date": ("next_follow_up_date", "nextFollowUpDate"),
    "notes": ("notes",),
    "address": ("address",),
    "total_sales": ("total_sales", "totalSales"),
}

TASK_FIELD_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "title": ("title",),
    "description": ("description",),
    "type": ("type",),
    "status": ("status",),
    "priority": ("priority",),
    "due_date": ("due_date", "dueDate"),
    "client_id": ("client_id", "clientId"),
    "sale_id": ("sale_id", "saleId"),
    "assigned_to": ("assigned_to", "assignedTo"),
    "completed_at": ("completed_at", "completedAt"),
}

SALE_FIELD_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "client_id": ("client_id", "clientId"),
    "status": ("status",),
    "amount": ("amount", "value"),
    "probability": ("probability",),
    "expected_close_date": ("expected_close_date", "expectedCloseDate"),
    "notes": ("notes",),
}

ADDRESS_FIELD_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "street": ("street",),
    "city": ("city",),
    "state": ("state",),
    "zip": ("zip", "postal_code", "postalCode"),
    "country": ("country",),
    "delivery_notes": ("delivery_notes", "deliveryNotes"),
}


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


def _resolve(raw: Mapping[str, Any], aliases: tuple[str, ...]) -> Any:
    """Return the first non-empty alias value, or the first present one."""

    present = [raw[name] for name in aliases if name in raw]
    if not present:
        return _MISSING
    for value in present:
        if not _is_empty(value):
            return value
    return present[0]


def _apply_aliases(
    raw: Mapping[str, Any], aliases: Mapping[str, tuple[str, ...]]
) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for canonical, names in aliases.items():
        value = _resolve(raw, names)
        if value is not _MISSING:
            normalized[canonical] = value
    return normalized


def normalize_address(raw: Any) -> dict[str, Any]:
    """Return a canonical address mapping; anything else becomes ``{}``."""

    if not isinstance(raw, Mapping):
        return {}
    return {
        key: value
        for key, value in _apply_aliases(raw, ADDRESS_FIELD_ALIASES).items()
        if value is not None
    }


def split_legacy_name(name: Any) -> tuple[str, str]:
    """Split the legacy single ``name`` column into first and last names."""

    if not isinstance(name, str):
        return "", ""
    parts = name.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def normalize_client_payload(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a client payload in any known schema to canonical names.

    Only fields present in ``raw`` are returned, so partial updates stay
    partial.
    """

    normalized = _apply_aliases(raw, CLIENT_FIELD_ALIASES)

    if _is_empty(normalized.get("first_name")) and _is_empty(normalized.get("last_name")):
        first, last = split_legacy_name(raw.get("name"))
        if first or last:
            normalized["first_name"] = first
            normalized["last_name"] = last

    for list_field in ("style_preferences", "room_types"):
        if list_field in normalized and normalized[list_field] is None:
            normalized[list_field] = []

    if "address" in normalized:
        normalized["address"] = normalize_address(normalized["address"])

    return normalized


def normalize_task_payload(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a task payload in any known schema to canonical names."""

    return _apply_aliases(raw, TASK_FIELD_ALIASES)


def normalize_sale_payload(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a sale payload in any known schema to canonical names."""

    return _apply_aliases(raw, SALE_FIELD_ALIASES)


__all__ = [
    "CLIENT_FIELD_ALIASES",
    "SALE_FIELD_ALIASES",
    "TASK_FIELD_ALIASES",
    "normalize_address",
    "normalize_client_payload",
    "normalize_sale_payload",
    "normalize_task_payload",
    "split_legacy_name",
]
