from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from ..payments.model import PaymentMethodConfig


def to_json(value: Any) -> Any:
    """Turn models (frozen dataclasses) into JSON-ready structures.

    Payment method keys are replaced by their masked form.
    """
    if isinstance(value, PaymentMethodConfig):
        return {
            "id": value.id,
            "coach_id": value.coach_id,
            "method_type": value.method_type,
            "provider": value.provider,
            "api_key": value.masked_api_key,
            "is_active": value.is_active,
            "created_at": to_json(value.created_at),
        }
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value
