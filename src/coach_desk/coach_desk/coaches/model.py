from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Coach:
    """Business owner; root of every student and payment method."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    specialization: Optional[str] = None
    business_name: Optional[str] = None
    created_at: Optional[datetime] = None
