from __future__ import annotations

from typing import Optional, Protocol

from .model import Coach


class CoachRepository(Protocol):
    def create(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        specialization: Optional[str] = None,
        business_name: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Coach]:
        raise NotImplementedError
