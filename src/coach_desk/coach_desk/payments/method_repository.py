from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PaymentMethodConfig


class PaymentMethodRepository(Protocol):
    def create(self, *, coach_id: int, method_type: str, provider: str, api_key: str, is_active: bool = True) -> int:
        raise NotImplementedError

    def get_by_id(self, method_id: int) -> Optional[PaymentMethodConfig]:
        raise NotImplementedError

    def find(self, *, coach_id: int, method_type: str, provider: str) -> Optional[PaymentMethodConfig]:
        raise NotImplementedError

    def update(
        self,
        *,
        method_id: int,
        method_type: str,
        provider: str,
        api_key: str,
        is_active: bool,
    ) -> int:
        raise NotImplementedError

    def set_active(self, method_id: int, *, is_active: bool) -> int:
        raise NotImplementedError

    def list_active(self, coach_id: int) -> Sequence[PaymentMethodConfig]:
        raise NotImplementedError
