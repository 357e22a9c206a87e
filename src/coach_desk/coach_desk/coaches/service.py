from __future__ import annotations

from typing import Optional

from ..app_logger import get_logger
from ..common.validators import optional_text, parse_id, require_email, require_non_empty
from ..core.exceptions import ConstraintViolationError, NotFoundError
from .model import Coach
from .repository import CoachRepository

log = get_logger(__name__)


class CoachService:
    """Use case: register and look up the coach (business owner)."""

    def __init__(self, coaches: CoachRepository):
        self._coaches = coaches

    def register(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        specialization: Optional[str] = None,
        business_name: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        email = require_email(email)

        if self._coaches.get_by_email(email):
            raise ConstraintViolationError(f"A coach with email {email} already exists")

        coach_id = self._coaches.create(
            name=name,
            email=email,
            phone=optional_text(phone),
            specialization=optional_text(specialization),
            business_name=optional_text(business_name),
        )
        log.info("registered coach id=%s", coach_id)
        return coach_id

    def get(self, coach_id) -> Optional[Coach]:
        return self._coaches.get_by_id(parse_id(coach_id, "Coach"))

    def find_by_email(self, email: str) -> Optional[Coach]:
        email = optional_text(email)
        if not email:
            return None
        return self._coaches.get_by_email(email)

    def require(self, coach_id) -> Coach:
        coach = self.get(coach_id)
        if not coach:
            raise NotFoundError(f"Coach {coach_id} not found")
        return coach
