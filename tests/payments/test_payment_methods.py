from __future__ import annotations

import pytest

from coach_desk.core.exceptions import ValidationError


def test_upsert_updates_existing_provider_row(container):
    methods = container.payment_method_service
    first = methods.upsert(coach_id=1, method_type="UPI", provider="Razorpay", api_key="rzp_old_1111")
    second = methods.upsert(coach_id=1, method_type="upi", provider="razorpay", api_key="rzp_new_2222")

    active = methods.list_active(1)

    assert first == second
    assert len(active) == 1
    assert active[0].api_key == "rzp_new_2222"


def test_distinct_providers_get_their_own_rows(container):
    methods = container.payment_method_service
    methods.upsert(coach_id=1, method_type="card", provider="stripe", api_key="sk_live_1")
    methods.upsert(coach_id=1, method_type="upi", provider="razorpay", api_key="rzp_1")

    assert [m.provider for m in methods.list_active(1)] == ["stripe", "razorpay"]


def test_deactivated_method_is_hidden_not_deleted(container):
    methods = container.payment_method_service
    mid = methods.upsert(coach_id=1, method_type="card", provider="stripe", api_key="sk_live_1")

    assert methods.deactivate(mid) == 1
    assert methods.list_active(1) == []
    assert container.payment_methods_repo.get_by_id(mid).is_active is False


def test_update_rewrites_all_fields(container):
    methods = container.payment_method_service
    mid = methods.upsert(coach_id=1, method_type="card", provider="stripe", api_key="sk_live_1")

    assert methods.update(mid, method_type="card", provider="stripe", api_key="sk_live_2", is_active=False) == 1
    stored = container.payment_methods_repo.get_by_id(mid)
    assert stored.api_key == "sk_live_2"
    assert stored.is_active is False


def test_api_key_is_masked_and_kept_out_of_repr(container):
    mid = container.payment_method_service.upsert(
        coach_id=1, method_type="card", provider="stripe", api_key="sk_live_12345678"
    )
    method = container.payment_methods_repo.get_by_id(mid)

    assert "sk_live_12345678" not in repr(method)
    assert method.masked_api_key == "************5678"


def test_blank_key_rejected(container):
    with pytest.raises(ValidationError):
        container.payment_method_service.upsert(coach_id=1, method_type="card", provider="stripe", api_key="  ")
