from datetime import date

import pytest

from coach_desk.common.datetime_utils import month_bounds, parse_iso_date, parse_month
from coach_desk.common.validators import mask_secret, parse_amount, parse_choice, parse_fee, parse_flag
from coach_desk.core.enums import StudentStatus
from coach_desk.core.exceptions import ValidationError


def test_fee_defaults_to_zero_when_missing_or_unparsable():
    assert parse_fee(None) == 0.0
    assert parse_fee("") == 0.0
    assert parse_fee("abc") == 0.0
    assert parse_fee("1500") == 1500.0


def test_negative_fee_rejected():
    with pytest.raises(ValidationError):
        parse_fee("-10")


@pytest.mark.parametrize("value", ["abc", "", None, 0, "-5", "nan", True])
def test_amount_must_be_positive_number(value):
    with pytest.raises(ValidationError):
        parse_amount(value)


def test_amount_parses_strings():
    assert parse_amount(" 1000.50 ") == 1000.5


def test_dates_and_months():
    assert parse_iso_date("2024-03-01") == date(2024, 3, 1)
    assert parse_month("2024-03") == "2024-03"
    assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds("2024-12") == (date(2024, 12, 1), date(2024, 12, 31))

    with pytest.raises(ValidationError):
        parse_iso_date("01/03/2024")
    with pytest.raises(ValidationError):
        parse_month("2024-13")


def test_unknown_student_status_rejected():
    assert parse_choice("Inactive", StudentStatus, "Status") is StudentStatus.INACTIVE
    with pytest.raises(ValidationError):
        parse_choice("suspended", StudentStatus, "Status")


def test_mask_secret_keeps_last_four():
    assert mask_secret("sk_live_12345678") == "************5678"
    assert mask_secret("abc") == "***"
    assert mask_secret(None) == ""


@pytest.mark.parametrize("value, expected", [(True, True), (False, False), (1, True), (0, False)])
def test_flag_accepts_booleans_and_bits(value, expected):
    assert parse_flag(value, "is_active") is expected


@pytest.mark.parametrize("value", ["false", "0", 2, None])
def test_flag_rejects_other_values(value):
    with pytest.raises(ValidationError):
        parse_flag(value, "is_active")
