import pytest

from mortgage_calc.display import format_amount, format_result, round_for_display
from mortgage_calc.models import LoanResult


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (0.4, 0), (0.5, 1), (2.5, 3), (46153.846, 46154), (19959.0748, 19959)]
)
def test_round_half_up(value, expected):
    assert round_for_display(value) == expected


def test_format_amount_groups_thousands():
    assert format_amount(3000000) == "3,000,000 THB"
    assert format_amount(999.6) == "1,000 THB"


def test_format_reference_scenario():
    result = LoanResult(credit_limit=3000000, min_monthly_income=3000000 / 65, monthly_installment=19959.0748)
    display = format_result(result)
    assert display.credit_limit == "3,000,000 THB"
    assert display.min_monthly_income == "46,154 THB"
    assert display.monthly_installment == "19,959 THB"


def test_format_zero_result():
    display = format_result(LoanResult.zero())
    assert display.monthly_installment == "0 THB"
