import math

import pytest

from mortgage_calc.services import calc_monthly_installment


@pytest.mark.parametrize(
    "price,rate,term",
    [
        (1, 2, 3),
        (1, 2, 99),
        (99999999999999, 2, 99),
        (99999999999999, 99.99, 99),
        (1, 99.99, 3),
        (99999999999999, 99.99, 3),
    ]
)
def test_installment_finite_at_range_extremes(price, rate, term):
    m = calc_monthly_installment(price, rate, term)
    assert math.isfinite(m)
    assert m > 0


def test_lowest_rate_longest_term():
    # 2% на 99 лет: платёж чуть выше процентов за месяц
    price = 1000000
    m = calc_monthly_installment(price, 2, 99)
    monthly_interest = price * 0.02 / 12
    assert monthly_interest < m < monthly_interest * 2


def test_highest_rate_longest_term_approaches_interest_only():
    price = 1000000
    m = calc_monthly_installment(price, 99.99, 99)
    assert m == pytest.approx(price * 99.99 / 100 / 12, rel=1e-9)


def test_fractional_term_is_accepted_by_calculator():
    # калькулятор работает с любым вещественным сроком
    assert calc_monthly_installment(1000000, 7, 3.5) < calc_monthly_installment(1000000, 7, 3)
