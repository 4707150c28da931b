from typing import Optional
from uuid import uuid4

from mortgage_calc.models import CONFIG, LoanInput, LoanResult
from mortgage_calc.audit import log_request, log_response


def estimate_min_monthly_income(price: float) -> float:
    """
    Минимальный ежемесячный доход для одобрения: линейная эвристика,
    10 000 дохода в месяц на каждые 650 000 стоимости объекта.
    Без округления, округляет слой отображения.
    """
    heuristic = CONFIG["income_heuristic"]
    return (price / heuristic["price_per_unit"]) * heuristic["income_unit"]


def calc_monthly_installment(price: float, annual_rate_percent: float, term_years: float) -> float:
    """
    Аннуитетный платёж: M = P * r(1+r)^n / ((1+r)^n - 1),
    r = ставка / 100 / 12, n = срок * 12.

    Ставка 0 даёт деление на ноль; вызывающий код гарантирует ставку >= 2%.
    """
    r = annual_rate_percent / 100 / 12
    n = term_years * 12
    growth = (1 + r) ** n
    return price * (r * growth) / (growth - 1)


def calculate_loan(loan: LoanInput, request_id: Optional[str] = None) -> LoanResult:
    """
    Полный расчёт по одной отправке формы: лимит кредита (100% стоимости),
    минимальный доход и ежемесячный платёж.
    """
    request_id = request_id or str(uuid4())
    log_request(request_id, loan.model_dump())

    result = LoanResult(
        credit_limit=loan.price,
        min_monthly_income=estimate_min_monthly_income(loan.price),
        monthly_installment=calc_monthly_installment(
            loan.price, loan.annual_interest_rate_percent, loan.term_years
        ),
    )

    log_response(request_id, result.model_dump())
    return result


def get_config():
    """Возвращает текущий конфиг расчёта."""
    return CONFIG
