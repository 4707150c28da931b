from decimal import Decimal, ROUND_HALF_UP

from mortgage_calc.models import CONFIG, DisplayResult, LoanResult


def round_for_display(value: float) -> int:
    """Округление до целого, половина вверх (как toFixed(0) в браузере)."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_amount(value: float) -> str:
    return f"{round_for_display(value):,} {CONFIG['currency_suffix']}"


def format_result(result: LoanResult) -> DisplayResult:
    return DisplayResult(
        credit_limit=format_amount(result.credit_limit),
        min_monthly_income=format_amount(result.min_monthly_income),
        monthly_installment=format_amount(result.monthly_installment),
    )
