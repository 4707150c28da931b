from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Mortgage Calculator API",
        version="1.0.0",
        description=(
            "Предварительный расчёт ипотеки: лимит кредита, минимальный доход и ежемесячный платёж.\n\n"
            "### Формулы:\n"
            "- **Минимальный доход** = (цена / 650 000) × 10 000\n"
            "- **Платёж** = P × r(1+r)^n / ((1+r)^n − 1), r = ставка / 100 / 12, n = срок × 12\n\n"
            "### Ограничения полей:\n"
            "| Поле | Ввод | Отправка |\n"
            "|------|------|----------|\n"
            "| price | целое > 0, до 14 цифр | обязательно |\n"
            "| annual_interest_rate_percent | 0 < x ≤ 99.99, 2 знака | ≥ 2 |\n"
            "| term_years | целое, 0 < x ≤ 99 | ≥ 3 |\n\n"
            "### Версия формулы: **v1.0**"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
