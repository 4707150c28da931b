# mortgage_calc/docs/examples.py
example_request = {
    "price": "3000000",
    "annual_interest_rate_percent": "7",
    "term_years": "30",
}

example_response = {
    "result": {
        "credit_limit": 3000000.0,
        "min_monthly_income": 46153.846153846156,
        "monthly_installment": 19959.07,
    },
    "display": {
        "credit_limit": "3,000,000 THB",
        "min_monthly_income": "46,154 THB",
        "monthly_installment": "19,959 THB",
    },
    "meta": {"request_id": "uuid-here"},
}

example_rejected = {
    "detail": {
        "annual_interest_rate_percent": "interest rate must be at least 2%",
        "term_years": "loan term must be at least 3 years",
    }
}
