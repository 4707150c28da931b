from pydantic import BaseModel, Field
from typing import Dict, Optional
from uuid import uuid4


FIELDS = ("price", "annual_interest_rate_percent", "term_years")


# --------------------------
# Parsed input triple
# --------------------------
class LoanInput(BaseModel):
    price: float = Field(..., gt=0)
    annual_interest_rate_percent: float = Field(..., ge=2, le=99.99)
    term_years: float = Field(..., ge=3, le=99)


# --------------------------
# Calculation result
# --------------------------
class LoanResult(BaseModel):
    model_config = {"frozen": True}

    credit_limit: float = 0
    min_monthly_income: float = 0
    monthly_installment: float = 0

    @classmethod
    def zero(cls) -> "LoanResult":
        return cls(credit_limit=0, min_monthly_income=0, monthly_installment=0)


class DisplayResult(BaseModel):
    credit_limit: str
    min_monthly_income: str
    monthly_installment: str


# --------------------------
# Raw form values (unformatted text, as the form holds them)
# --------------------------
class LoanFormValues(BaseModel):
    price: str = ""
    annual_interest_rate_percent: str = ""
    term_years: str = ""


# --------------------------
# Per-keystroke admission
# --------------------------
class AdmissionRequest(BaseModel):
    field: str
    text: str = ""


class AdmissionResult(BaseModel):
    allowed: bool
    value: str = ""
    float_value: Optional[float] = None
    formatted: str = ""


# --------------------------
# Form state for one render cycle
# --------------------------
class FormState(BaseModel):
    values: LoanFormValues = Field(default_factory=LoanFormValues)
    errors: Dict[str, str] = Field(default_factory=dict)
    submitted: bool = False
    result: LoanResult = Field(default_factory=LoanResult.zero)
    display: Optional[DisplayResult] = None
    submit_disabled: bool = True


class FieldChangeRequest(BaseModel):
    state: FormState = Field(default_factory=FormState)
    field: str
    text: str = ""


class ValidationReport(BaseModel):
    errors: Dict[str, str]
    submit_disabled: bool


class MetaSchema(BaseModel):
    request_id: str = Field(default_factory=lambda: str(uuid4()))


class CalcResponse(BaseModel):
    result: LoanResult
    display: DisplayResult
    meta: MetaSchema


# --------------------------
# Calculation constants (read-only, exposed via /loan/config)
# --------------------------
CONFIG = {
    "version": "v1.0",
    # every 10,000 of monthly income supports 650,000 of property price
    "income_heuristic": {"price_per_unit": 650000, "income_unit": 10000},
    "currency_suffix": "THB",
    "limits": {
        "price": {"max_digits": 14, "decimal_scale": 0, "thousand_separator": ","},
        "annual_interest_rate_percent": {"max": 99.99, "decimal_scale": 2, "submit_min": 2},
        "term_years": {"max": 99, "decimal_scale": 0, "submit_min": 3},
    },
}
