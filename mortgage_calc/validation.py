"""
Валидация полей формы расчёта ипотеки.

Два независимых слоя:

* фильтр ввода решает на каждое нажатие клавиши, можно ли принять
  новый текст поля;
* схема отправки срабатывает по кнопке расчёта и возвращает сообщения
  по полям для пустых значений и значений ниже минимума.

Ни один слой не бросает исключений на пользовательский ввод: фильтр
отвечает да/нет, схема возвращает словарь ``{поле: сообщение}``.
"""
import math
import re
from dataclasses import dataclass
from typing import Dict, Optional, Union

from pydantic import BaseModel, ValidationError, field_validator

from mortgage_calc.models import CONFIG, FIELDS, AdmissionResult, LoanFormValues, LoanInput


REQUIRED_MESSAGES = {
    "price": "Please enter the property price",
    "annual_interest_rate_percent": "Please enter the interest rate",
    "term_years": "Please enter the loan term",
}
NOT_ACCEPTED_MESSAGES = {
    "price": "property price must be a whole number of at most 14 digits",
    "annual_interest_rate_percent": "interest rate must not exceed 99.99% and have at most 2 decimals",
    "term_years": "loan term must be a whole number of years, at most 99",
}
PRICE_POSITIVE_MESSAGE = "property price must be greater than 0"
RATE_MIN_MESSAGE = "interest rate must be at least 2%"
TERM_MIN_MESSAGE = "loan term must be at least 3 years"

_NUMBER = re.compile(r"^(?P<int>\d*)(?:(?P<dot>\.)(?P<frac>\d*))?$")
_GROUPED_TEMPLATE = r"^\d+(?:{sep}\d+)*(?:\.\d*)?$"
_LEADING_ZERO = re.compile(r"^0\d")
_JS_FLOAT_PREFIX = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class NumberFormat:
    decimal_scale: int
    max_value: Optional[float] = None
    max_digits: Optional[int] = None
    thousand_separator: str = ""


def _build_formats() -> Dict[str, NumberFormat]:
    limits = CONFIG["limits"]
    return {
        "price": NumberFormat(
            decimal_scale=limits["price"]["decimal_scale"],
            max_digits=limits["price"]["max_digits"],
            thousand_separator=limits["price"]["thousand_separator"],
        ),
        "annual_interest_rate_percent": NumberFormat(
            decimal_scale=limits["annual_interest_rate_percent"]["decimal_scale"],
            max_value=limits["annual_interest_rate_percent"]["max"],
        ),
        "term_years": NumberFormat(
            decimal_scale=limits["term_years"]["decimal_scale"],
            max_value=limits["term_years"]["max"],
        ),
    }


FIELD_FORMATS = _build_formats()


def get_format(field: str) -> NumberFormat:
    try:
        return FIELD_FORMATS[field]
    except KeyError:
        raise ValueError(f"Unknown field: {field}") from None


def unformat(field: str, text: str) -> str:
    """Убирает разделитель разрядов поля, оставляя сырое число."""
    sep = get_format(field).thousand_separator
    if not sep or sep not in text:
        return text
    # разделитель допустим только между цифрами, иначе текст остаётся как есть
    if not re.match(_GROUPED_TEMPLATE.format(sep=re.escape(sep)), text):
        return text
    return text.replace(sep, "")


def format_number(field: str, value: str) -> str:
    """Форматирует принятое значение с разделителем разрядов."""
    sep = get_format(field).thousand_separator
    match = _NUMBER.match(value)
    if not value or not sep or not match or not match.group("int"):
        return value
    grouped = f"{int(match.group('int')):,}".replace(",", sep)
    if match.group("dot"):
        grouped += "." + match.group("frac")
    return grouped


def parse_float(text: str) -> float:
    """
    Разбирает числовой префикс строки как JavaScript parseFloat;
    если числа нет, возвращает nan.
    """
    match = _JS_FLOAT_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


# -----------------------
# Фильтр ввода (на каждое нажатие)
# -----------------------
def admit(field: str, text: str) -> AdmissionResult:
    fmt = get_format(field)
    value = unformat(field, text)
    rejected = AdmissionResult(allowed=False, value=value)

    if value == "":
        return AdmissionResult(allowed=True, value="", float_value=None, formatted="")

    match = _NUMBER.match(value)
    if not match:
        return rejected
    int_part, frac = match.group("int"), match.group("frac") or ""
    if not int_part and not frac:
        return rejected
    if match.group("dot") and fmt.decimal_scale == 0:
        return rejected
    if len(frac) > fmt.decimal_scale:
        return rejected
    if fmt.max_digits is not None and len(int_part) + len(frac) > fmt.max_digits:
        return rejected
    if _LEADING_ZERO.match(value):
        return rejected

    float_value = float(value)
    # ноль не отсекаем: так выглядит поле в процессе ввода
    if fmt.max_value is not None and float_value > fmt.max_value:
        return rejected

    return AdmissionResult(
        allowed=True,
        value=value,
        float_value=float_value,
        formatted=format_number(field, value),
    )


def is_allowed(field: str, text: str) -> bool:
    return admit(field, text).allowed


# -----------------------
# Схема отправки формы
# -----------------------
def _require(field: str, value: str) -> None:
    if len(value) < 1:
        raise ValueError(REQUIRED_MESSAGES[field])


def _require_admitted(field: str, value: str) -> None:
    if not is_allowed(field, value):
        raise ValueError(NOT_ACCEPTED_MESSAGES[field])


class LoanFormSchema(BaseModel):
    price: str
    annual_interest_rate_percent: str
    term_years: str

    @field_validator("price", mode="before")
    @classmethod
    def strip_grouping(cls, v):
        return unformat("price", v) if isinstance(v, str) else v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: str) -> str:
        _require("price", v)
        _require_admitted("price", v)
        if not parse_float(v) > 0:
            raise ValueError(PRICE_POSITIVE_MESSAGE)
        return v

    @field_validator("annual_interest_rate_percent")
    @classmethod
    def validate_rate(cls, v: str) -> str:
        _require("annual_interest_rate_percent", v)
        _require_admitted("annual_interest_rate_percent", v)
        if not parse_float(v) >= CONFIG["limits"]["annual_interest_rate_percent"]["submit_min"]:
            raise ValueError(RATE_MIN_MESSAGE)
        return v

    @field_validator("term_years")
    @classmethod
    def validate_term(cls, v: str) -> str:
        _require("term_years", v)
        _require_admitted("term_years", v)
        if not parse_float(v) >= CONFIG["limits"]["term_years"]["submit_min"]:
            raise ValueError(TERM_MIN_MESSAGE)
        return v


def _error_message(err: dict) -> str:
    if err["type"] == "missing" and err["loc"]:
        return REQUIRED_MESSAGES[err["loc"][0]]
    ctx = err.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])
    return err["msg"]


def validate_submission(values: Union[LoanFormValues, dict]) -> Dict[str, str]:
    """
    Прогоняет схему отправки по сырым значениям формы.
    Возвращает первое сообщение для каждого невалидного поля.
    """
    if isinstance(values, BaseModel):
        values = values.model_dump()
    try:
        LoanFormSchema.model_validate(values)
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "__root__"
            errors.setdefault(field, _error_message(err))
        return errors
    return {}


def validate_field(field: str, values: Union[LoanFormValues, dict]) -> Optional[str]:
    get_format(field)
    return validate_submission(values).get(field)


def to_loan_input(values: Union[LoanFormValues, dict]) -> LoanInput:
    """Разбирает значения, уже прошедшие validate_submission."""
    if isinstance(values, BaseModel):
        values = values.model_dump()
    return LoanInput(**{f: parse_float(unformat(f, values[f])) for f in FIELDS})
