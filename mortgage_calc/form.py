"""
Состояние формы расчёта.

Каждая операция берёт текущее состояние и возвращает новое, ничего не
изменяя на месте. ``submit_disabled`` всегда пересчитывается из значений
и ошибок, отдельно не хранится между вызовами.
"""
from typing import Dict, Mapping, Optional
from uuid import uuid4

from mortgage_calc.audit import log_rejected
from mortgage_calc.display import format_result
from mortgage_calc.models import FormState, LoanFormValues, LoanResult
from mortgage_calc.services import calculate_loan
from mortgage_calc.validation import admit, to_loan_input, validate_field, validate_submission


def is_submit_disabled(values: LoanFormValues, errors: Mapping[str, str]) -> bool:
    """Кнопка недоступна, пока все поля пусты или есть хоть одна ошибка."""
    has_value = any(v != "" for v in values.model_dump().values())
    return not has_value or len(errors) > 0


def _with(state: FormState, *, values: Optional[LoanFormValues] = None,
          errors: Optional[Dict[str, str]] = None, submitted: Optional[bool] = None,
          result: Optional[LoanResult] = None) -> FormState:
    values = values if values is not None else state.values
    errors = errors if errors is not None else state.errors
    result = result if result is not None else state.result
    return FormState(
        values=values,
        errors=errors,
        submitted=state.submitted if submitted is None else submitted,
        result=result,
        display=format_result(result),
        submit_disabled=is_submit_disabled(values, errors),
    )


def initial_state() -> FormState:
    values = LoanFormValues()
    result = LoanResult.zero()
    return FormState(values=values, errors={}, submitted=False, result=result,
                     display=format_result(result), submit_disabled=is_submit_disabled(values, {}))


def change_field(state: FormState, field: str, text: str) -> FormState:
    """
    Ввод в поле. Если фильтр не пропускает текст, состояние не меняется.
    После первой попытки отправки поле перепроверяется на каждое изменение.
    """
    admission = admit(field, text)
    if not admission.allowed:
        return _with(state)

    values = state.values.model_copy(update={field: admission.value})
    errors = dict(state.errors)
    if state.submitted:
        message = validate_field(field, values)
        if message is None:
            errors.pop(field, None)
        else:
            errors[field] = message
    return _with(state, values=values, errors=errors)


def submit(state: FormState, request_id: Optional[str] = None) -> FormState:
    """
    Отправка формы: при ошибках прежний результат остаётся на экране,
    иначе все три значения пересчитываются вместе.
    """
    request_id = request_id or str(uuid4())
    errors = validate_submission(state.values)
    if errors:
        log_rejected(request_id, errors)
        return _with(state, errors=errors, submitted=True)

    result = calculate_loan(to_loan_input(state.values), request_id=request_id)
    return _with(state, errors={}, submitted=True, result=result)


def reset(state: Optional[FormState] = None) -> FormState:
    """Очищает поля и обнуляет результат, независимо от прежнего состояния."""
    return initial_state()
