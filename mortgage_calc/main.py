from uuid import uuid4
from pathlib import Path

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, FileResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from mortgage_calc import form
from mortgage_calc.config import CALC_RATE_LIMIT, HEALTH_RATE_LIMIT
from mortgage_calc.audit import log_rejected
from mortgage_calc.display import format_result
from mortgage_calc.docs.examples import example_request
from mortgage_calc.docs.openapi_overrides import custom_openapi
from mortgage_calc.logger import logger
from mortgage_calc.models import (
    AdmissionRequest,
    CalcResponse,
    FieldChangeRequest,
    FormState,
    LoanFormValues,
    MetaSchema,
    ValidationReport,
)
from mortgage_calc.services import calculate_loan, get_config
from mortgage_calc.validation import admit, to_loan_input, validate_submission

APP_VERSION = "v1.0"
VERSION_HEADER = "X-Loan-Calc-Version"

app = FastAPI(title="Mortgage Calculator")

# -----------------------
# Middleware и CORS
# -----------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# SlowAPI лимитирование
limiter = Limiter(key_func=get_remote_address)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests"}
    )

app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


def _json(content, status_code: int = 200, **headers) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers={VERSION_HEADER: APP_VERSION, **headers})


# -----------------------
# Статика: страница калькулятора
# -----------------------
static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=static_dir), name="static")

@app.get("/", include_in_schema=False)
async def root():
    return FileResponse(static_dir / "index.html")

# -----------------------
# Фильтр ввода и проверка формы
# -----------------------
@app.post("/loan/admit", tags=["Validation"])
def loan_admit(data: AdmissionRequest):
    try:
        return _json(admit(data.field, data.text).model_dump())
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))


@app.post("/loan/validate", tags=["Validation"])
def loan_validate(values: LoanFormValues):
    errors = validate_submission(values)
    report = ValidationReport(errors=errors, submit_disabled=form.is_submit_disabled(values, errors))
    return _json(report.model_dump())

# -----------------------
# Расчёт
# -----------------------
@app.post("/loan/calc", tags=["Calculation"])
@limiter.limit(CALC_RATE_LIMIT)
def loan_calc(request: Request, values: LoanFormValues = Body(..., openapi_examples={"base": {"value": example_request}})):
    request_id = str(uuid4())
    errors = validate_submission(values)
    if errors:
        log_rejected(request_id, errors)
        raise HTTPException(status_code=422, detail=errors, headers={"X-Request-ID": request_id})
    try:
        result = calculate_loan(to_loan_input(values), request_id=request_id)
    except (ArithmeticError, ValueError):
        logger.exception("Calculation failed", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal calculation error")
    response = CalcResponse(result=result, display=format_result(result), meta=MetaSchema(request_id=request_id))
    return _json(response.model_dump(), **{"X-Request-ID": request_id})

# -----------------------
# Состояние формы
# -----------------------
@app.get("/loan/form/initial", tags=["Form"])
def form_initial():
    return _json(form.initial_state().model_dump())


@app.post("/loan/form/change", tags=["Form"])
def form_change(data: FieldChangeRequest):
    try:
        return _json(form.change_field(data.state, data.field, data.text).model_dump())
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))


@app.post("/loan/form/submit", tags=["Form"])
@limiter.limit(CALC_RATE_LIMIT)
def form_submit(request: Request, state: FormState):
    return _json(form.submit(state).model_dump())


@app.post("/loan/form/reset", tags=["Form"])
def form_reset():
    return _json(form.reset().model_dump())

# -----------------------
# Конфигурация
# -----------------------
@app.get("/loan/config")
def read_config():
    return _json(get_config())

# -----------------------
# Кастомное OpenAPI
# -----------------------
app.openapi = lambda: custom_openapi(app)

# -----------------------
# Health check с лимитом
# -----------------------
@app.get("/health")
@limiter.limit(HEALTH_RATE_LIMIT)
async def health_check(request: Request):
    return {"status": "ok"}
