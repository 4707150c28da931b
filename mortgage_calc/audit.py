import logging

from mortgage_calc.config import AUDIT_LOG_PATH

# Логгер аудита расчётов
logger = logging.getLogger("mortgage_calc.audit")
logger.setLevel(logging.INFO)

if AUDIT_LOG_PATH:
    handler = logging.FileHandler(AUDIT_LOG_PATH, encoding="utf-8")
    handler.setFormatter(logging.Formatter('%(asctime)s | %(message)s'))
    logger.addHandler(handler)


def log_request(request_id: str, loan_data: dict):
    """
    Логируем входные параметры расчёта (цена, ставка, срок).
    """
    logger.info(f"REQUEST ({request_id}): {loan_data}", extra={"request_id": request_id, "event": "calc_request"})


def log_response(request_id: str, result_data: dict):
    """
    Логируем результат расчёта.
    """
    logger.info(f"RESPONSE ({request_id}): {result_data}", extra={"request_id": request_id, "event": "calc_response"})


def log_rejected(request_id: str, errors: dict):
    """
    Логируем отклонённую отправку формы с сообщениями по полям.
    """
    logger.info(f"REJECTED ({request_id}): {errors}", extra={"request_id": request_id, "event": "calc_rejected"})
