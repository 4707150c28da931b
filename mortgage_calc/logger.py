import logging
import json
from datetime import datetime, timezone
from typing import Any, Dict

from mortgage_calc.config import LOG_LEVEL


class JsonFormatter(logging.Formatter):
    """Форматирует логи в JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
        }

        # Дополнительные поля расчёта, если они переданы через extra
        for key in ("request_id", "event"):
            if hasattr(record, key):
                log_record[key] = getattr(record, key)

        return json.dumps(log_record, ensure_ascii=False, default=str)


def setup_logging(level: str = LOG_LEVEL):
    """Настраивает логирование в JSON-формате."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Повторный вызов не должен дублировать вывод
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    # Отключаем лишние логи Uvicorn
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)

    return logger


logger = setup_logging()
