import os

# Настройки процесса берутся из ENV, значения по умолчанию подходят для локального запуска
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Если путь не задан, аудит пишется только в общий JSON-лог
AUDIT_LOG_PATH = os.environ.get("AUDIT_LOG_PATH") or None

HEALTH_RATE_LIMIT = os.environ.get("HEALTH_RATE_LIMIT", "10/minute")
CALC_RATE_LIMIT = os.environ.get("CALC_RATE_LIMIT", "60/minute")
