import os

# Configurações globais de ambiente
WEBHOOK_URL = os.getenv("SLACKLOG_WEBHOOK_URL", "")
LOG_LEVEL = os.getenv("SLACKLOG_LEVEL", "trace").strip().lower()
LOG_PREFIX = os.getenv("SLACKLOG_PREFIX", "")
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Sem timeout por padrão: cada envio bloqueia até a rede responder ou falhar
_timeout_env = os.getenv("SLACKLOG_TIMEOUT_SECONDS", "").strip()
HTTP_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None

# Tags fixas de quatro letras por severidade
LEVEL_TAGS = {
    "error": "ERRO",
    "warning": "WARN",
    "info": "INFO",
    "debug": "DEBG",
    "trace": "TRCE",
}

LEVEL_ALIASES = {
    "erro": "error",
    "err": "error",
    "warn": "warning",
    "debg": "debug",
    "trce": "trace",
}
