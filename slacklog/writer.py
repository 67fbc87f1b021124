"""
Conjunto de destinos: um webhook por severidade mais o destino genérico
"log", o limiar ativo e o prefixo da instância.

LogWriter é imutável; qualquer alteração devolve uma cópia, então um Logger
derivado nunca compartilha mutação com o original.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from . import services
from .formatters import format_message
from .levels import LogLevel, parse_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogWriter:
    log: str = ""
    error: str = ""
    warning: str = ""
    info: str = ""
    debug: str = ""
    trace: str = ""
    level: LogLevel = LogLevel.TRACE
    prefix: str = ""

    def __post_init__(self):
        object.__setattr__(self, "level", parse_level(self.level))

    @classmethod
    def for_url(cls, url: str, level=LogLevel.TRACE, prefix: str = "") -> "LogWriter":
        return cls(
            log=url,
            error=url,
            warning=url,
            info=url,
            debug=url,
            trace=url,
            level=level,
            prefix=prefix,
        )

    def with_level(self, level) -> "LogWriter":
        return replace(self, level=parse_level(level))

    def with_prefix(self, prefix: str) -> "LogWriter":
        return replace(self, prefix=prefix or "")

    def destination_for(self, severity: Optional[LogLevel]) -> str:
        if severity is None:
            return self.log
        return getattr(self, LogLevel(severity).name.lower())

    def enabled_for(self, severity: LogLevel) -> bool:
        return self.level.allows(severity)

    def emit(self, severity: LogLevel, text: str) -> int:
        """
        Aplica o gate de severidade e, se aprovado, envia "TAG: texto" ao
        destino da severidade. Mensagens bloqueadas retornam 0 sem efeito algum.
        """
        if not self.enabled_for(severity):
            return 0
        line = format_message(text, severity, self.prefix)
        return self._send(self.destination_for(severity), line, text)

    def log_message(self, text: str) -> int:
        # Caminho genérico: mesma tag e gate de INFO, mas destino "log"
        if not self.enabled_for(LogLevel.INFO):
            return 0
        line = format_message(text, LogLevel.INFO, self.prefix)
        return self._send(self.log, line, text)

    def write(self, data: Union[str, bytes]) -> int:
        """Envio direto sem tag e sem gate no destino "log"; cada chamada é um POST."""
        if isinstance(data, (bytes, bytearray)):
            size = len(data)
            text = bytes(data).decode("utf-8", errors="replace")
        else:
            text = str(data)
            size = len(text.encode("utf-8"))
        services.post_webhook(self.log, format_message(text, None, self.prefix))
        return size

    def _send(self, url: str, line: str, text: str) -> int:
        if not url:
            logger.debug("Destino vazio para a mensagem; o envio deve falhar")
        services.post_webhook(url, line)
        return len(text.encode("utf-8"))
