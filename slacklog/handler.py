import logging
from typing import Optional

from .std import default
from .levels import from_logging_level
from .logger import Logger

# Registros dos próprios loggers do pacote não são reenviados ao webhook
_INTERNAL_PREFIX = __name__.split(".")[0]


class WebhookHandler(logging.Handler):
    """
    Ponte para o logging da stdlib: cada registro vai para o webhook da
    severidade equivalente, passando pelo limiar do Logger.
    Sem Logger explícito, usa o padrão vigente no momento do emit.
    """

    def __init__(self, slack_logger: Optional[Logger] = None, level=logging.NOTSET):
        super().__init__(level)
        self._logger = slack_logger

    @property
    def slack_logger(self) -> Logger:
        return self._logger if self._logger is not None else default()

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == _INTERNAL_PREFIX or record.name.startswith(_INTERNAL_PREFIX + "."):
            return
        try:
            target = self.slack_logger
            severity = from_logging_level(record.levelno)
            if not target.writer.enabled_for(severity):
                return
            target.emit(severity, self.format(record))
            # Envio bem-sucedido limpa o erro; se ficou um, foi deste registro
            if target.err() is not None:
                self.handleError(record)
        except Exception:
            self.handleError(record)
