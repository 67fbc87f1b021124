"""
Hierarquia de erros do slacklog.

Existe um único tipo de falha operacional, o erro de transporte, levantado
quando a chamada HTTP ao webhook falha. LoggerPanic é o equivalente ao
panic da família Panic*, carregando a mensagem formatada.
"""

from typing import Optional


class SlackLogError(Exception):
    """Base de todos os erros do pacote."""


class TransportError(SlackLogError):
    """Falha de rede/requisição ao entregar uma mensagem ao webhook."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url


class LoggerPanic(SlackLogError, RuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
