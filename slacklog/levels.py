import logging
from enum import IntEnum
from typing import Union

from .constants import LEVEL_ALIASES, LEVEL_TAGS


class LogLevel(IntEnum):
    """
    Severidades em ordem de prioridade: ERROR < WARNING < INFO < DEBUG < TRACE.
    Um limiar T admite uma mensagem de severidade S sse S <= T.
    """
    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4

    @property
    def tag(self) -> str:
        return LEVEL_TAGS[self.name.lower()]

    def allows(self, severity: "LogLevel") -> bool:
        return severity <= self


def parse_level(value: Union["LogLevel", int, str]) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return LogLevel(value)
        except ValueError:
            raise ValueError(f"Nível de log inválido: {value}") from None
    if isinstance(value, str):
        name = value.strip().lower()
        name = LEVEL_ALIASES.get(name, name)
        if name.upper() in LogLevel.__members__:
            return LogLevel[name.upper()]
    raise ValueError(f"Nível de log inválido: {value!r}")


def from_logging_level(levelno: int) -> LogLevel:
    # CRITICAL também cai em ERROR; abaixo de DEBUG vira TRACE
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE
