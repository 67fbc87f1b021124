"""
Instância padrão do processo e funções livres que delegam a ela.

O Logger padrão é criado na importação a partir de SLACKLOG_WEBHOOK_URL
(vazio por padrão: os envios falham com TransportError até ser configurado).
Um SLACKLOG_LEVEL inválido faz a importação falhar com ValueError, do mesmo
jeito que as demais constantes lidas do ambiente.
`set_default`/`configure` substituem a instância: vale a última configuração.
Cada função livre resolve a instância no momento da chamada.

O par prefixo/flags global é protegido por um lock; flags é mantido apenas
por compatibilidade e não é consultado em lugar nenhum.
"""

import logging
import threading
from typing import Union

from .constants import LOG_LEVEL, LOG_PREFIX, WEBHOOK_URL
from .levels import LogLevel
from .logger import Logger
from .writer import LogWriter

logger = logging.getLogger(__name__)

_mu = threading.RLock()
_flags = 0


def _build_from_env() -> Logger:
    instance = Logger(WEBHOOK_URL, level=LOG_LEVEL)
    if LOG_PREFIX:
        instance.set_prefix(LOG_PREFIX)
    return instance


_std = _build_from_env()


def default() -> Logger:
    with _mu:
        return _std


def set_default(instance: Logger) -> Logger:
    """Substitui o Logger padrão e retorna o anterior."""
    global _std
    if not isinstance(instance, Logger):
        raise TypeError(f"Esperado Logger, recebido {type(instance).__name__}")
    with _mu:
        previous, _std = _std, instance
    logger.debug(f"Logger padrão substituído: {instance!r}")
    return previous


def configure(url: str, level=LogLevel.TRACE, prefix: str = "", raise_errors: bool = False) -> Logger:
    instance = Logger(url, level=level, raise_errors=raise_errors)
    if prefix:
        instance.set_prefix(prefix)
    set_default(instance)
    return instance


def set_prefix(prefix: str) -> None:
    with _mu:
        _std.set_prefix(prefix)


def prefix() -> str:
    with _mu:
        return _std.prefix


def set_flags(flags: int) -> None:
    global _flags
    with _mu:
        _flags = flags


def flags() -> int:
    with _mu:
        return _flags


def with_level(level) -> Logger:
    return default().with_level(level)


def with_writer(writer: LogWriter) -> Logger:
    return default().with_writer(writer)


def err():
    return default().err()


def write(data: Union[str, bytes]) -> int:
    return default().write(data)


def flush() -> None:
    default().flush()


def log(msg: str) -> int:
    return default().log(msg)


def logf(fmt: str, *args) -> int:
    return default().logf(fmt, *args)


def logln(*args) -> int:
    return default().logln(*args)


def error(msg: str) -> int:
    return default().error(msg)


def errorf(fmt: str, *args) -> int:
    return default().errorf(fmt, *args)


def errorln(*args) -> int:
    return default().errorln(*args)


def warning(msg: str) -> int:
    return default().warning(msg)


def warningf(fmt: str, *args) -> int:
    return default().warningf(fmt, *args)


def warningln(*args) -> int:
    return default().warningln(*args)


def info(msg: str) -> int:
    return default().info(msg)


def infof(fmt: str, *args) -> int:
    return default().infof(fmt, *args)


def infoln(*args) -> int:
    return default().infoln(*args)


def debug(msg: str) -> int:
    return default().debug(msg)


def debugf(fmt: str, *args) -> int:
    return default().debugf(fmt, *args)


def debugln(*args) -> int:
    return default().debugln(*args)


def trace(msg: str) -> int:
    return default().trace(msg)


def tracef(fmt: str, *args) -> int:
    return default().tracef(fmt, *args)


def traceln(*args) -> int:
    return default().traceln(*args)


def print(*args) -> int:  # noqa: A001
    return default().print(*args)


def printf(fmt: str, *args) -> int:
    return default().printf(fmt, *args)


def println(*args) -> int:
    return default().println(*args)


def fatal(*args):
    default().fatal(*args)


def fatalf(fmt: str, *args):
    default().fatalf(fmt, *args)


def fatalln(*args):
    default().fatalln(*args)


def panic(*args):
    default().panic(*args)


def panicf(fmt: str, *args):
    default().panicf(fmt, *args)


def panicln(*args):
    default().panicln(*args)
