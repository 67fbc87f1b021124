"""
Logger: par (LogWriter, último erro) com os métodos por severidade.

Cada severidade expõe três formas: mensagem simples, estilo printf
(formato % args) e estilo println (args separados por espaço + "\\n").
Todas passam pelo mesmo caminho de envio, então a política de erro é única:
o TransportError fica guardado em `last_error`, é registrado no logging e só
é relançado quando `raise_errors=True`. Um envio bem-sucedido limpa o erro;
mensagens bloqueadas pelo limiar não mexem nele.
"""

import codecs
import logging
import sys
import threading
from typing import Optional, Union

from .errors import LoggerPanic, TransportError
from .formatters import sprint, sprintf, sprintln
from .levels import LogLevel, parse_level
from .writer import LogWriter

logger = logging.getLogger(__name__)


class Logger:
    def __init__(self, url: str = "", level=LogLevel.TRACE, raise_errors: bool = False, writer: Optional[LogWriter] = None):
        self._writer = writer if writer is not None else LogWriter.for_url(url, level=level)
        self.raise_errors = raise_errors
        self._err: Optional[TransportError] = None
        self._lock = threading.Lock()
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @classmethod
    def from_writer(cls, writer: LogWriter, raise_errors: bool = False) -> "Logger":
        return cls(writer=writer, raise_errors=raise_errors)

    def __repr__(self):
        return f"Logger(level={self._writer.level.name}, prefix={self._writer.prefix!r})"

    # --- configuração ---------------------------------------------------

    @property
    def writer(self) -> LogWriter:
        return self._writer

    @property
    def level(self) -> LogLevel:
        return self._writer.level

    @property
    def prefix(self) -> str:
        return self._writer.prefix

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._writer = self._writer.with_prefix(prefix)

    def with_level(self, level) -> "Logger":
        """Retorna um novo Logger com o limiar alterado; o original não muda."""
        return self._derive(self._writer.with_level(parse_level(level)))

    def with_writer(self, writer: LogWriter) -> "Logger":
        """Retorna um novo Logger usando `writer` (destinos, limiar e prefixo)."""
        return self._derive(writer)

    def _derive(self, writer: LogWriter) -> "Logger":
        clone = Logger(writer=writer, raise_errors=self.raise_errors)
        clone._err = self._err
        return clone

    # --- erros ----------------------------------------------------------

    @property
    def last_error(self) -> Optional[TransportError]:
        with self._lock:
            return self._err

    def err(self) -> Optional[TransportError]:
        return self.last_error

    def _record_failure(self, exc: TransportError) -> int:
        with self._lock:
            self._err = exc
        logger.warning(f"Falha ao enviar mensagem ao webhook: {exc}")
        if self.raise_errors:
            raise exc
        return 0

    def _send(self, severity: Optional[LogLevel], text: str) -> int:
        writer = self._writer
        if not writer.enabled_for(LogLevel.INFO if severity is None else severity):
            return 0
        try:
            if severity is None:
                written = writer.log_message(text)
            else:
                written = writer.emit(severity, text)
        except TransportError as exc:
            return self._record_failure(exc)
        with self._lock:
            self._err = None
        return written

    def write(self, data: Union[str, bytes]) -> int:
        """
        Escrita estilo stream: acumula o texto e envia cada linha completa
        (com o "\\n") em um POST próprio; `flush()` envia o que sobrar.
        Sem tag e sem gate, sempre no destino "log".
        """
        raw = isinstance(data, (bytes, bytearray))
        size = len(data) if raw else len(str(data).encode("utf-8"))
        lines = []
        with self._lock:
            self._pending += self._decoder.decode(bytes(data)) if raw else str(data)
            while "\n" in self._pending:
                line, _, self._pending = self._pending.partition("\n")
                lines.append(line + "\n")
        for line in lines:
            if not self._write_now(line):
                return 0
        return size

    def flush(self) -> None:
        with self._lock:
            remainder, self._pending = self._pending, ""
        if remainder:
            self._write_now(remainder)

    def _write_now(self, text: str) -> bool:
        writer = self._writer
        try:
            writer.write(text)
        except TransportError as exc:
            self._record_failure(exc)
            return False
        with self._lock:
            self._err = None
        return True

    def emit(self, severity, msg: str) -> int:
        return self._send(parse_level(severity), msg)

    # --- log genérico ---------------------------------------------------

    def log(self, msg: str) -> int:
        return self._send(None, msg)

    def logf(self, fmt: str, *args) -> int:
        return self._send(None, sprintf(fmt, *args))

    def logln(self, *args) -> int:
        return self._send(None, sprintln(*args))

    # --- por severidade -------------------------------------------------

    def error(self, msg: str) -> int:
        return self._send(LogLevel.ERROR, msg)

    def errorf(self, fmt: str, *args) -> int:
        return self._send(LogLevel.ERROR, sprintf(fmt, *args))

    def errorln(self, *args) -> int:
        return self._send(LogLevel.ERROR, sprintln(*args))

    def warning(self, msg: str) -> int:
        return self._send(LogLevel.WARNING, msg)

    def warningf(self, fmt: str, *args) -> int:
        return self._send(LogLevel.WARNING, sprintf(fmt, *args))

    def warningln(self, *args) -> int:
        return self._send(LogLevel.WARNING, sprintln(*args))

    def info(self, msg: str) -> int:
        return self._send(LogLevel.INFO, msg)

    def infof(self, fmt: str, *args) -> int:
        return self._send(LogLevel.INFO, sprintf(fmt, *args))

    def infoln(self, *args) -> int:
        return self._send(LogLevel.INFO, sprintln(*args))

    def debug(self, msg: str) -> int:
        return self._send(LogLevel.DEBUG, msg)

    def debugf(self, fmt: str, *args) -> int:
        return self._send(LogLevel.DEBUG, sprintf(fmt, *args))

    def debugln(self, *args) -> int:
        return self._send(LogLevel.DEBUG, sprintln(*args))

    def trace(self, msg: str) -> int:
        return self._send(LogLevel.TRACE, msg)

    def tracef(self, fmt: str, *args) -> int:
        return self._send(LogLevel.TRACE, sprintf(fmt, *args))

    def traceln(self, *args) -> int:
        return self._send(LogLevel.TRACE, sprintln(*args))

    # --- aliases print/fatal/panic --------------------------------------

    def print(self, *args) -> int:
        return self.log(sprint(*args))

    def printf(self, fmt: str, *args) -> int:
        return self.logf(fmt, *args)

    def println(self, *args) -> int:
        return self.logln(*args)

    def fatal(self, *args):
        try:
            self.error(sprint(*args))
        finally:
            sys.exit(1)

    def fatalf(self, fmt: str, *args):
        try:
            self.errorf(fmt, *args)
        finally:
            sys.exit(1)

    def fatalln(self, *args):
        try:
            self.errorln(*args)
        finally:
            sys.exit(1)

    def panic(self, *args):
        self._panic(sprint(*args))

    def panicf(self, fmt: str, *args):
        self._panic(sprintf(fmt, *args))

    def panicln(self, *args):
        self._panic(sprintln(*args))

    def _panic(self, message: str):
        try:
            self.error(message)
        finally:
            raise LoggerPanic(message)


def new(url: str, level=LogLevel.TRACE) -> Logger:
    """Um único webhook para todos os destinos; limiar padrão TRACE."""
    return Logger(url, level=level)
