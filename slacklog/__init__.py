"""Logger em níveis que encaminha mensagens de texto para webhooks (Slack).

Este pacote contém:
- constants: variáveis de ambiente e tabela de tags
- levels: severidades e conversões
- formatters: tags, prefixo e helpers print/printf/println
- services: envio HTTP ao webhook
- writer: conjunto de destinos por severidade e gate de limiar
- logger: Logger com os métodos por severidade
- std: instância padrão do processo e funções livres
- handler: ponte para o logging da stdlib
"""
from .errors import LoggerPanic, SlackLogError, TransportError
from .levels import LogLevel, from_logging_level, parse_level
from .writer import LogWriter
from .logger import Logger, new
from .handler import WebhookHandler
from .std import (  # noqa: A004
    configure,
    debug,
    debugf,
    debugln,
    default,
    err,
    error,
    errorf,
    errorln,
    fatal,
    fatalf,
    fatalln,
    flags,
    flush,
    info,
    infof,
    infoln,
    log,
    logf,
    logln,
    panic,
    panicf,
    panicln,
    prefix,
    print,
    printf,
    println,
    set_default,
    set_flags,
    set_prefix,
    trace,
    tracef,
    traceln,
    warning,
    warningf,
    warningln,
    with_level,
    with_writer,
    write,
)

__version__ = "0.1.0"
