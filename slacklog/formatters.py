from collections.abc import Mapping
from typing import Optional

from .levels import LogLevel


def format_message(text: str, severity: Optional[LogLevel] = None, prefix: str = "") -> str:
    """
    Monta o texto final enviado ao webhook: prefixo + "TAG: " + mensagem.
    Sem severidade (caminho genérico de escrita) a tag é omitida.
    O prefixo entra literalmente, sem separador extra.
    """
    line = f"{severity.tag}: {text}" if severity is not None else text
    if prefix:
        line = prefix + line
    return line


def sprint(*args) -> str:
    # Espaço apenas entre operandos vizinhos que não são strings
    parts = []
    previous = None
    for index, arg in enumerate(args):
        if index > 0 and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(arg))
        previous = arg
    return "".join(parts)


def sprintf(fmt: str, *args) -> str:
    if not args:
        return fmt
    # Mesmo contrato do logging da stdlib: um único dict vira mapeamento nomeado
    try:
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            return fmt % args[0]
        return fmt % args
    except (TypeError, ValueError, KeyError):
        # Formato incompatível com os argumentos: a mensagem sai assim mesmo
        extra = ", ".join(repr(arg) for arg in args)
        return f"{fmt}%!(EXTRA {extra})"


def sprintln(*args) -> str:
    return " ".join(str(arg) for arg in args) + "\n"
