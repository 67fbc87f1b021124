import argparse
import logging
import sys

from slacklog import Logger, LogLevel, TransportError, parse_level
from slacklog.constants import DEBUG_MODE, LOG_PREFIX, WEBHOOK_URL


def build_parser():
    parser = argparse.ArgumentParser(description="Envia uma mensagem de log para um webhook")
    parser.add_argument("message", nargs="+", help="texto da mensagem")
    parser.add_argument("--url", default=WEBHOOK_URL, help="webhook de destino (padrão: SLACKLOG_WEBHOOK_URL)")
    parser.add_argument("--level", default="info", help="error, warning, info, debug ou trace")
    parser.add_argument("--prefix", default=LOG_PREFIX)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if DEBUG_MODE else logging.WARNING)
    try:
        severity = parse_level(args.level)
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    sender = Logger(args.url, level=LogLevel.TRACE, raise_errors=True)
    if args.prefix:
        sender.set_prefix(args.prefix)
    try:
        sender.emit(severity, " ".join(args.message))
    except TransportError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
