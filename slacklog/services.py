import logging
from typing import Optional

import requests

from .constants import DEBUG_MODE, HTTP_TIMEOUT_SECONDS
from .errors import TransportError

logger = logging.getLogger(__name__)


def post_webhook(url, text, timeout=HTTP_TIMEOUT_SECONDS, session: Optional[requests.Session] = None) -> int:
    """
    Envia {"text": text} ao webhook com um único POST bloqueante.
    Retorna o tamanho em bytes do texto de entrada (não da resposta).
    O status HTTP não é inspecionado; só falhas de rede viram TransportError.
    """
    payload = {"text": text}
    sender = session if session is not None else requests
    try:
        resp = sender.post(url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        logger.debug(f"Falha ao enviar para o webhook '{url}': {exc}")
        raise TransportError(f"Falha ao enviar mensagem ao webhook: {exc}", url=url) from exc

    if DEBUG_MODE:
        logger.debug(f"Webhook response: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            logger.debug(f"Response content: {resp.text[:200]}")
    return len(text.encode("utf-8"))
