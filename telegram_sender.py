import logging

import requests

from config import HTTP_TIMEOUT, TELEGRAM_API_URL, Settings


log = logging.getLogger(__name__)


class MessageDeliveryError(RuntimeError):
    pass


def send_message(settings: Settings, text: str) -> None:
    """Deliver one HTML-formatted message to the configured chat."""
    url = f"{TELEGRAM_API_URL}{settings.telegram_token}/sendMessage"
    params = {
        "chat_id": settings.chat_id,
        "text": text,
        "parse_mode": "HTML",
    }

    with requests.get(url, params=params, timeout=HTTP_TIMEOUT) as r:
        if r.status_code != 200:
            raise MessageDeliveryError(r.text)

    log.info("Delivered %d characters to chat %s", len(text), settings.chat_id)
