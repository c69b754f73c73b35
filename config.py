import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv


load_dotenv()


WORD_SOURCE_URL = os.getenv("WORD_SOURCE_URL", "https://www.ceskenoviny.cz")
DICTIONARY_URL = os.getenv("DICTIONARY_URL", "https://slovniky.lingea.cz/anglicko-cesky/")
TELEGRAM_API_URL = os.getenv("TELEGRAM_API_URL", "https://api.telegram.org/bot")

HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))
USER_AGENT = "Mozilla/5.0 (word-of-the-day)"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    telegram_token: str
    chat_id: str
    # Dictionary misses tolerated before the run gives up
    max_lookup_attempts: int = 20
    # Also deliver the raw lead paragraph after the definition
    send_source_text: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read and validate the run settings.

    The bot token and chat id are required; a missing or blank one, or a
    malformed MAX_LOOKUP_ATTEMPTS, raises ConfigError so the run stops before
    anything goes over the network.
    """
    env = os.environ if environ is None else environ

    token = (env.get("TELEGRAM_TOKEN") or "").strip()
    chat_id = (env.get("TELEGRAM_CHAT_ID") or "").strip()

    if not token:
        raise ConfigError("TELEGRAM_TOKEN is empty. Provide the bot token.")
    if not chat_id:
        raise ConfigError("TELEGRAM_CHAT_ID is empty. Provide the recipient id or @handle.")

    raw_attempts = (env.get("MAX_LOOKUP_ATTEMPTS") or "20").strip()
    try:
        max_lookup_attempts = int(raw_attempts)
    except ValueError:
        raise ConfigError(f"MAX_LOOKUP_ATTEMPTS must be a number, got {raw_attempts!r}.") from None
    if max_lookup_attempts < 1:
        raise ConfigError("MAX_LOOKUP_ATTEMPTS must be at least 1.")

    send_source_text = (env.get("SEND_SOURCE_TEXT") or "0").strip().lower() in ("1", "true", "yes")

    return Settings(
        telegram_token=token,
        chat_id=chat_id,
        max_lookup_attempts=max_lookup_attempts,
        send_source_text=send_source_text,
    )
