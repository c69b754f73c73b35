"""
Word of the day from Czech news.

Takes the newest article on ceskenoviny.cz, picks a word from its lead
paragraph, looks it up in the Lingea English-Czech dictionary and sends the
definition to a Telegram chat.

Runs once and exits, so schedule it externally (cron, GitHub Actions).
Needs TELEGRAM_TOKEN and TELEGRAM_CHAT_ID in the environment or a .env file.
"""

import argparse
import logging
import random
import sys

from config import LOG_LEVEL, ConfigError, Settings, load_settings
from dictionary import Definition, find_definition
from fetcher import fetch_article_text, fetch_latest_article_path
from message_builder import build_message, build_source_message
from telegram_sender import send_message


log = logging.getLogger(__name__)


def run(settings: Settings, dry_run: bool = False, rng: random.Random | None = None) -> Definition:
    path = fetch_latest_article_path()
    text = fetch_article_text(path)
    log.info("Lead paragraph: %s", text)

    word, definition = find_definition(text, settings.max_lookup_attempts, rng)
    log.info("Found %r for sampled word %r", definition.headword, word)

    message = build_message(definition, with_source_marker=settings.send_source_text)

    if dry_run:
        log.info("Dry run, not sending:\n%s", message)
        if settings.send_source_text:
            log.info("Dry run, not sending source:\n%s", build_source_message(text))
        return definition

    send_message(settings, message)
    if settings.send_source_text:
        send_message(settings, build_source_message(text))

    log.info("%s sent!", definition.headword)
    return definition


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a word of the day from Czech news to Telegram.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="build the message and log it instead of sending",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        stream=sys.stdout,
        level=LOG_LEVEL,
        format="%(asctime)s  %(levelname)s  %(message)s",
    )

    try:
        settings = load_settings()
    except ConfigError as ex:
        log.error("%s Aborting.", ex)
        sys.exit(1)

    try:
        run(settings, dry_run=args.dry_run)
    except Exception:
        log.exception("Run failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
