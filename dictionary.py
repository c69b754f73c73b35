"""
English-Czech dictionary lookup (slovniky.lingea.cz).

The lookup page is scraped: a word the dictionary knows renders one
``table.entry`` with the headword, translations and usage examples.
"""

import logging
import random
from dataclasses import dataclass, field
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from config import DICTIONARY_URL, HTTP_TIMEOUT, USER_AGENT
from sampler import iter_random_words


log = logging.getLogger(__name__)

ENTRY_SELECTOR = "table.entry"
HEADWORD_SELECTOR = "h1.lex_ful_entr"
TRANSLATION_SELECTOR = "span.lex_ful_tran"
EXAMPLE_SELECTORS = ("span.lex_ful_samp2", "span.lex_ful_coll2")


class DefinitionNotFound(LookupError):
    """The dictionary has no entry for the word; pick another one."""


class LookupExhausted(RuntimeError):
    pass


@dataclass
class Definition:
    headword: str
    translations: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)


def _text(el) -> str:
    return " ".join(el.get_text().split())


def parse_definition(page_html: str) -> Definition:
    soup = BeautifulSoup(page_html, "html.parser")
    table = soup.select_one(ENTRY_SELECTOR)
    if table is None:
        raise DefinitionNotFound("no entry table")

    heading = table.select_one(HEADWORD_SELECTOR)
    headword = _text(heading) if heading is not None else ""
    if not headword:
        raise DefinitionNotFound("entry without headword")

    translations = [_text(el) for el in table.select(TRANSLATION_SELECTOR)]

    examples: list[str] = []
    for selector in EXAMPLE_SELECTORS:
        examples.extend(_text(el) for el in table.select(selector))

    return Definition(headword=headword, translations=translations, examples=examples)


def lookup_definition(word: str) -> Definition:
    url = DICTIONARY_URL + quote(word, safe="")
    with requests.get(url, timeout=HTTP_TIMEOUT, headers={"User-Agent": USER_AGENT}) as r:
        if r.status_code == 404:
            raise DefinitionNotFound(f"{word!r} not in dictionary")
        r.raise_for_status()
        r.encoding = r.apparent_encoding or "utf-8"
        page_html = r.text

    try:
        return parse_definition(page_html)
    except DefinitionNotFound as ex:
        raise DefinitionNotFound(f"{word!r}: {ex}") from ex


def find_definition(
    text: str,
    max_attempts: int,
    rng: random.Random | None = None,
) -> tuple[str, Definition]:
    """
    Sample words from the text until the dictionary knows one.

    Only DefinitionNotFound triggers a resample; any other error propagates.
    Gives up with LookupExhausted after max_attempts misses or when the text
    has no untried words left.
    """
    attempts = 0
    for word in iter_random_words(text, rng):
        if attempts >= max_attempts:
            break
        attempts += 1
        log.info("Looking up %r (attempt %d/%d)", word, attempts, max_attempts)
        try:
            return word, lookup_definition(word)
        except DefinitionNotFound as ex:
            log.info("No definition: %s", ex)

    raise LookupExhausted(f"no definition found after {attempts} lookups")
