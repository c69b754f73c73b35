import random
from typing import Iterator

MIN_WORD_LENGTH = 4

# Sentence punctuation plus the Czech and typographic quotes used by the news site
STRIP_CHARS = ".,;:!?()[]{}\"'„“”‚‘’«»…–—-"


class NoEligibleWord(ValueError):
    def __init__(self):
        super().__init__(f"no word longer than {MIN_WORD_LENGTH - 1} characters starting lowercase")


def clean_token(token: str) -> str:
    return token.strip(STRIP_CHARS)


def is_eligible(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH and not word[0].isupper()


def eligible_words(text: str) -> list[str]:
    """Eligible words of the text in document order, duplicates kept."""
    words = (clean_token(t) for t in text.split())
    return [w for w in words if is_eligible(w)]


def _draw_distinct(words: list[str], rng: random.Random) -> Iterator[str]:
    while words:
        word = rng.choice(words)
        yield word
        words = [w for w in words if w != word]


def iter_random_words(text: str, rng: random.Random | None = None) -> Iterator[str]:
    """
    Eligible words in random order, each word at most once.

    Every draw is a uniform pick over the remaining eligible tokens, so a word
    that occurs several times in the text is proportionally more likely to
    come first. Raises NoEligibleWord up front so callers fail before any
    lookup is made.
    """
    words = eligible_words(text)
    if not words:
        raise NoEligibleWord()
    return _draw_distinct(words, rng or random.Random())
