import logging
from urllib.parse import urljoin

import requests
import trafilatura
from bs4 import BeautifulSoup

from config import HTTP_TIMEOUT, USER_AGENT, WORD_SOURCE_URL


log = logging.getLogger(__name__)

LATEST_LINK_SELECTOR = "#pravevydano ul li a"
LEAD_PARAGRAPH_SELECTOR = "#articlebody p.big"


class ArticleNotFound(LookupError):
    pass


def fetch_html(url: str) -> str:
    with requests.get(url, timeout=HTTP_TIMEOUT, headers={"User-Agent": USER_AGENT}) as r:
        r.raise_for_status()
        r.encoding = r.apparent_encoding or "utf-8"
        return r.text


def extract_text(article_html: str) -> str:
    text = trafilatura.extract(article_html, include_comments=False, include_tables=False)
    return (text or "").strip()


def find_latest_article_href(index_html: str) -> str:
    """Return the href of the first link in the "just published" list."""
    soup = BeautifulSoup(index_html, "html.parser")
    link = soup.select_one(LATEST_LINK_SELECTOR)
    href = link.get("href") if link is not None else None
    if not href:
        raise ArticleNotFound("no href attribute")
    return href


def find_lead_paragraph(article_html: str) -> str:
    """
    Text of the large lead paragraph inside the article body.

    Returns an empty string when the page has no such paragraph.
    """
    soup = BeautifulSoup(article_html, "html.parser")
    p = soup.select_one(LEAD_PARAGRAPH_SELECTOR)
    if p is None:
        return ""
    return " ".join(p.get_text().split())


def fetch_latest_article_path() -> str:
    index_html = fetch_html(WORD_SOURCE_URL)
    href = find_latest_article_href(index_html)
    log.info("Latest article: %s", href)
    return href


def fetch_article_text(path: str) -> str:
    url = urljoin(WORD_SOURCE_URL, path)
    article_html = fetch_html(url)

    text = find_lead_paragraph(article_html)
    if not text:
        # Layout changed or an unusual article page: take the first extracted paragraph
        log.warning("No lead paragraph in %s, falling back to full-text extraction", url)
        lines = [ln.strip() for ln in extract_text(article_html).splitlines() if ln.strip()]
        text = lines[0] if lines else ""

    if not text:
        raise ArticleNotFound(f"no lead paragraph in {url}")
    return text
