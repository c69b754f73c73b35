import pytest
import requests


class FakeResponse:
    apparent_encoding = "utf-8"

    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code
        self.encoding = None
        self.closed = False

    @property
    def ok(self):
        return self.status_code < 400

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class FakeWeb:
    """Stands in for requests.get; routes by exact URL and records every call."""

    def __init__(self):
        self.routes: dict[str, FakeResponse] = {}
        self.calls: list[tuple[str, dict | None]] = []

    def add(self, url: str, text: str = "", status_code: int = 200) -> FakeResponse:
        resp = FakeResponse(text, status_code)
        self.routes[url] = resp
        return resp

    def get(self, url, params=None, **kwargs):
        self.calls.append((url, params))
        if url not in self.routes:
            raise requests.ConnectionError(f"unexpected request to {url}")
        return self.routes[url]

    def calls_to(self, url: str) -> list[dict | None]:
        return [params for u, params in self.calls if u == url]


@pytest.fixture
def web(monkeypatch):
    fake = FakeWeb()
    monkeypatch.setattr(requests, "get", fake.get)
    return fake


INDEX_HTML = """
<html><body>
  <div id="nejctenejsi"><ul><li><a href="/most-read">Most read</a></li></ul></div>
  <div id="pravevydano">
    <ul>
      <li><a href="/2024/01/01/foo">Newest</a></li>
      <li><a href="/2023/12/31/bar">Older</a></li>
    </ul>
  </div>
</body></html>
"""


def article_html(lead: str) -> str:
    return f"""
<html><body>
  <p class="big">Not the article body</p>
  <div id="articlebody">
    <p class="perex">Perex</p>
    <p class="big">{lead}</p>
    <p class="big">Second big paragraph</p>
  </div>
</body></html>
"""


def entry_html(headword: str, translations=(), samples=(), collocations=()) -> str:
    tran = "".join(f'<span class="lex_ful_tran">{t}</span>' for t in translations)
    samp = "".join(f'<span class="lex_ful_samp2">{s}</span>' for s in samples)
    coll = "".join(f'<span class="lex_ful_coll2">{c}</span>' for c in collocations)
    return f"""
<html><body>
  <table class="entry">
    <tr><td><h1 class="lex_ful_entr">{headword}</h1></td></tr>
    <tr><td>{tran}</td></tr>
    <tr><td>{coll}{samp}</td></tr>
  </table>
</body></html>
"""


NO_ENTRY_HTML = "<html><body><div class='no-result'>Nenalezeno</div></body></html>"
