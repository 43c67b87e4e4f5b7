from __future__ import annotations

import httpx

from core.domain.models import Options
from core.services.url_builder import build_url


def _params(url: str) -> list[tuple[str, str]]:
    return httpx.URL(url).params.multi_items()


def test_build_url_from_username_and_query_keeps_order() -> None:
    url = build_url(Options(username="alice", query="column=-1&theme=onedark"))

    assert url is not None
    assert url.startswith("http://localhost/?")
    assert _params(url) == [("username", "alice"), ("column", "-1"), ("theme", "onedark")]


def test_build_url_drops_username_from_extra_query() -> None:
    url = build_url(Options(username="alice", query="username=mallory"))

    assert url is not None
    assert _params(url) == [("username", "alice")]


def test_build_url_strips_leading_question_mark_and_keeps_duplicates() -> None:
    url = build_url(Options(username="alice", query="?rank=S&rank=A&username=eve&title=Stars"))

    assert url is not None
    assert _params(url) == [
        ("username", "alice"),
        ("rank", "S"),
        ("rank", "A"),
        ("title", "Stars"),
    ]


def test_build_url_without_query() -> None:
    assert build_url(Options(username="octocat")) == "http://localhost/?username=octocat"


def test_build_url_returns_explicit_url_verbatim() -> None:
    raw = "https://github-profile-trophy.vercel.app/?username=octocat&theme=radical"

    assert build_url(Options(url=raw, username="ignored")) == raw


def test_build_url_without_url_or_username_is_none() -> None:
    assert build_url(Options(query="theme=onedark")) is None


def test_build_url_on_custom_base() -> None:
    url = build_url(Options(username="alice"), base_url="http://trophy.test/render")

    assert url is not None
    parsed = httpx.URL(url)
    assert parsed.host == "trophy.test"
    assert parsed.path == "/render"
    assert parsed.params.multi_items() == [("username", "alice")]
