"""Unit tests for DEV.to cross-posting (no network: a fake session records requests)."""

import pytest

from folio.contexts.content import PostNotFoundError, find_post
from folio.contexts.crosspost import (
    DevToAPIError,
    DevToClient,
    MissingCredentialError,
    build_article,
    publish_post,
)

SITE_URL = "https://camarneiro.com"


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    def __init__(self, response):
        self.headers = {}
        self.response = response
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": dict(self.headers)})
        return self.response


def _created(article_id=7, url="https://dev.to/ada/hello-world-7"):
    return FakeResponse(201, {"id": article_id, "url": url, "title": "Hello World", "published": True})


@pytest.mark.unit
def test_build_article(blog_dir):
    """Test payload fields, the 4-tag cap and the default canonical URL."""
    article = build_article(find_post("hello-world", blog_dir), SITE_URL)

    assert article["title"] == "Hello World"
    assert article["published"] is True
    assert article["tags"] == ["meta", "python", "web", "writing"]
    assert article["canonical_url"] == "https://camarneiro.com/blog/hello-world"
    assert article["description"] == "First post on the new blog."
    assert "This is the **first** post." in article["body_markdown"]


@pytest.mark.unit
def test_build_article_explicit_canonical(blog_dir):
    article = build_article(find_post("second-post", blog_dir), SITE_URL)
    assert article["canonical_url"] == "https://blog.example.org/print-stylesheets"


@pytest.mark.unit
def test_build_article_draft_unpublished(blog_dir):
    article = build_article(find_post("work-in-progress", blog_dir), SITE_URL)
    assert article["published"] is False


@pytest.mark.unit
def test_client_posts_wrapped_article():
    session = FakeSession(_created())
    client = DevToClient("secret", api_url="https://dev.example/api/articles", session=session)

    created = client.create_article({"title": "Hello World", "published": True})

    call = session.calls[0]
    assert call["url"] == "https://dev.example/api/articles"
    assert call["json"] == {"article": {"title": "Hello World", "published": True}}
    assert call["headers"]["api-key"] == "secret"
    assert created.id == 7
    assert created.url == "https://dev.to/ada/hello-world-7"


@pytest.mark.unit
def test_client_error_carries_status_and_body():
    session = FakeSession(FakeResponse(422, {"error": "Tag limit exceeded", "status": 422}))
    client = DevToClient("secret", session=session)

    with pytest.raises(DevToAPIError) as exc_info:
        client.create_article({"title": "x", "published": True})

    assert exc_info.value.status == 422
    assert exc_info.value.body == {"error": "Tag limit exceeded", "status": 422}


@pytest.mark.unit
def test_client_error_with_non_json_body():
    session = FakeSession(FakeResponse(502, text="Bad Gateway"))
    client = DevToClient("secret", session=session)

    with pytest.raises(DevToAPIError) as exc_info:
        client.create_article({"title": "x", "published": True})

    assert exc_info.value.body == "Bad Gateway"


@pytest.mark.unit
def test_client_requires_key():
    with pytest.raises(MissingCredentialError):
        DevToClient("")


@pytest.mark.unit
def test_publish_missing_key_before_any_io(tmp_path):
    """Test that a missing key fails even when the post does not exist."""
    session = FakeSession(_created())

    with pytest.raises(MissingCredentialError):
        publish_post("does-not-exist", None, tmp_path, SITE_URL)

    assert session.calls == []


@pytest.mark.unit
def test_publish_missing_post(blog_dir):
    client = DevToClient("secret", session=FakeSession(_created()))

    with pytest.raises(PostNotFoundError):
        publish_post("nope", "secret", blog_dir, SITE_URL, client=client)


@pytest.mark.unit
def test_publish_skips_already_published(blog_dir):
    session = FakeSession(_created())
    client = DevToClient("secret", session=session)

    result = publish_post("second-post", "secret", blog_dir, SITE_URL, client=client)

    assert result.skipped
    assert result.article is None
    assert result.existing_url == "https://dev.to/ada/second-post-1a2b"
    assert session.calls == []


@pytest.mark.unit
def test_publish_post(blog_dir):
    session = FakeSession(_created())
    client = DevToClient("secret", session=session)
    before = (blog_dir / "hello-world.md").read_text(encoding="utf-8")

    result = publish_post("hello-world", "secret", blog_dir, SITE_URL, client=client)

    assert not result.skipped
    assert result.article.id == 7
    assert result.canonical_url == "https://camarneiro.com/blog/hello-world"
    assert len(session.calls) == 1
    # Without write-back the post file is untouched
    assert (blog_dir / "hello-world.md").read_text(encoding="utf-8") == before


@pytest.mark.unit
def test_publish_post_updates_frontmatter(blog_dir):
    client = DevToClient("secret", session=FakeSession(_created()))

    publish_post("hello-world", "secret", blog_dir, SITE_URL, client=client, update_frontmatter=True)

    dev_to = find_post("hello-world", blog_dir).frontmatter.crosspost.dev_to
    assert dev_to.published is True
    assert dev_to.id == 7
    assert dev_to.url == "https://dev.to/ada/hello-world-7"


@pytest.mark.unit
def test_publish_api_error_leaves_post_untouched(blog_dir):
    client = DevToClient("secret", session=FakeSession(FakeResponse(401, {"error": "unauthorized"})))
    before = (blog_dir / "hello-world.md").read_text(encoding="utf-8")

    with pytest.raises(DevToAPIError):
        publish_post("hello-world", "secret", blog_dir, SITE_URL, client=client, update_frontmatter=True)

    assert (blog_dir / "hello-world.md").read_text(encoding="utf-8") == before
