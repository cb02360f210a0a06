"""
Integration tests for the site build - renders real fixture content to disk.
"""

import pytest
from bs4 import BeautifulSoup

from folio.contexts.content import load_posts
from folio.contexts.rendering import apply_print_layout
from folio.contexts.site import SiteRenderer, build_site


@pytest.mark.integration
def test_build_site_layout(tmp_path, cv, blog_dir, site_config, reference_date):
    """Test that every page lands at its URL path under dist."""
    dist = tmp_path / "dist"
    posts = load_posts(blog_dir)

    result = build_site(cv, posts, dist, site_config, renderer=SiteRenderer(site_config, today=reference_date))

    assert result.post_count == 2
    assert sorted(p.relative_to(dist).as_posix() for p in result.written) == [
        "blog/hello-world/index.html",
        "blog/index.html",
        "blog/second-post/index.html",
        "cv/index.html",
        "rss.xml",
    ]
    assert not (dist / "blog" / "work-in-progress").exists()
    assert "<rss" in (dist / "rss.xml").read_text(encoding="utf-8")


@pytest.mark.integration
def test_build_site_without_cv(tmp_path, blog_dir, site_config):
    dist = tmp_path / "dist"
    build_site(None, load_posts(blog_dir), dist, site_config)

    assert not (dist / "cv").exists()
    assert (dist / "blog" / "index.html").exists()


@pytest.mark.integration
def test_built_cv_page_prints(tmp_path, cv, site_config, reference_date):
    """Test that the built CV page accepts the print layout end to end."""
    dist = tmp_path / "dist"
    build_site(cv, [], dist, site_config, renderer=SiteRenderer(site_config, today=reference_date))

    html = (dist / "cv" / "index.html").read_text(encoding="utf-8")
    soup = BeautifulSoup(apply_print_layout(html), "html.parser")

    assert "Frontend: React" in soup.get_text()
    assert "Portuguese (Native) · English (Fluent)" in soup.get_text()
