"""Unit tests for the CV print layout edits."""

import pytest
from bs4 import BeautifulSoup

from folio.contexts.rendering import apply_print_layout
from folio.contexts.rendering.print_layout import COLORS, parse_style, set_style
from folio.contexts.site import SiteRenderer


@pytest.fixture
def cv_html(site_config, reference_date, cv):
    return SiteRenderer(site_config, today=reference_date).render_cv_page(cv)


def _hidden(element) -> bool:
    return parse_style(element.get("style", "")).get("display") == "none"


@pytest.mark.unit
def test_set_style_merges_properties():
    soup = BeautifulSoup('<p style="color: red; margin: 0">x</p>', "html.parser")
    set_style(soup.p, font_size="1rem", color="blue")

    assert parse_style(soup.p["style"]) == {"color": "blue", "margin": "0", "font-size": "1rem"}


@pytest.mark.unit
def test_set_style_ignores_missing_element():
    set_style(None, display="none")


@pytest.mark.unit
def test_hides_page_chrome(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")

    assert _hidden(soup.select_one("body > header"))
    assert _hidden(soup.select_one("body > footer"))
    assert _hidden(soup.select_one("a[download]"))
    assert _hidden(soup.select_one(".container-narrow > div:last-child"))
    # Key Achievements
    assert _hidden(soup.select(".container-narrow > section")[1])


@pytest.mark.unit
def test_limits_experience_entries(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html, max_experience=1), "html.parser")
    articles = soup.select(".container-narrow > section:nth-of-type(3) article")

    assert not _hidden(articles[0])
    assert _hidden(articles[1])


@pytest.mark.unit
def test_hides_durations(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    durations = soup.select(".text-xs")

    assert durations
    assert all(_hidden(el) for el in durations)


@pytest.mark.unit
def test_merges_skill_categories(cv_html):
    """Test that categories collapse into four labelled comma lists."""
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    groups = soup.select_one(".container-narrow > section:nth-of-type(4) .space-y-6")
    lines = [div.get_text() for div in groups.find_all("div", recursive=False)]

    assert lines == [
        "Frontend: React, TypeScript, Next.js, Redux, GraphQL, Micro-frontends, Web Vitals",
        "Testing: Jest, Playwright",
        "DevOps & Cloud: Docker, GitHub Actions, AWS, Sentry",
        "Leadership & Other: Mentoring, Code Review, LLM tooling",
    ]
    assert f"color: {COLORS['copper']}" in groups.find("strong")["style"]


@pytest.mark.unit
def test_inlines_soft_skills(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    soft = soup.select_one(".container-narrow > section:nth-of-type(4) .space-y-6 + div")

    assert soft.get_text() == "Soft Skills: Communication, Ownership"


@pytest.mark.unit
def test_experience_pills_become_italic_list(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    pills = soup.select_one(".container-narrow > section:nth-of-type(3) article .flex.flex-wrap.gap-2")

    assert pills.get_text() == "React, TypeScript, Next.js"
    assert "font-style: italic" in pills.find("span")["style"]


@pytest.mark.unit
def test_inlines_languages(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    languages = soup.select_one(".container-narrow > section:last-of-type .grid")

    assert languages.get_text() == "Portuguese (Native) · English (Fluent)"


@pytest.mark.unit
def test_education_hides_details(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    article = soup.select_one(".space-y-8 article")

    assert _hidden(article.select_one("p.text-graphite.mb-4"))
    assert _hidden(article.find("ul"))
    assert not _hidden(article.find("h3"))


@pytest.mark.unit
def test_contact_links_as_plain_text(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    contact = soup.select_one(".container-narrow > header .flex.flex-wrap.gap-4")

    assert contact.select_one('a[href^="mailto:"] span').get_text() == "ada@example.com"
    assert contact.select_one('a[href*="linkedin"] span').get_text() == "linkedin.com/in/ada-example"
    assert contact.select_one('a[href*="github"] span').get_text() == "github.com/ada-example"


@pytest.mark.unit
def test_compacts_header(cv_html):
    soup = BeautifulSoup(apply_print_layout(cv_html), "html.parser")
    header = soup.select_one(".container-narrow > header")

    assert parse_style(header.find("h1")["style"])["font-size"] == "1.75rem"
    assert parse_style(header.find("svg")["style"])["width"] == "0.85rem"
