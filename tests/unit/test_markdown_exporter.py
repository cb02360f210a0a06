"""Unit tests for the CV Markdown export."""

import pytest

from folio.contexts.cv import export_to_markdown


@pytest.mark.unit
def test_header(cv):
    lines = export_to_markdown(cv).split("\n")

    assert lines[:6] == [
        "# Ada Example",
        "**Senior Frontend Engineer**",
        "",
        "Lisbon, Portugal | ada@example.com",
        "LinkedIn: https://www.linkedin.com/in/ada-example",
        "GitHub: https://github.com/ada-example",
    ]


@pytest.mark.unit
def test_experience_entry_verbatim(cv):
    """Test that text fields are copied as is (no escaping)."""
    markdown = export_to_markdown(cv)

    assert (
        "### Senior Frontend Engineer at Acme Corp\n"
        "*Remote | Mar 2022 - Present*\n"
        "\n"
        "Leading the design system & web platform team.\n"
        "\n"
        "**Key Achievements:**\n"
        "- Cut Largest Contentful Paint by 40% across the storefront\n"
        "- Mentored five engineers through promotion\n"
        "\n"
        "**Technologies:** React, TypeScript, Next.js\n"
    ) in markdown


@pytest.mark.unit
def test_visibility_filters(cv):
    default = export_to_markdown(cv)
    assert "Globex" in default
    assert "Initech Payments" not in default
    assert "Hooli" not in default

    tailored = export_to_markdown(cv, audience="fintech")
    assert "### Software Engineer at Initech Payments" in tailored
    assert "Hooli" not in tailored

    full = export_to_markdown(cv, include_hidden=True)
    assert "### Intern at Hooli" in full


@pytest.mark.unit
def test_skills_education_and_languages(cv):
    markdown = export_to_markdown(cv)

    assert "**Frontend Engineering:** React, TypeScript, Next.js\n" in markdown
    assert "**Soft Skills:** Communication, Ownership\n" in markdown
    assert (
        "### BSc Computer Science\n"
        "*University of Lisbon, Lisbon, Portugal | 2012-09 - 2016-06*\n"
        "\n"
        "Focus on human-computer interaction.\n"
    ) in markdown
    assert "- **Portuguese:** Native\n- **English:** Fluent" in markdown


@pytest.mark.unit
def test_projects_and_certifications(cv):
    markdown = export_to_markdown(cv)

    assert "## Projects\n\n### Folio\n\nPersonal site and CV generator.\n\n**URL:** https://example.com" in markdown
    assert "**Highlights:**\n- Prints the CV to two pages" in markdown
    assert "- **AWS Certified Developer** - Amazon Web Services (2023-05), Credential ID ABC-123" in markdown


@pytest.mark.unit
def test_section_order(cv):
    markdown = export_to_markdown(cv)
    headings = [line for line in markdown.split("\n") if line.startswith("## ")]

    assert headings == [
        "## Summary",
        "## Experience",
        "## Skills",
        "## Education",
        "## Projects",
        "## Certifications",
        "## Languages",
    ]


@pytest.mark.unit
def test_no_optional_sections_when_empty(cv):
    cv.projects = []
    cv.certifications = []
    cv.languages = []
    markdown = export_to_markdown(cv)

    assert "## Projects" not in markdown
    assert "## Certifications" not in markdown
    assert "## Languages" not in markdown
