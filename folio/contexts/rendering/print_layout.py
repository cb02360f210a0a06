"""
CV Print Layout

Rewrites the built CV page into a compact two-page print version before it
is handed to the browser. Every edit is cosmetic: elements are hidden or
restyled with inline styles, and a few lists of pills are flattened into
comma-separated text.

The selectors follow the CV page template:
    .container-narrow > header                   name, title, contact row
    .container-narrow > section:nth-of-type(1)   Summary
    .container-narrow > section:nth-of-type(2)   Key Achievements (hidden)
    .container-narrow > section:nth-of-type(3)   Experience
    .container-narrow > section:nth-of-type(4)   Skills
    section with an "Education" heading
    .container-narrow > section:last-of-type     Languages
    .container-narrow > div:last-child           download/print buttons (hidden)
"""

from html import escape
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

# Colour palette of the site theme
COLORS = {
    "ink": "#1A1A1A",  # Primary text, headings
    "graphite": "#4B4B4B",  # Secondary text, body
    "copper": "#B36B47",  # Accent color, highlights
    "beige": "#F4EFE6",  # Background
    "border": "#E5E5E5",  # Subtle borders
}

HIDE_SELECTORS = [
    "body > header",
    "body > footer",
    "header nav",
    "footer",
    "nav",
    "a[download]",
    ".container-narrow > div:last-child",
    ".container-narrow > section:nth-of-type(2)",
]

# Printed skill groups: (label, source categories)
SKILL_GROUPS: List[Tuple[str, List[str]]] = [
    ("Frontend", ["Frontend Engineering", "State Management & Data", "Architecture & Performance"]),
    ("Testing", ["Testing & Quality"]),
    ("DevOps & Cloud", ["DevOps & Tools", "Cloud & Monitoring"]),
    ("Leadership & Other", ["Leadership & Collaboration", "Emerging Tech"]),
]

EXPERIENCE_SECTION = ".container-narrow > section:nth-of-type(3)"
SKILLS_SECTION = ".container-narrow > section:nth-of-type(4)"
ARTICLE_HEADER = ".flex.flex-col.md\\:flex-row"


def parse_style(style: str) -> Dict[str, str]:
    """Parse an inline style attribute into an ordered property map."""
    properties = {}
    for declaration in style.split(";"):
        if ":" in declaration:
            name, _, value = declaration.partition(":")
            properties[name.strip()] = value.strip()
    return properties


def set_style(element: Optional[Tag], **properties: str) -> None:
    """
    Set inline style properties on an element, keeping unrelated ones.

    Keyword names use underscores for hyphens (margin_bottom -> margin-bottom).
    A None element is ignored so optional lookups can be passed straight in.
    """
    if element is None:
        return
    current = parse_style(element.get("style", ""))
    for name, value in properties.items():
        current[name.replace("_", "-")] = value
    element["style"] = "; ".join(f"{k}: {v}" for k, v in current.items())


def hide(element: Optional[Tag]) -> None:
    set_style(element, display="none")


def _texts(container: Tag, selector: str = "span") -> List[str]:
    return [el.get_text(strip=True) for el in container.select(selector) if el.get_text(strip=True)]


def _fragment(soup: BeautifulSoup, html: str) -> List[Tag]:
    """Parse an HTML snippet into nodes that can be appended to soup."""
    return list(BeautifulSoup(html, "html.parser").contents)


def _replace_children(soup: BeautifulSoup, element: Tag, html: str) -> None:
    element.clear()
    for node in _fragment(soup, html):
        element.append(node)


def _hide_chrome(soup: BeautifulSoup) -> None:
    for selector in HIDE_SELECTORS:
        for element in soup.select(selector):
            hide(element)


def _hide_older_experience(soup: BeautifulSoup, max_experience: int) -> None:
    for article in soup.select(f"{EXPERIENCE_SECTION} article")[max_experience:]:
        hide(article)


def _size_icons(soup: BeautifulSoup) -> None:
    for svg in soup.find_all("svg"):
        set_style(svg, width="0.75rem", height="0.75rem", min_width="0.75rem", min_height="0.75rem")


def _compact_header(soup: BeautifulSoup) -> None:
    header = soup.select_one(".container-narrow > header")
    if header is None:
        return

    set_style(header, margin_bottom="0.75rem", padding_bottom="0.5rem")
    set_style(header.find("h1"), font_size="1.75rem", margin_bottom="0.25rem")
    set_style(header.select_one("p.text-xl, p.text-2xl"), font_size="1rem", margin_bottom="0.5rem")

    contact_row = header.select_one(".flex.flex-wrap.gap-4")
    if contact_row is None:
        return

    set_style(contact_row, gap="0.75rem", font_size="0.8rem")
    for item in contact_row.select(".flex.items-center"):
        set_style(item, display="inline-flex", align_items="center", gap="0.25rem")
        set_style(
            item.find("svg"),
            width="0.85rem",
            height="0.85rem",
            min_width="0.85rem",
            min_height="0.85rem",
            flex_shrink="0",
            vertical_align="middle",
        )


def _hide_durations(soup: BeautifulSoup) -> None:
    # Recruiters can do the math
    for element in soup.select(".text-xs"):
        text = element.get_text()
        if "month" in text or "year" in text:
            hide(element)


def _skill_line(label: str, skills: List[str], label_size: str = "0.8rem") -> str:
    return (
        '<div style="margin-bottom: 0.3rem;">'
        f'<strong style="font-size: {label_size}; color: {COLORS["copper"]};">{escape(label)}:</strong>'
        f'<span style="font-size: 0.75rem; color: {COLORS["graphite"]};"> {escape(", ".join(skills))}</span>'
        "</div>"
    )


def _merge_skill_categories(soup: BeautifulSoup) -> None:
    skills_section = soup.select_one(SKILLS_SECTION)
    if skills_section is None:
        return

    skill_groups = skills_section.select_one(".space-y-6")
    if skill_groups is not None:
        categories: Dict[str, List[str]] = {}
        for div in skill_groups.find_all("div", recursive=False):
            h3 = div.find("h3")
            name = h3.get_text(strip=True) if h3 else ""
            categories[name] = _texts(div)

        lines = []
        for label, sources in SKILL_GROUPS:
            merged = [skill for source in sources for skill in categories.get(source, [])]
            if merged:
                lines.append(_skill_line(label, merged))

        _replace_children(soup, skill_groups, "".join(lines))
        set_style(skill_groups, display="block")

    soft_skills_div = skills_section.select_one(".space-y-6 + div")
    if soft_skills_div is not None:
        h3 = soft_skills_div.find("h3")
        if h3 is not None and "Soft" in h3.get_text():
            soft_skills = _texts(soft_skills_div)
            if soft_skills:
                _replace_children(soup, soft_skills_div, _skill_line("Soft Skills", soft_skills))


def _tighten_experience(soup: BeautifulSoup) -> None:
    section = soup.select_one(EXPERIENCE_SECTION)
    if section is None:
        return

    entries = section.select_one(".space-y-12")
    if entries is not None:
        set_style(entries, gap="0")
        for article in entries.find_all("article"):
            set_style(
                article,
                margin_bottom="0.6rem",
                padding_bottom="0.4rem",
                border_bottom=f"1px solid {COLORS['border']}",
            )

    for article in section.find_all("article"):
        set_style(article.select_one(ARTICLE_HEADER), margin_bottom="0.15rem", gap="0.25rem")
        set_style(article.find("h3"), font_size="0.95rem", margin_bottom="0", line_height="1.2")
        set_style(article.select_one("p.text-copper"), font_size="0.8rem", margin_bottom="0")
        set_style(article.select_one(".text-graphite.text-sm"), font_size="0.75rem", white_space="nowrap")
        set_style(
            article.select_one("p.text-graphite.mb-4"),
            font_size="0.8rem",
            margin_bottom="0.15rem",
            margin_top="0.1rem",
            line_height="1.3",
        )

    for ul in section.find_all("ul"):
        set_style(ul, margin_top="0.1rem", margin_bottom="0.15rem", padding_left="1rem")
    for li in section.find_all("li"):
        set_style(li, margin_bottom="0.05rem", font_size="0.8rem", line_height="1.3")

    # Skill pills become one italic comma-separated line
    for container in section.select(".flex.flex-wrap.gap-2"):
        skills = _texts(container)
        if skills:
            _replace_children(
                soup,
                container,
                f'<span style="font-size: 0.7rem; color: {COLORS["graphite"]}; font-style: italic;">'
                f'{escape(", ".join(skills))}</span>',
            )
            set_style(container, display="block", margin_top="0.1rem")


def _shrink_section_headers(soup: BeautifulSoup) -> None:
    for h2 in soup.select(".container-narrow > section > h2"):
        set_style(h2, font_size="1.1rem", margin_bottom="0.5rem", padding_bottom="0.25rem")


def _inline_languages(soup: BeautifulSoup) -> None:
    section = soup.select_one(".container-narrow > section:last-of-type")
    if section is None:
        return
    h2 = section.find("h2")
    if h2 is None or "Languages" not in h2.get_text():
        return

    grid = section.select_one(".grid")
    if grid is not None:
        languages = []
        for div in grid.find_all("div", recursive=False):
            name = div.select_one("p.font-medium")
            proficiency = div.select_one("p.text-sm")
            name_text = name.get_text(strip=True) if name else ""
            proficiency_text = proficiency.get_text(strip=True) if proficiency else ""
            if name_text:
                languages.append(f"{name_text} ({proficiency_text})")

        if languages:
            _replace_children(
                soup,
                grid,
                f'<span style="font-size: 0.8rem; color: {COLORS["graphite"]};">'
                f'{escape(" · ".join(languages))}</span>',
            )
            set_style(grid, display="block")

    set_style(section, margin_bottom="0.5rem")
    set_style(h2, margin_bottom="0.3rem")


def _tighten_education(soup: BeautifulSoup) -> None:
    for section in soup.select(".container-narrow > section"):
        h2 = section.find("h2")
        if h2 is None or "Education" not in h2.get_text():
            continue

        entries = section.select_one(".space-y-8")
        if entries is not None:
            set_style(entries, gap="0")
            for article in entries.find_all("article"):
                set_style(
                    article,
                    margin_bottom="0.5rem",
                    padding_bottom="0.3rem",
                    border_bottom=f"1px solid {COLORS['border']}",
                )

        # Only degree, institution and dates are printed
        for article in section.find_all("article"):
            set_style(article.select_one(ARTICLE_HEADER), margin_bottom="0", gap="0.2rem")
            set_style(article.find("h3"), font_size="0.85rem", margin_bottom="0", line_height="1.2")
            set_style(article.select_one("p.text-copper"), font_size="0.75rem", margin_bottom="0")
            set_style(article.select_one(".text-graphite.text-sm"), font_size="0.7rem")
            hide(article.select_one("p.text-graphite.mb-4"))
            for ul in article.find_all("ul"):
                hide(ul)


def _plain_text_links(soup: BeautifulSoup) -> None:
    contact_row = soup.select_one(".container-narrow > header .flex.flex-wrap.gap-4")
    if contact_row is None:
        return

    email_link = contact_row.select_one('a[href^="mailto:"]')
    if email_link is not None:
        set_style(email_link, color=COLORS["graphite"], text_decoration="none")
        span = email_link.find("span")
        if span is not None:
            span.string = email_link["href"].replace("mailto:", "")

    for keyword, host in (("linkedin", "linkedin.com"), ("github", "github.com")):
        link = contact_row.select_one(f'a[href*="{keyword}"]')
        if link is None:
            continue
        set_style(link, color=COLORS["graphite"], text_decoration="none")
        span = link.find("span")
        if span is not None:
            # e.g. linkedin.com/in/username
            span.string = f"{host}{urlparse(link['href']).path}"


def _general_spacing(soup: BeautifulSoup) -> None:
    for element in soup.select(".mb-16"):
        set_style(element, margin_bottom="0.75rem")
    for element in soup.select(".mb-12"):
        set_style(element, margin_bottom="0.5rem")
    for p in soup.select(".container-narrow p"):
        set_style(p, margin_bottom="0.25rem", font_size="0.85rem", line_height="1.4")


def _apply_colors(soup: BeautifulSoup) -> None:
    for heading in soup.find_all(["h1", "h2", "h3"]):
        set_style(heading, color=COLORS["ink"])
    for element in soup.select(".text-copper"):
        set_style(element, color=COLORS["copper"])
    for element in soup.select(".text-graphite"):
        set_style(element, color=COLORS["graphite"])
    for li in soup.find_all("li"):
        set_style(li, color=COLORS["graphite"])
    for element in soup.select(".border-b"):
        set_style(element, border_color=COLORS["border"])
    set_style(soup.select_one(".container-narrow > header"), border_color=COLORS["border"])


def apply_print_layout(html: str, max_experience: int = 6) -> str:
    """
    Apply the print edits to a rendered CV page.

    Args:
        html: Built CV page
        max_experience: Number of experience entries kept in print

    Returns:
        Edited HTML document
    """
    soup = BeautifulSoup(html, "html.parser")

    _hide_chrome(soup)
    _hide_older_experience(soup, max_experience)
    _size_icons(soup)
    _compact_header(soup)
    _hide_durations(soup)
    _merge_skill_categories(soup)
    _tighten_experience(soup)
    _shrink_section_headers(soup)
    _inline_languages(soup)
    _tighten_education(soup)
    _plain_text_links(soup)
    _general_spacing(soup)
    _apply_colors(soup)

    return str(soup)
