"""
Site Renderer

Renders the CV page and blog pages from Jinja2 templates stored in
folio/contexts/site/templates/. The CV page markup (class names, section
order) is what the print layout in the rendering context expects.
"""

from datetime import date, datetime
from pathlib import Path
from typing import List

import markdown
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from markupsafe import Markup
from omegaconf import DictConfig

from folio.contexts.content.posts import Post
from folio.contexts.cv.cv_data_structure import CVData, is_visible
from folio.utils.config import site_url
from folio.utils.timestamp import MONTH_ABBREVIATIONS, format_cv_date, format_date_range, format_duration

TEMPLATES_PATH = Path(__file__).parent / "templates"

# Extensions used when converting post bodies
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]

# Number of achievements pulled into the CV's Key Achievements section
KEY_ACHIEVEMENTS_COUNT = 3


def display_date(value: datetime) -> str:
    """Format a post date for display (e.g., "Jan 15, 2024")."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


class SiteRenderer:
    """
    Renders site pages with Jinja2.

    Templates are loaded from TEMPLATES_PATH and cached by the Jinja2
    environment. Autoescaping is on for every template.
    """

    def __init__(self, config: DictConfig, templates_path: Path = None, today: date = None):
        """
        Args:
            config: Site config
            templates_path: Template directory (defaults to the bundled templates)
            today: Reference date for "current position" durations (defaults to today)
        """
        self.config = config
        self.templates_path = templates_path or TEMPLATES_PATH
        self.today = today or date.today()

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["cv_date"] = format_cv_date
        self.env.filters["date_range"] = format_date_range
        self.env.filters["duration"] = lambda start, end: format_duration(start, end, self.today)
        self.env.filters["display_date"] = display_date
        self.env.globals.update(
            config=config,
            site_url=site_url(config),
            year=self.today.year,
        )

    def get_template(self, name: str) -> Template:
        return self.env.get_template(name)

    def render_cv_page(self, cv: CVData) -> str:
        """Render the public CV page (entries visible to everyone only)."""
        experience = [exp for exp in cv.experience if is_visible(exp)]
        key_achievements = [
            exp.achievements[0] for exp in experience if exp.achievements
        ][:KEY_ACHIEVEMENTS_COUNT]

        return self.get_template("cv.html.jinja").render(
            cv=cv,
            experience=experience,
            key_achievements=key_achievements,
            education=[edu for edu in cv.education if is_visible(edu)],
            projects=[proj for proj in cv.projects if is_visible(proj)],
            certifications=[cert for cert in cv.certifications if is_visible(cert)],
        )

    def render_post_body(self, post: Post) -> Markup:
        """Convert a post's Markdown body to HTML."""
        html = markdown.markdown(post.body, extensions=MARKDOWN_EXTENSIONS, output_format="html")
        return Markup(html)

    def canonical_url(self, post: Post) -> str:
        return post.frontmatter.canonical_url or f"{site_url(self.config)}/blog/{post.slug}/"

    def render_post_page(self, post: Post) -> str:
        return self.get_template("post.html.jinja").render(
            post=post,
            body_html=self.render_post_body(post),
            canonical_url=self.canonical_url(post),
        )

    def render_blog_index(self, posts: List[Post]) -> str:
        return self.get_template("blog_index.html.jinja").render(posts=posts)

