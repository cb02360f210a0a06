"""
Site Context

Responsibilities:
- Renders the CV page from the CV document
- Renders blog post pages and the blog index from Markdown posts
- Generates the RSS feed

Owns: HTML/XML templates, dist/ layout
Never: Edits content files or prints PDFs
"""

from folio.contexts.site.builder import BuildResult, build_site
from folio.contexts.site.renderer import SiteRenderer
from folio.contexts.site.rss import build_rss

__all__ = ["SiteRenderer", "build_rss", "build_site", "BuildResult"]
