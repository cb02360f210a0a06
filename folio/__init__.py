"""
FOLIO - Personal website, blog and CV publishing toolkit

Renders a CV page and blog posts from structured data, exports the CV to
Markdown and LinkedIn text, prints pages to PDF through a headless browser,
and cross-posts articles to DEV.to.

Architecture:
- Content Context: Blog post files, frontmatter schema and write-back
- CV Context: CV JSON document, visibility rules and text exporters
- Site Context: CV page, blog pages and RSS feed rendering
- Rendering Context: Print layout and PDF generation
- Crosspost Context: Republishing posts to DEV.to
"""

__version__ = "0.1.0"
