"""
Project configuration.

Paths and credentials come from environment variables (a .env file is loaded
on import). Site-wide settings such as the site URL, feed metadata and the
LinkedIn export layout live in a YAML file merged over DEFAULT_SITE_CONFIG.

Usage:
    from folio.utils.config import CV_JSON_PATH, load_site_config

    config = load_site_config()
    config.site.url  # "https://camarneiro.com"
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))
CV_JSON_PATH = Path(os.getenv("CV_JSON_PATH", PROJECT_ROOT / "src" / "data" / "cv.json"))
BLOG_CONTENT_PATH = Path(os.getenv("BLOG_CONTENT_PATH", PROJECT_ROOT / "src" / "content" / "blog"))
DIST_PATH = Path(os.getenv("DIST_PATH", PROJECT_ROOT / "dist"))
SITE_CONFIG_PATH = Path(os.getenv("SITE_CONFIG_PATH", PROJECT_ROOT / "config" / "site.yaml"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", PROJECT_ROOT / "outs" / "logs"))

DEFAULT_SITE_CONFIG = {
    "site": {
        "url": "https://camarneiro.com",
        "title": "Bruno Camarneiro | Blog",
        "description": (
            "Thoughts on software engineering, architecture, and building great products."
        ),
        "language": "en-us",
    },
    "cv": {
        # Entries beyond this count are hidden in the printed CV
        "print_max_experience": 6,
    },
    "linkedin": {
        "headline_keywords": ["React", "Next.js", "TypeScript"],
        "headline_tagline": "Building high-performance web applications",
        "about_categories": [
            {"category": "Frontend Engineering", "label": "Frontend", "limit": 6},
            {"category": "Testing & Quality", "label": "Testing", "limit": 5},
            {"category": "Architecture & Performance", "label": "Architecture", "limit": 5},
            {"category": "Leadership & Collaboration", "label": "Leadership", "limit": 4},
        ],
    },
}


def load_site_config(config_path: Path = None) -> DictConfig:
    """
    Load site settings, merging the YAML file over the built-in defaults.

    A missing file is not an error: the defaults describe a working site.

    Args:
        config_path: Optional path to site.yaml (defaults to SITE_CONFIG_PATH)

    Returns:
        Merged OmegaConf config
    """
    if config_path is None:
        config_path = SITE_CONFIG_PATH

    defaults = OmegaConf.create(DEFAULT_SITE_CONFIG)
    if not config_path.exists():
        return defaults

    return OmegaConf.merge(defaults, OmegaConf.load(config_path))


def site_url(config: DictConfig) -> str:
    """Site URL without a trailing slash."""
    return str(config.site.url).rstrip("/")
