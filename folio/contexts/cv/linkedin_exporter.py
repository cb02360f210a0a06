"""
CV LinkedIn Export

Formats the CV document as plain text sections that can be pasted into a
LinkedIn profile. Text over LinkedIn's character limits is kept as is and a
warning reports how much to cut.

LinkedIn character limits:
    - Headline: 220 characters
    - About/Summary: 2,600 characters
    - Experience description: 2,000 characters per role
"""

from typing import List, Optional

from omegaconf import DictConfig

from folio.contexts.cv.cv_data_structure import CVData, is_visible
from folio.contexts.cv.logger import log_limit_exceeded

HEADLINE_LIMIT = 220
ABOUT_LIMIT = 2600
EXPERIENCE_LIMIT = 2000

HEAVY_RULE = "═" * 50
LIGHT_RULE = "─" * 50

# Section selector names; "summary" and "about" are the same section
SECTIONS = ("headline", "about", "summary", "experience", "skills", "education")


def check_limit(text: str, limit: int, label: str) -> str:
    """Return text unchanged, warning when it is longer than the limit."""
    if len(text) > limit:
        log_limit_exceeded(label, len(text), limit)
    return text


def generate_headline(cv: CVData, config: DictConfig) -> str:
    """Title | key skills | value proposition."""
    parts = [cv.personal.title]
    keywords = list(config.linkedin.headline_keywords)
    if keywords:
        parts.append(", ".join(keywords))
    if config.linkedin.headline_tagline:
        parts.append(config.linkedin.headline_tagline)
    return check_limit(" | ".join(parts), HEADLINE_LIMIT, "Headline")


def generate_about(cv: CVData, config: DictConfig) -> str:
    """Summary followed by a short Core Expertise list and contact lines."""
    lines = [cv.summary, "", "Core Expertise:"]

    categories = {c.category: c for c in cv.skills.technical}
    for mapping in config.linkedin.about_categories:
        category = categories.get(mapping.category)
        if category is not None:
            top_skills = category.skills[: mapping.limit]
            lines.append(f"• {mapping.label}: {', '.join(top_skills)}")

    lines.append("")
    lines.append(f"📧 {cv.personal.email}")
    if cv.personal.github:
        lines.append(f"💻 {cv.personal.github}")

    return check_limit("\n".join(lines), ABOUT_LIMIT, "About section")


def generate_experience(cv: CVData) -> str:
    """One block per visible role, each checked against the per-role limit."""
    lines = []

    for exp in cv.experience:
        if not is_visible(exp):
            continue

        lines.append(HEAVY_RULE)
        lines.append(exp.title.upper())
        lines.append(f"{exp.company} • {exp.location}")
        lines.append(LIGHT_RULE)
        lines.append("")

        role_lines = [exp.description, ""]
        if exp.achievements:
            role_lines.append("Key Achievements:")
            role_lines.extend(f"• {achievement}" for achievement in exp.achievements)
        if exp.skills:
            role_lines.append("")
            role_lines.append(f"Technologies: {', '.join(exp.skills)}")

        role_text = "\n".join(role_lines)
        lines.append(check_limit(role_text, EXPERIENCE_LIMIT, f"{exp.company} - {exp.title}"))
        lines.append("")

    return "\n".join(lines)


def generate_skills(cv: CVData) -> str:
    """Flat, deduplicated, sorted skill list for the LinkedIn Skills section."""
    unique_skills = sorted({skill for category in cv.skills.technical for skill in category.skills})

    lines = [
        "SKILLS FOR LINKEDIN",
        HEAVY_RULE,
        "Copy these to your LinkedIn Skills section:",
        "",
        "\n".join(unique_skills),
    ]
    return "\n".join(lines)


def generate_education(cv: CVData) -> str:
    lines = ["EDUCATION", HEAVY_RULE]

    for edu in cv.education:
        if not is_visible(edu):
            continue
        lines.append("")
        lines.append(edu.degree)
        lines.append(edu.institution)
        lines.append(f"{edu.start_date} - {edu.end_date or 'Present'}")
        if edu.description:
            lines.append(edu.description)

    return "\n".join(lines)


def export_to_linkedin(cv: CVData, config: DictConfig, section: Optional[str] = None) -> str:
    """
    Render the LinkedIn export.

    Args:
        cv: CV document
        config: Site config (linkedin.* settings)
        section: One of SECTIONS, or None for every section

    Returns:
        Export text including banner and usage tips

    Raises:
        ValueError: If section is not a known section name
    """
    if section is not None:
        section = section.lower()
        if section not in SECTIONS:
            raise ValueError(f"Unknown section '{section}'. Valid sections: {', '.join(SECTIONS)}")

    def wanted(*names: str) -> bool:
        return section is None or section in names

    lines: List[str] = [
        "╔══════════════════════════════════════════════════╗",
        "║           LINKEDIN CV EXPORT                     ║",
        "╚══════════════════════════════════════════════════╝",
        "",
    ]

    if wanted("headline"):
        lines.extend(["HEADLINE (220 chars max)", HEAVY_RULE, generate_headline(cv, config), ""])

    if wanted("summary", "about"):
        lines.extend(["ABOUT / SUMMARY (2,600 chars max)", HEAVY_RULE, generate_about(cv, config), ""])

    if wanted("experience"):
        lines.extend(["EXPERIENCE (2,000 chars per role)", generate_experience(cv)])

    if wanted("skills"):
        lines.extend([generate_skills(cv), ""])

    if wanted("education"):
        lines.extend([generate_education(cv), ""])

    lines.extend(
        [
            "",
            HEAVY_RULE,
            "💡 Tip: Use specific sections with:",
            "   export_linkedin.py headline",
            "   export_linkedin.py about",
            "   export_linkedin.py experience",
            "   export_linkedin.py skills",
            "   export_linkedin.py education",
        ]
    )

    return "\n".join(lines)
