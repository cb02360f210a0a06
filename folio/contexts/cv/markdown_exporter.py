"""
CV Markdown Export

Formats the CV document as clean Markdown, suitable for tailoring with an
LLM or by hand and then printing with the tailored PDF generator.
"""

from typing import List, Optional

from folio.contexts.cv.cv_data_structure import CVData, is_visible
from folio.utils.timestamp import format_date_range


def _format_header(cv: CVData) -> List[str]:
    personal = cv.personal
    lines = [
        f"# {personal.name}",
        f"**{personal.title}**",
        "",
        f"{personal.location} | {personal.email}",
    ]
    if personal.linkedin:
        lines.append(f"LinkedIn: {personal.linkedin}")
    if personal.github:
        lines.append(f"GitHub: {personal.github}")
    lines.append("")
    return lines


def _format_experience(cv: CVData, include_hidden: bool, audience: Optional[str]) -> List[str]:
    lines = ["## Experience", ""]

    for exp in cv.experience:
        if not is_visible(exp, include_hidden, audience):
            continue

        lines.append(f"### {exp.title} at {exp.company}")
        lines.append(f"*{exp.location} | {format_date_range(exp.start_date, exp.end_date)}*")
        lines.append("")
        lines.append(exp.description)
        lines.append("")

        if exp.achievements:
            lines.append("**Key Achievements:**")
            lines.extend(f"- {achievement}" for achievement in exp.achievements)
            lines.append("")

        if exp.skills:
            lines.append(f"**Technologies:** {', '.join(exp.skills)}")
            lines.append("")

    return lines


def _format_skills(cv: CVData) -> List[str]:
    lines = ["## Skills", ""]

    for category in cv.skills.technical:
        lines.append(f"**{category.category}:** {', '.join(category.skills)}")
        lines.append("")

    if cv.skills.soft:
        lines.append(f"**Soft Skills:** {', '.join(cv.skills.soft)}")
        lines.append("")

    return lines


def _format_education(cv: CVData, include_hidden: bool, audience: Optional[str]) -> List[str]:
    lines = ["## Education", ""]

    for edu in cv.education:
        if not is_visible(edu, include_hidden, audience):
            continue

        # Education keeps raw YYYY-MM dates
        dates = f"{edu.start_date} - {edu.end_date or 'Present'}"
        lines.append(f"### {edu.degree}")
        lines.append(f"*{edu.institution}, {edu.location} | {dates}*")
        if edu.description:
            lines.append("")
            lines.append(edu.description)
        lines.append("")

    return lines


def _format_projects(cv: CVData, include_hidden: bool, audience: Optional[str]) -> List[str]:
    visible = [p for p in cv.projects if is_visible(p, include_hidden, audience)]
    if not visible:
        return []

    lines = ["## Projects", ""]
    for proj in visible:
        lines.append(f"### {proj.name}")
        lines.append("")
        lines.append(proj.description)
        lines.append("")

        if proj.url:
            lines.append(f"**URL:** {proj.url}")
        if proj.github:
            lines.append(f"**GitHub:** {proj.github}")

        if proj.highlights:
            lines.append("")
            lines.append("**Highlights:**")
            lines.extend(f"- {highlight}" for highlight in proj.highlights)

        if proj.technologies:
            lines.append("")
            lines.append(f"**Technologies:** {', '.join(proj.technologies)}")
        lines.append("")

    return lines


def _format_certifications(cv: CVData, include_hidden: bool, audience: Optional[str]) -> List[str]:
    visible = [c for c in cv.certifications if is_visible(c, include_hidden, audience)]
    if not visible:
        return []

    lines = ["## Certifications", ""]
    for cert in visible:
        line = f"- **{cert.name}** - {cert.issuer} ({cert.date})"
        if cert.credential_id:
            line += f", Credential ID {cert.credential_id}"
        lines.append(line)
    lines.append("")
    return lines


def _format_languages(cv: CVData) -> List[str]:
    if not cv.languages:
        return []

    lines = ["## Languages", ""]
    lines.extend(f"- **{lang.name}:** {lang.proficiency}" for lang in cv.languages)
    lines.append("")
    return lines


def export_to_markdown(
    cv: CVData, include_hidden: bool = False, audience: Optional[str] = None
) -> str:
    """
    Render the CV as Markdown.

    Sections, in order: header, Summary, Experience, Skills, Education,
    Projects and Certifications (only when something is visible), Languages.

    Args:
        cv: CV document
        include_hidden: Include entries regardless of their visibility list
        audience: Also include entries tagged for this audience

    Returns:
        Markdown text, the section lines joined with "\n" and nothing appended
    """
    lines: List[str] = []
    lines.extend(_format_header(cv))
    lines.extend(["## Summary", "", cv.summary, ""])
    lines.extend(_format_experience(cv, include_hidden, audience))
    lines.extend(_format_skills(cv))
    lines.extend(_format_education(cv, include_hidden, audience))
    lines.extend(_format_projects(cv, include_hidden, audience))
    lines.extend(_format_certifications(cv, include_hidden, audience))
    lines.extend(_format_languages(cv))

    return "\n".join(lines)
