"""
CV Data Structures

Typed representation of the CV JSON document (src/data/cv.json) and the
loader that validates it. JSON keys are camelCase; attributes are snake_case.

Visibility:
    Experience, education, project and certification entries may carry a
    "visibility" list. An entry with no list, or with "all" in it, is shown
    everywhere. Other tags (e.g. "senior", "frontend") mark entries kept for
    tailored exports only.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from folio.contexts.cv.exceptions import CVNotFoundError, InvalidCVStructureError
from folio.utils.timestamp import parse_cv_date

PROFICIENCY_LEVELS = ("Native", "Fluent", "Professional", "Intermediate", "Basic")


@dataclass
class PersonalInfo:
    name: str
    title: str
    email: str
    location: str
    phone: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None


@dataclass
class Experience:
    """
    One position held.

    Attributes:
        start_date: "YYYY-MM"
        end_date: "YYYY-MM", or None for the current position
    """

    id: str
    title: str
    company: str
    location: str
    start_date: str
    end_date: Optional[str]
    description: str
    achievements: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    visibility: Optional[List[str]] = None


@dataclass
class SkillCategory:
    category: str
    skills: List[str] = field(default_factory=list)


@dataclass
class Skills:
    technical: List[SkillCategory] = field(default_factory=list)
    soft: List[str] = field(default_factory=list)


@dataclass
class Education:
    id: str
    degree: str
    institution: str
    location: str
    start_date: str
    end_date: Optional[str]
    description: Optional[str] = None
    achievements: List[str] = field(default_factory=list)
    visibility: Optional[List[str]] = None


@dataclass
class Project:
    id: str
    name: str
    description: str
    url: Optional[str] = None
    github: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)
    visibility: Optional[List[str]] = None


@dataclass
class Certification:
    id: str
    name: str
    issuer: str
    date: str
    credential_id: Optional[str] = None
    url: Optional[str] = None
    visibility: Optional[List[str]] = None


@dataclass
class Language:
    name: str
    proficiency: str


@dataclass
class CVData:
    """Complete CV document."""

    personal: PersonalInfo
    summary: str
    experience: List[Experience] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    education: List[Education] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)


def is_visible(item: Any, include_hidden: bool = False, audience: Optional[str] = None) -> bool:
    """
    Decide whether a CV entry is shown.

    Args:
        item: Entry with an optional visibility list
        include_hidden: Show every entry regardless of visibility
        audience: Also show entries tagged with this audience (e.g. "senior")

    Returns:
        True if the entry should be included
    """
    if include_hidden:
        return True
    visibility = getattr(item, "visibility", None)
    if visibility is None:
        return True
    if "all" in visibility:
        return True
    return audience is not None and audience in visibility


class _DocumentReader:
    """Reads typed fields out of raw JSON, collecting every problem it finds."""

    def __init__(self):
        self.problems: List[str] = []

    def mapping(self, data: Any, path: str) -> Dict[str, Any]:
        if not isinstance(data, dict):
            self.problems.append(f"{path}: expected an object")
            return {}
        return data

    def string(self, data: Dict[str, Any], key: str, path: str, required: bool = True) -> Optional[str]:
        value = data.get(key)
        if value is None:
            if required:
                self.problems.append(f"{path}.{key}: required field is missing")
                return ""
            return None
        if not isinstance(value, str):
            self.problems.append(f"{path}.{key}: expected a string, got {type(value).__name__}")
            return ""
        return value

    def string_list(
        self, data: Dict[str, Any], key: str, path: str, required: bool = True
    ) -> Optional[List[str]]:
        value = data.get(key)
        if value is None:
            if required:
                self.problems.append(f"{path}.{key}: required field is missing")
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            self.problems.append(f"{path}.{key}: expected a list of strings")
            return None
        return list(value)

    def cv_date(
        self, data: Dict[str, Any], key: str, path: str, required: bool = True, nullable: bool = False
    ) -> Optional[str]:
        if nullable and key in data and data[key] is None:
            return None
        value = self.string(data, key, path, required=required and not nullable)
        if not value:
            return None
        try:
            parse_cv_date(value)
        except ValueError as e:
            self.problems.append(f"{path}.{key}: {e}")
        return value

    def entries(self, data: Dict[str, Any], key: str, required: bool = True) -> List[Dict[str, Any]]:
        value = data.get(key)
        if value is None:
            if required:
                self.problems.append(f"{key}: required field is missing")
            return []
        if not isinstance(value, list):
            self.problems.append(f"{key}: expected a list")
            return []
        return [self.mapping(entry, f"{key}[{i}]") for i, entry in enumerate(value)]


def _read_experience(reader: _DocumentReader, entry: Dict[str, Any], path: str) -> Experience:
    if "endDate" not in entry:
        reader.problems.append(f"{path}.endDate: required field is missing (use null for current)")
    return Experience(
        id=reader.string(entry, "id", path),
        title=reader.string(entry, "title", path),
        company=reader.string(entry, "company", path),
        location=reader.string(entry, "location", path),
        start_date=reader.cv_date(entry, "startDate", path),
        end_date=reader.cv_date(entry, "endDate", path, nullable=True),
        description=reader.string(entry, "description", path),
        achievements=reader.string_list(entry, "achievements", path) or [],
        skills=reader.string_list(entry, "skills", path) or [],
        visibility=reader.string_list(entry, "visibility", path, required=False),
    )


def _read_education(reader: _DocumentReader, entry: Dict[str, Any], path: str) -> Education:
    return Education(
        id=reader.string(entry, "id", path),
        degree=reader.string(entry, "degree", path),
        institution=reader.string(entry, "institution", path),
        location=reader.string(entry, "location", path),
        start_date=reader.cv_date(entry, "startDate", path),
        end_date=reader.cv_date(entry, "endDate", path, nullable=True),
        description=reader.string(entry, "description", path, required=False),
        achievements=reader.string_list(entry, "achievements", path, required=False) or [],
        visibility=reader.string_list(entry, "visibility", path, required=False),
    )


def _read_project(reader: _DocumentReader, entry: Dict[str, Any], path: str) -> Project:
    return Project(
        id=reader.string(entry, "id", path),
        name=reader.string(entry, "name", path),
        description=reader.string(entry, "description", path),
        url=reader.string(entry, "url", path, required=False),
        github=reader.string(entry, "github", path, required=False),
        start_date=reader.cv_date(entry, "startDate", path, required=False),
        end_date=reader.cv_date(entry, "endDate", path, required=False, nullable=True),
        technologies=reader.string_list(entry, "technologies", path) or [],
        highlights=reader.string_list(entry, "highlights", path) or [],
        visibility=reader.string_list(entry, "visibility", path, required=False),
    )


def _read_certification(reader: _DocumentReader, entry: Dict[str, Any], path: str) -> Certification:
    return Certification(
        id=reader.string(entry, "id", path),
        name=reader.string(entry, "name", path),
        issuer=reader.string(entry, "issuer", path),
        date=reader.cv_date(entry, "date", path),
        credential_id=reader.string(entry, "credentialId", path, required=False),
        url=reader.string(entry, "url", path, required=False),
        visibility=reader.string_list(entry, "visibility", path, required=False),
    )


def _read_language(reader: _DocumentReader, entry: Dict[str, Any], path: str) -> Language:
    proficiency = reader.string(entry, "proficiency", path)
    if proficiency and proficiency not in PROFICIENCY_LEVELS:
        reader.problems.append(
            f"{path}.proficiency: '{proficiency}' is not one of {', '.join(PROFICIENCY_LEVELS)}"
        )
    return Language(name=reader.string(entry, "name", path), proficiency=proficiency)


def parse_cv(data: Any, source: Path = None) -> CVData:
    """
    Build a CVData from a decoded JSON document.

    Args:
        data: Decoded JSON
        source: Optional file path for error messages

    Returns:
        Validated CVData

    Raises:
        InvalidCVStructureError: If any required field is missing or malformed
    """
    reader = _DocumentReader()
    root = reader.mapping(data, "$")
    if reader.problems:
        raise InvalidCVStructureError(reader.problems, source)

    raw_personal = reader.mapping(root.get("personal"), "personal")
    personal = PersonalInfo(
        name=reader.string(raw_personal, "name", "personal"),
        title=reader.string(raw_personal, "title", "personal"),
        email=reader.string(raw_personal, "email", "personal"),
        location=reader.string(raw_personal, "location", "personal"),
        phone=reader.string(raw_personal, "phone", "personal", required=False),
        website=reader.string(raw_personal, "website", "personal", required=False),
        linkedin=reader.string(raw_personal, "linkedin", "personal", required=False),
        github=reader.string(raw_personal, "github", "personal", required=False),
    )

    summary = reader.string(root, "summary", "$")

    raw_skills = reader.mapping(root.get("skills"), "skills")
    technical = []
    for i, raw_category in enumerate(reader.entries(raw_skills, "technical")):
        path = f"skills.technical[{i}]"
        technical.append(
            SkillCategory(
                category=reader.string(raw_category, "category", path),
                skills=reader.string_list(raw_category, "skills", path) or [],
            )
        )
    skills = Skills(
        technical=technical,
        soft=reader.string_list(raw_skills, "soft", "skills", required=False) or [],
    )

    cv = CVData(
        personal=personal,
        summary=summary,
        experience=[
            _read_experience(reader, entry, f"experience[{i}]")
            for i, entry in enumerate(reader.entries(root, "experience"))
        ],
        skills=skills,
        education=[
            _read_education(reader, entry, f"education[{i}]")
            for i, entry in enumerate(reader.entries(root, "education"))
        ],
        projects=[
            _read_project(reader, entry, f"projects[{i}]")
            for i, entry in enumerate(reader.entries(root, "projects", required=False))
        ],
        certifications=[
            _read_certification(reader, entry, f"certifications[{i}]")
            for i, entry in enumerate(reader.entries(root, "certifications", required=False))
        ],
        languages=[
            _read_language(reader, entry, f"languages[{i}]")
            for i, entry in enumerate(reader.entries(root, "languages", required=False))
        ],
    )

    if reader.problems:
        raise InvalidCVStructureError(reader.problems, source)

    return cv


def load_cv(path: Path) -> CVData:
    """
    Read and validate the CV JSON document.

    Raises:
        CVNotFoundError: If the file does not exist
        InvalidCVStructureError: If the JSON is malformed or fails validation
    """
    if not path.exists():
        raise CVNotFoundError(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidCVStructureError([f"JSON parse error: {e}"], path) from e

    return parse_cv(data, source=path)
