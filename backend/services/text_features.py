"""Signal extraction from raw resume / job-description text.

All matching here is plain substring presence on the lowercased text:
no stemming and no word boundaries, so "java" is found inside
"javascript". Downstream scores depend on that behaviour.
"""

import re
from dataclasses import dataclass

from services.skill_lexicon import (
    BULLET_MARKERS,
    COMMON_SKILLS,
    COMMON_TITLES,
    EDUCATION_MARKERS,
    ROLE_SKILLS,
    SECTION_HEADINGS,
)

# "5 years", "3+ yrs", "10yr"
EXP_YEARS_RE = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)

DEFAULT_EXPERIENCE_YEARS = 2
MIN_PARSABLE_CHARS = 50


@dataclass(frozen=True)
class FormattingSignals:
    parsable: bool = False
    has_experience_section: bool = False
    has_education_section: bool = False
    has_skills_section: bool = False
    has_bullets: bool = False

    @property
    def checks_passed(self) -> int:
        return sum((
            self.parsable,
            self.has_experience_section,
            self.has_education_section,
            self.has_skills_section,
            self.has_bullets,
        ))


@dataclass(frozen=True)
class TextFeatures:
    """Everything the scorer needs from one resume."""
    skills: list[str]
    experience_years: int
    education_level: str
    job_titles: list[str]
    formatting: FormattingSignals


def extract_skills(text: str) -> list[str]:
    """Lexicon skills present in ``text``, in lexicon order."""
    lowered = text.lower()
    return [skill for skill in COMMON_SKILLS if skill in lowered]


def extract_experience_years(text: str) -> int:
    """Largest "<n>(+) years" figure in the text, or 2 when none is stated."""
    years = [int(m.group(1)) for m in EXP_YEARS_RE.finditer(text)]
    return max(years) if years else DEFAULT_EXPERIENCE_YEARS


def extract_education_level(text: str) -> str:
    """Highest degree tier mentioned: phd, masters, bachelors or high_school."""
    lowered = text.lower()
    for level, markers in EDUCATION_MARKERS:
        if any(marker in lowered for marker in markers):
            return level
    return "high_school"


def extract_job_titles(text: str) -> list[str]:
    lowered = text.lower()
    return [title for title in COMMON_TITLES if title in lowered]


def extract_required_skills(job_description: str) -> list[str]:
    """Skills a job description asks for.

    Lexicon hits come first, then skills implied by any role named in the
    text. If both come up empty, the first role whose leading word
    ("frontend", "data", ...) appears is used wholesale.
    """
    jd = job_description.lower()
    required = extract_skills(jd)
    seen = set(required)

    for role, skills in ROLE_SKILLS.items():
        if role not in jd:
            continue
        for skill in skills:
            if skill not in seen:
                required.append(skill)
                seen.add(skill)

    if not required:
        for role, skills in ROLE_SKILLS.items():
            if role.split(" ")[0] in jd:
                return list(skills)

    return required


def detect_formatting(text: str) -> FormattingSignals:
    lowered = text.lower()

    def has_heading(section: str) -> bool:
        return any(h in lowered for h in SECTION_HEADINGS[section])

    return FormattingSignals(
        parsable=len(text) > MIN_PARSABLE_CHARS,
        has_experience_section=has_heading("experience"),
        has_education_section=has_heading("education"),
        has_skills_section=has_heading("skills"),
        has_bullets=any(marker in lowered for marker in BULLET_MARKERS),
    )


def extract_features(text: str) -> TextFeatures:
    return TextFeatures(
        skills=extract_skills(text),
        experience_years=extract_experience_years(text),
        education_level=extract_education_level(text),
        job_titles=extract_job_titles(text),
        formatting=detect_formatting(text),
    )
