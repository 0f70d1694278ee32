"""Hosted-model backend: one Gemini call produces the whole AnalysisResult.

This is an alternative to the local matching engine, not a supplement:
results from the two backends are never merged.
"""

import logging
from typing import Any

from pydantic import ValidationError

from models.responses import AnalysisResult
from services import gemini_client, prompt_builder
from services.base import AnalysisBackend
from services.gemini_client import GeminiResponseError
from services.text_features import extract_education_level

logger = logging.getLogger(__name__)

_DEGREE_ABBREVIATIONS = {
    "ms": "masters",
    "m.s": "masters",
    "m.s.": "masters",
    "ma": "masters",
    "m.a": "masters",
    "m.a.": "masters",
    "bs": "bachelors",
    "b.s": "bachelors",
    "b.s.": "bachelors",
    "ba": "bachelors",
    "b.a": "bachelors",
    "b.a.": "bachelors",
    "doctor of philosophy": "phd",
}


def _normalize_education(value: Any) -> str:
    """Map a free-form degree answer onto the four education tiers."""
    level = str(value or "").strip().lower()
    if level in _DEGREE_ABBREVIATIONS:
        return _DEGREE_ABBREVIATIONS[level]
    return extract_education_level(level)


def _to_int(value: Any) -> int:
    try:
        return max(0, round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return 0


def heuristic_match_score(ats_score: int, skill_count: int, experience_years: int) -> int:
    """Fallback job-fit estimate when the model omits job_match_score."""
    return min(100, round(ats_score * 0.4 + skill_count * 2 + experience_years * 3))


def normalize_analysis(data: dict) -> dict:
    """Coerce a raw model answer into AnalysisResult field names and types."""
    gaps = data.get("skill_gaps") or []
    recs = data.get("learning_recommendations") or []
    skills = data.get("extracted_skills") or []

    ats_score = min(100, _to_int(data.get("ats_score")))
    experience_years = _to_int(data.get("experience_years"))

    job_match = data.get("job_match_score")
    if isinstance(job_match, (int, float)) and not isinstance(job_match, bool):
        match_score = min(100, _to_int(job_match))
    else:
        match_score = heuristic_match_score(ats_score, len(skills), experience_years)

    return {
        "extracted_skills": skills,
        "experience_years": experience_years,
        "education_level": _normalize_education(data.get("education_level")),
        "job_titles": data.get("job_titles") or [],
        "match_score": match_score,
        "skill_gaps": [
            {"skill": g.get("skill") or g.get("skill_name"), "importance": g.get("importance") or "medium"}
            for g in gaps
        ],
        "learning_recommendations": [
            {"course": r.get("course") or r.get("course_name"), "platform": r.get("platform"), "url": r.get("url")}
            for r in recs
        ],
        "project_suggestions": data.get("project_suggestions") or [],
        "ats_score": ats_score,
        "predicted_roles": data.get("predicted_roles") or [],
        "matching_skills": data.get("matching_skills") or [],
        "missing_skills": data.get("missing_skills") or [],
        "extra_skills": data.get("extra_skills") or [],
        "scoring_method": "llm",
    }


class GeminiAnalyzer(AnalysisBackend):
    name = "gemini"

    async def analyze(self, resume_text: str, job_description: str = "") -> AnalysisResult:
        prompt = prompt_builder.build_analysis_prompt(resume_text, job_description)
        data = await gemini_client.generate_json(prompt)
        logger.info("AI analysis complete")

        try:
            return AnalysisResult(**normalize_analysis(data))
        except (ValidationError, AttributeError, TypeError, OverflowError) as e:
            logger.error("Failed to parse AI response: %s", e)
            raise GeminiResponseError("Invalid AI response format") from e
