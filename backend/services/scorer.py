"""Multi-factor ATS scorer.

Factor ceilings (sum 100):
    skill match 40 | keyword relevance 25 | experience 15 | education 10 | formatting 10

The job-fit match score reuses only the skill, experience and education
factors, rescaled from 65 to 100 and capped at 95.
"""

import logging

from models.schemas.ats_breakdown import (
    EDUCATION_MATCH_WEIGHT,
    EXPERIENCE_MATCH_WEIGHT,
    FORMATTING_WEIGHT,
    JOB_FIT_WEIGHT,
    KEYWORD_MATCH_WEIGHT,
    SKILL_MATCH_WEIGHT,
    AtsBreakdown,
)
from models.schemas.skill_match import SkillMatchResult
from services.embedding import EmbeddingProvider
from services.skill_lexicon import COMMON_CERTIFICATIONS, COMMON_TITLES, DOMAIN_TERMS
from services.text_features import FormattingSignals

logger = logging.getLogger(__name__)

EXPERIENCE_TEXT_CHARS = 1000
EXPERIENCE_FALLBACK_SCORE = 10.0
MAX_MATCH_SCORE = 95

# Defaults reported when there is no job description to score against
DEFAULT_ATS_SCORE = 70
DEFAULT_MATCH_SCORE = 70

# JD degree wording -> resume levels that satisfy it, highest requirement first
_DEGREE_REQUIREMENTS: tuple[tuple[tuple[str, ...], frozenset[str]], ...] = (
    (("phd", "doctorate"), frozenset({"phd"})),
    (("master", "msc", "mba"), frozenset({"phd", "masters"})),
    (("bachelor", "bsc", "degree"), frozenset({"phd", "masters", "bachelors"})),
)


def skill_match_score(skills: SkillMatchResult, required_count: int) -> float:
    return len(skills.matched) / max(required_count, 1) * SKILL_MATCH_WEIGHT


def job_keywords(job_description: str, required_skills: list[str]) -> list[str]:
    """Required skills, plus titles and action verbs the JD mentions."""
    jd = job_description.lower()
    keywords = list(required_skills)
    keywords += [t for t in COMMON_TITLES if t in jd]
    keywords += [t for t in DOMAIN_TERMS if t in jd]
    return list(dict.fromkeys(keywords))


def keyword_match_score(resume_text: str, keywords: list[str]) -> float:
    resume = resume_text.lower()
    found = sum(1 for kw in keywords if kw in resume)
    return found / max(len(keywords), 1) * KEYWORD_MATCH_WEIGHT


def education_match_score(
    resume_text: str,
    job_description: str,
    education_level: str,
) -> float:
    """Share of the JD's degree and certification criteria the resume meets.

    Only the highest degree requirement the JD mentions is counted; each
    named certification adds one more criterion. No criteria -> full marks.
    """
    resume = resume_text.lower()
    jd = job_description.lower()
    total = 0
    met = 0

    for markers, accepted in _DEGREE_REQUIREMENTS:
        if any(m in jd for m in markers):
            total += 1
            if education_level in accepted:
                met += 1
            break

    for cert in COMMON_CERTIFICATIONS:
        if cert in jd:
            total += 1
            if cert in resume:
                met += 1

    if total == 0:
        return float(EDUCATION_MATCH_WEIGHT)
    return met / total * EDUCATION_MATCH_WEIGHT


def formatting_score(signals: FormattingSignals) -> float:
    return signals.checks_passed / 5 * FORMATTING_WEIGHT


def job_fit_score(breakdown: AtsBreakdown) -> int:
    fit = breakdown.skill_match + breakdown.experience_match + breakdown.education_match
    return min(MAX_MATCH_SCORE, round(fit / JOB_FIT_WEIGHT * 100))


class AtsScorer:
    def __init__(self, provider: EmbeddingProvider) -> None:
        self.provider = provider

    async def experience_match_score(self, resume_text: str, job_description: str) -> tuple[float, bool]:
        """Embedding similarity of the two texts' openings, scaled to 0-15.

        Returns (score, degraded); a provider failure yields the fixed
        fallback score with degraded=True.
        """
        embedded = await self.provider.try_embed_batch([
            resume_text[:EXPERIENCE_TEXT_CHARS],
            job_description[:EXPERIENCE_TEXT_CHARS],
        ])
        if embedded.degraded:
            logger.warning("Experience matching failed, using fallback score: %s", embedded.reason)
            return EXPERIENCE_FALLBACK_SCORE, True

        resume_vec, jd_vec = embedded.vectors
        similarity = self.provider.similarity(resume_vec, jd_vec)
        return min(max(0.0, similarity), 1.0) * EXPERIENCE_MATCH_WEIGHT, False

    async def score(
        self,
        resume_text: str,
        job_description: str,
        required_skills: list[str],
        skills: SkillMatchResult,
        education_level: str,
        formatting: FormattingSignals,
    ) -> tuple[AtsBreakdown, bool]:
        """Compute all five factors. Returns (breakdown, experience_degraded)."""
        experience, degraded = await self.experience_match_score(
            resume_text.lower(), job_description.lower()
        )
        breakdown = AtsBreakdown(
            skill_match=skill_match_score(skills, len(required_skills)),
            keyword_match=keyword_match_score(
                resume_text, job_keywords(job_description, required_skills)
            ),
            experience_match=experience,
            education_match=education_match_score(resume_text, job_description, education_level),
            formatting=formatting_score(formatting),
        )
        logger.debug("ATS breakdown: %s", breakdown.model_dump())
        return breakdown, degraded
