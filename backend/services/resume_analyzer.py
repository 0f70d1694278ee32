"""Local matching engine: lexicon extraction + embedding skill matching + ATS scoring.

Pipeline:
1. Feature extraction on the resume (skills, years, education, titles, formatting)
2. Required-skill extraction from the JD (lexicon + role profiles)
3. Semantic skill matching (embeddings, exact-match fallback)
4. Five-factor ATS scoring and the job-fit match score
5. Gaps, learning links, project ideas and predicted roles

Without a job description, steps 2-4 are skipped and fixed default
scores are reported.
"""

import logging
import threading

from config import settings
from models.responses import AnalysisResult
from services import recommendations
from services.base import AnalysisBackend
from services.embedding import EmbeddingProvider
from services.scorer import DEFAULT_ATS_SCORE, DEFAULT_MATCH_SCORE, AtsScorer, job_fit_score
from services.skill_lexicon import display_skill, display_title
from services.skill_matcher import SIMILARITY_THRESHOLD, SkillMatcher
from services.text_features import extract_features, extract_required_skills

logger = logging.getLogger(__name__)


class ResumeAnalyzer(AnalysisBackend):
    name = "local"

    def __init__(
        self,
        provider: EmbeddingProvider,
        threshold: float = SIMILARITY_THRESHOLD,
    ) -> None:
        self.provider = provider
        self.matcher = SkillMatcher(provider, threshold=threshold)
        self.scorer = AtsScorer(provider)

    async def analyze(self, resume_text: str, job_description: str = "") -> AnalysisResult:
        features = extract_features(resume_text)
        has_jd = bool(job_description.strip())

        breakdown = None
        degraded = False
        if has_jd:
            required = extract_required_skills(job_description)
            skills = await self.matcher.match(features.skills, required)
            breakdown, experience_degraded = await self.scorer.score(
                resume_text,
                job_description,
                required,
                skills,
                features.education_level,
                features.formatting,
            )
            degraded = skills.degraded or experience_degraded
            matched, missing, extra = skills.matched, skills.missing, skills.extra
            ats_score = breakdown.final_ats_score
            match_score = job_fit_score(breakdown)
            scoring_method = "exact_fallback" if skills.degraded else "semantic"
        else:
            matched, missing, extra = [], [], list(features.skills)
            ats_score = DEFAULT_ATS_SCORE
            match_score = DEFAULT_MATCH_SCORE
            scoring_method = "no_job_description"

        gaps = recommendations.skill_gaps(missing, features.skills, has_jd)

        logger.info(
            "Analysis complete: ats=%d match=%d method=%s degraded=%s",
            ats_score, match_score, scoring_method, degraded,
        )
        return AnalysisResult(
            extracted_skills=[display_skill(s) for s in features.skills],
            experience_years=features.experience_years,
            education_level=features.education_level,
            job_titles=[display_title(t) for t in features.job_titles],
            match_score=match_score,
            skill_gaps=gaps,
            learning_recommendations=recommendations.learning_recommendations(gaps),
            project_suggestions=recommendations.project_suggestions(),
            ats_score=ats_score,
            ats_breakdown=breakdown,
            predicted_roles=recommendations.predict_roles(features.skills),
            matching_skills=[display_skill(s) for s in matched],
            missing_skills=[display_skill(s) for s in missing],
            extra_skills=[display_skill(s) for s in extra],
            scoring_method=scoring_method,
            degraded=degraded,
        )


_provider: EmbeddingProvider | None = None
_analyzer: ResumeAnalyzer | None = None
_init_lock = threading.Lock()


def get_embedding_provider() -> EmbeddingProvider:
    global _provider
    if _provider is None:
        with _init_lock:
            if _provider is None:
                _provider = EmbeddingProvider(
                    model_name=settings.embedding_model,
                    cache_size=settings.embedding_cache_size,
                )
    return _provider


def get_analyzer() -> ResumeAnalyzer:
    global _analyzer
    if _analyzer is None:
        provider = get_embedding_provider()
        with _init_lock:
            if _analyzer is None:
                _analyzer = ResumeAnalyzer(provider, threshold=settings.skill_match_threshold)
    return _analyzer


async def analyze(resume_text: str, job_description: str = "") -> AnalysisResult:
    """Run the local matching engine with the process-wide analyzer."""
    return await get_analyzer().analyze(resume_text, job_description)
