"""Semantic skill matching between job-description and resume skills.

Every JD skill is compared against every resume skill. Identical strings
short-circuit to similarity 1.0; otherwise the embedding cosine decides.
The first resume skill reaching the best similarity wins, and a JD skill
counts as matched when that best similarity clears the threshold; an
identical string always matches.

Falls back to exact string equality when the embedding provider is down.
"""

import logging
from typing import Sequence

from models.schemas.skill_match import SkillMatchResult
from services.embedding import EmbeddingProvider

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.65


class SkillMatcher:
    def __init__(
        self,
        provider: EmbeddingProvider,
        threshold: float = SIMILARITY_THRESHOLD,
    ) -> None:
        self.provider = provider
        self.threshold = threshold

    async def match(
        self,
        resume_skills: Sequence[str],
        required_skills: Sequence[str],
    ) -> SkillMatchResult:
        resume_list = list(resume_skills)
        required_list = list(required_skills)

        if not required_list:
            return SkillMatchResult(extra=resume_list)

        embedded = await self.provider.try_embed_batch(resume_list + required_list)
        if embedded.degraded:
            logger.warning(
                "Semantic matching unavailable, falling back to exact match: %s",
                embedded.reason,
            )
            return self._exact_match(resume_list, required_list, embedded.reason)

        resume_vecs = embedded.vectors[:len(resume_list)]
        required_vecs = embedded.vectors[len(resume_list):]

        matched: list[str] = []
        missing: list[str] = []
        similarities: dict[str, float] = {}
        consumed: set[int] = set()

        for i, jd_skill in enumerate(required_list):
            best_score = 0.0
            best_idx = -1
            exact = False

            for j, resume_skill in enumerate(resume_list):
                if jd_skill == resume_skill:
                    best_score = 1.0
                    best_idx = j
                    exact = True
                    break
                score = self.provider.similarity(required_vecs[i], resume_vecs[j])
                if score > best_score:
                    best_score = score
                    best_idx = j

            if exact or best_score >= self.threshold:
                matched.append(jd_skill)
                similarities[jd_skill] = round(best_score, 4)
                consumed.add(best_idx)
            else:
                missing.append(jd_skill)

        extra = [s for j, s in enumerate(resume_list) if j not in consumed]
        logger.debug(
            "Skill match: %d matched, %d missing, %d extra",
            len(matched), len(missing), len(extra),
        )
        return SkillMatchResult(
            matched=matched,
            missing=missing,
            extra=extra,
            similarities=similarities,
        )

    @staticmethod
    def _exact_match(
        resume_list: list[str],
        required_list: list[str],
        reason: str,
    ) -> SkillMatchResult:
        resume_set = set(resume_list)
        required_set = set(required_list)
        matched = [s for s in required_list if s in resume_set]
        return SkillMatchResult(
            matched=matched,
            missing=[s for s in required_list if s not in resume_set],
            extra=[s for s in resume_list if s not in required_set],
            similarities={s: 1.0 for s in matched},
            degraded=True,
            reason=reason,
        )
