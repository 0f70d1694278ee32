"""Weighted ATS sub-scores."""

from pydantic import BaseModel, Field, computed_field

SKILL_MATCH_WEIGHT = 40
KEYWORD_MATCH_WEIGHT = 25
EXPERIENCE_MATCH_WEIGHT = 15
EDUCATION_MATCH_WEIGHT = 10
FORMATTING_WEIGHT = 10

# Only the job-fit factors count toward the match score
JOB_FIT_WEIGHT = SKILL_MATCH_WEIGHT + EXPERIENCE_MATCH_WEIGHT + EDUCATION_MATCH_WEIGHT


class AtsBreakdown(BaseModel):
    """Five sub-scores, each bounded by its weight; together at most 100."""
    skill_match: float = Field(0.0, ge=0, le=SKILL_MATCH_WEIGHT)
    keyword_match: float = Field(0.0, ge=0, le=KEYWORD_MATCH_WEIGHT)
    experience_match: float = Field(0.0, ge=0, le=EXPERIENCE_MATCH_WEIGHT)
    education_match: float = Field(0.0, ge=0, le=EDUCATION_MATCH_WEIGHT)
    formatting: float = Field(0.0, ge=0, le=FORMATTING_WEIGHT)

    model_config = {"frozen": True}

    @computed_field
    @property
    def final_ats_score(self) -> int:
        return round(
            self.skill_match
            + self.keyword_match
            + self.experience_match
            + self.education_match
            + self.formatting
        )
