"""Internal contracts passed between matching-engine stages."""

from models.schemas.ats_breakdown import AtsBreakdown
from models.schemas.skill_match import SkillMatchResult

__all__ = [
    "AtsBreakdown",
    "SkillMatchResult",
]
