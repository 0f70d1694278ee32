"""Skill gaps, learning links, project ideas and predicted roles."""

from urllib.parse import quote_plus

from models.responses import LearningRecommendation, ProjectSuggestion, SkillGap
from services.skill_lexicon import (
    BACKEND_SKILLS,
    CLOUD_SKILLS,
    FRONTEND_SKILLS,
    FULL_STACK_DATABASES,
    FULL_STACK_FRAMEWORKS,
    LEARNING_PLATFORMS,
    MODERN_SKILLS,
    PROJECT_SUGGESTIONS,
    display_skill,
)

MAX_SKILL_GAPS = 5
MAX_LEARNING_RECOMMENDATIONS = 8


def skill_gaps(
    missing_skills: list[str],
    extracted_skills: list[str],
    has_job_description: bool,
) -> list[SkillGap]:
    """Missing JD skills (high importance), or generic market gaps without a JD."""
    if has_job_description:
        return [
            SkillGap(skill=display_skill(s), importance="high")
            for s in missing_skills[:MAX_SKILL_GAPS]
        ]
    present = set(extracted_skills)
    generic = [s for s in MODERN_SKILLS if s not in present]
    return [
        SkillGap(skill=display_skill(s), importance="medium")
        for s in generic[:MAX_SKILL_GAPS]
    ]


def learning_recommendations(gaps: list[SkillGap]) -> list[LearningRecommendation]:
    recommendations = []
    for index, gap in enumerate(gaps[:MAX_LEARNING_RECOMMENDATIONS]):
        platform, search_url = LEARNING_PLATFORMS[index % len(LEARNING_PLATFORMS)]
        recommendations.append(LearningRecommendation(
            course=f"Complete {gap.skill} Course",
            platform=platform,
            url=f"{search_url}{quote_plus(gap.skill.lower())}",
        ))
    return recommendations


def project_suggestions() -> list[ProjectSuggestion]:
    return [ProjectSuggestion(**p) for p in PROJECT_SUGGESTIONS]


def predict_roles(extracted_skills: list[str]) -> list[str]:
    skills = set(extracted_skills)
    roles = []
    if skills & FRONTEND_SKILLS:
        roles.append("Frontend Developer")
    if skills & BACKEND_SKILLS:
        roles.append("Backend Developer")
    if skills & FULL_STACK_FRAMEWORKS and skills & FULL_STACK_DATABASES:
        roles.append("Full Stack Developer")
    if skills & CLOUD_SKILLS:
        roles.append("DevOps Engineer")
    return roles or ["Software Engineer", "Developer"]
