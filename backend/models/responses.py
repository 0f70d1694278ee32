from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.ats_breakdown import AtsBreakdown

EducationLevel = Literal["high_school", "bachelors", "masters", "phd"]


class SkillGap(BaseModel):
    skill: str
    importance: str  # high | medium | low


class LearningRecommendation(BaseModel):
    course: str
    platform: str
    url: str


class ProjectSuggestion(BaseModel):
    title: str
    description: str
    skills: list[str] = []


class AnalysisResult(BaseModel):
    """Resume analysis for one (resume text, job description) pair."""
    extracted_skills: list[str] = []
    experience_years: int = Field(0, ge=0)
    education_level: EducationLevel = "high_school"
    job_titles: list[str] = []
    match_score: int = Field(0, ge=0, le=100)
    skill_gaps: list[SkillGap] = []
    learning_recommendations: list[LearningRecommendation] = []
    project_suggestions: list[ProjectSuggestion] = []
    ats_score: int = Field(0, ge=0, le=100)
    ats_breakdown: AtsBreakdown | None = None  # absent without a job description
    predicted_roles: list[str] = []
    matching_skills: list[str] = []
    missing_skills: list[str] = []
    extra_skills: list[str] = []
    # Scoring transparency fields
    scoring_method: str = "semantic"  # semantic | exact_fallback | no_job_description | llm
    degraded: bool = False

    model_config = {"frozen": True}


class StoredAnalysis(AnalysisResult):
    """Analysis tagged with the resume it belongs to."""
    resume_id: str


class AnalyzeResumeResponse(BaseModel):
    success: bool = True
    analysis: StoredAnalysis


class ErrorResponse(BaseModel):
    error: str
