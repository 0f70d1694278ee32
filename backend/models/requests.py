from pydantic import BaseModel, Field

from config import settings


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )
    job_description: str = Field(
        "", max_length=settings.max_job_description_chars, description="Job description text"
    )


class AnalyzeResumeRequest(BaseModel):
    """Body of the stored-resume analysis call; field names follow the web client.

    Lengths are checked in the handler so that violations answer with the
    route's ``{"error": ...}`` shape.
    """
    resume_id: str | int | None = Field(None, alias="resumeId")
    resume_text: str | None = Field(None, alias="resumeText")
    job_description: str | None = Field(None, alias="jobDescription")

    model_config = {"populate_by_name": True}
