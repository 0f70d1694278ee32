"""Abstract base class for resume analysis backends."""

from abc import ABC, abstractmethod

from models.responses import AnalysisResult


class AnalysisBackend(ABC):
    """A strategy that turns resume + job-description text into an AnalysisResult.

    Subclasses must implement:
        - name: identifier used in settings.analysis_backend
        - analyze(resume_text, job_description): produce the result
    """

    name: str = ""

    @abstractmethod
    async def analyze(self, resume_text: str, job_description: str = "") -> AnalysisResult:
        """Analyze a resume, optionally against a job description."""
