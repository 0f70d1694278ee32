"""Shared dependencies for API routes."""

from config import settings
from services.base import AnalysisBackend
from services.gemini_analyzer import GeminiAnalyzer
from services.resume_analyzer import ResumeAnalyzer, get_analyzer

_gemini_analyzer: GeminiAnalyzer | None = None


async def get_local_analyzer() -> ResumeAnalyzer:
    return get_analyzer()


async def get_analysis_backend() -> AnalysisBackend:
    """Backend behind /analyze-resume, chosen by settings.analysis_backend."""
    global _gemini_analyzer
    if settings.analysis_backend == "local":
        return get_analyzer()
    if settings.analysis_backend == "gemini":
        if _gemini_analyzer is None:
            _gemini_analyzer = GeminiAnalyzer()
        return _gemini_analyzer
    raise ValueError(f"Unknown analysis backend: {settings.analysis_backend}")
