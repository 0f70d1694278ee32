import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_analysis_backend, get_local_analyzer
from config import settings
from models.requests import AnalyzeResumeRequest, QuickAnalyzeRequest
from models.responses import AnalysisResult, AnalyzeResumeResponse, ErrorResponse, StoredAnalysis
from services.base import AnalysisBackend
from services.gemini_client import (
    GeminiAuthError,
    GeminiError,
    GeminiRateLimitError,
    GeminiResponseError,
)
from services.resume_analyzer import ResumeAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Keep the {error} body shape for /analyze-resume; other routes get FastAPI's 422."""
    if request.url.path == "/analyze-resume":
        logger.warning("Rejected analyze-resume body: %s", exc.errors())
        return _error(400, "Invalid request body")
    return await request_validation_exception_handler(request, exc)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "analysis_backend": settings.analysis_backend,
    }


@router.post("/analyze/quick", response_model=AnalysisResult)
@limiter.limit("10/minute")
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    analyzer: ResumeAnalyzer = Depends(get_local_analyzer),
):
    return await analyzer.analyze(body.resume_text, body.job_description)


@router.post(
    "/analyze-resume",
    response_model=AnalyzeResumeResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 403, 429, 500)},
)
@limiter.limit("10/minute")
async def analyze_resume(
    request: Request,
    body: AnalyzeResumeRequest,
    backend: AnalysisBackend = Depends(get_analysis_backend),
):
    resume_id = "" if body.resume_id is None else str(body.resume_id)
    if not resume_id or not body.resume_text:
        return _error(400, "Missing required fields: resumeId and resumeText")
    if len(body.resume_text) > settings.max_resume_chars:
        return _error(400, f"Resume text too long (max {settings.max_resume_chars} chars)")
    job_description = body.job_description or ""
    if len(job_description) > settings.max_job_description_chars:
        return _error(
            400,
            f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    logger.info("Analyzing resume: %s (backend=%s)", resume_id, backend.name)
    try:
        result = await backend.analyze(body.resume_text, job_description)
    except GeminiRateLimitError as e:
        return _error(429, str(e))
    except GeminiAuthError as e:
        return _error(403, str(e))
    except GeminiResponseError:
        return _error(500, "Invalid AI response format")
    except GeminiError as e:
        logger.error("Analysis failed for resume %s: %s", resume_id, e)
        return _error(500, "AI analysis failed")
    except Exception:
        logger.exception("Unexpected error analyzing resume %s", resume_id)
        return _error(500, "Analysis failed")

    return AnalyzeResumeResponse(
        analysis=StoredAnalysis(resume_id=resume_id, **result.model_dump()),
    )
