"""Skill matcher output: job-description skills aligned to resume skills."""

from pydantic import BaseModel


class SkillMatchResult(BaseModel):
    """Matched / missing / extra skill sets for one resume-JD pair.

    All lists hold canonical lowercase tokens. ``degraded`` is set when the
    embedding provider was unavailable and only exact equality counted.
    """
    matched: list[str] = []  # JD skills with a resume counterpart
    missing: list[str] = []  # JD skills without one
    extra: list[str] = []  # resume skills never consumed by a match
    similarities: dict[str, float] = {}  # matched JD skill -> best similarity
    degraded: bool = False
    reason: str = ""
