"""End-to-end tests for the local matching engine."""

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from models.responses import AnalysisResult
from services.resume_analyzer import ResumeAnalyzer

from conftest import make_provider, make_unloadable_provider


SCENARIO_RESUME = (
    "5 years experience with React, Node.js, and MongoDB. "
    "Bachelor's degree in Computer Science."
)
SCENARIO_JD = (
    "Looking for a Full Stack Developer with React, Node.js, MongoDB, AWS, "
    "3+ years experience"
)

FULL_RESUME = """Jane Doe

Summary
Full stack developer with 6 years experience.

Experience
Software Engineer | Acme | 2019 - Present
• Designed and implemented React and TypeScript frontends
• Developed Node.js services on AWS with Docker

Education
Master of Science in Computer Science

Skills
JavaScript, TypeScript, React, Node.js, PostgreSQL, Docker, AWS, Git
"""

JDS = [
    SCENARIO_JD,
    "Senior DevOps Engineer: Kubernetes, Terraform, Jenkins. PhD preferred. AWS Certified.",
    "Data Scientist with Python, pandas and a Master's degree",
    "We need a designer",
    "Frontend developer",
]


def _lower(values):
    return [v.lower() for v in values]


class TestScenario:
    @pytest.mark.asyncio
    async def test_full_stack_scenario(self, provider):
        result = await ResumeAnalyzer(provider).analyze(SCENARIO_RESUME, SCENARIO_JD)

        assert isinstance(result, AnalysisResult)
        assert {"react", "node.js", "mongodb"} <= set(_lower(result.extracted_skills))
        assert "aws" in _lower(result.missing_skills)
        assert result.experience_years == 5
        assert result.education_level == "bachelors"
        assert "Full Stack Developer" in result.predicted_roles
        assert result.scoring_method == "semantic"
        assert not result.degraded

    @pytest.mark.asyncio
    async def test_display_spellings(self, provider):
        result = await ResumeAnalyzer(provider).analyze(SCENARIO_RESUME, SCENARIO_JD)
        assert {"React", "Node.js", "MongoDB"} <= set(result.extracted_skills)
        assert "AWS" in result.missing_skills

    @pytest.mark.asyncio
    async def test_missing_skills_become_high_priority_gaps(self, provider):
        result = await ResumeAnalyzer(provider).analyze(SCENARIO_RESUME, SCENARIO_JD)
        assert result.skill_gaps
        assert len(result.skill_gaps) <= 5
        assert all(g.importance == "high" for g in result.skill_gaps)
        assert len(result.learning_recommendations) == len(result.skill_gaps)


class TestNoJobDescription:
    @pytest.mark.asyncio
    async def test_defaults(self, provider, encoder):
        result = await ResumeAnalyzer(provider).analyze(FULL_RESUME)
        assert result.match_score == 70
        assert result.ats_score == 70
        assert result.ats_breakdown is None
        assert result.extra_skills == result.extracted_skills
        assert result.matching_skills == []
        assert result.missing_skills == []
        assert result.scoring_method == "no_job_description"
        assert encoder.calls == []

    @pytest.mark.asyncio
    async def test_whitespace_job_description_counts_as_absent(self, provider):
        result = await ResumeAnalyzer(provider).analyze(FULL_RESUME, "   \n")
        assert result.ats_score == 70
        assert result.match_score == 70

    @pytest.mark.asyncio
    async def test_generic_gaps(self, provider):
        result = await ResumeAnalyzer(provider).analyze("Python and Django developer")
        assert all(g.importance == "medium" for g in result.skill_gaps)
        assert "TypeScript" in [g.skill for g in result.skill_gaps]


class TestInvariants:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("jd", JDS)
    async def test_score_bounds_and_breakdown_sum(self, provider, jd):
        for resume in (FULL_RESUME, SCENARIO_RESUME, "", "short"):
            result = await ResumeAnalyzer(provider).analyze(resume, jd)
            assert 0 <= result.match_score <= 95
            assert 0 <= result.ats_score <= 100
            bd = result.ats_breakdown
            total = (
                bd.skill_match + bd.keyword_match + bd.experience_match
                + bd.education_match + bd.formatting
            )
            assert round(total) == result.ats_score

    @pytest.mark.asyncio
    async def test_idempotent_with_warm_cache(self, provider):
        analyzer = ResumeAnalyzer(provider)
        first = await analyzer.analyze(FULL_RESUME, JDS[1])
        second = await analyzer.analyze(FULL_RESUME, JDS[1])
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    @pytest.mark.asyncio
    async def test_exact_skills_always_match(self, provider):
        result = await ResumeAnalyzer(provider, threshold=0.99).analyze(FULL_RESUME, SCENARIO_JD)
        assert {"react", "node.js", "aws"} <= set(_lower(result.matching_skills))

    @pytest.mark.asyncio
    async def test_short_resume_fails_parsable_check(self, provider):
        result = await ResumeAnalyzer(provider).analyze("React dev", SCENARIO_JD)
        assert result.ats_breakdown.formatting == 0.0


class TestDegraded:
    @pytest.mark.asyncio
    async def test_embedding_failure_does_not_abort(self):
        analyzer = ResumeAnalyzer(make_unloadable_provider())
        result = await analyzer.analyze(SCENARIO_RESUME, SCENARIO_JD)

        assert result.degraded
        assert result.scoring_method == "exact_fallback"
        assert result.ats_breakdown.experience_match == 10.0
        assert {"react", "node.js", "mongodb"} <= set(_lower(result.matching_skills))
        assert "aws" in _lower(result.missing_skills)

    @pytest.mark.asyncio
    async def test_module_level_analyze(self, monkeypatch, provider):
        from services import resume_analyzer

        monkeypatch.setattr(resume_analyzer, "_analyzer", ResumeAnalyzer(provider))
        result = await resume_analyzer.analyze(SCENARIO_RESUME)
        assert result.match_score == 70


class TestProcessWideAnalyzer:
    def test_concurrent_first_use_builds_one_provider(self, monkeypatch):
        from services import resume_analyzer

        built = []

        def slow_provider(**kwargs):
            time.sleep(0.05)
            built.append(make_provider())
            return built[-1]

        monkeypatch.setattr(resume_analyzer, "_provider", None)
        monkeypatch.setattr(resume_analyzer, "_analyzer", None)
        monkeypatch.setattr(resume_analyzer, "EmbeddingProvider", slow_provider)

        with ThreadPoolExecutor(max_workers=8) as pool:
            analyzers = list(pool.map(lambda _: resume_analyzer.get_analyzer(), range(8)))

        assert len(built) == 1
        assert all(a is analyzers[0] for a in analyzers)
        assert analyzers[0].provider is built[0]
