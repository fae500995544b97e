"""
Main Matcher Module

Orchestrates the complete matching process:
1. Parse the resume document into structured fields
2. Calculate the deterministic compatibility score
3. Return a ScoreReport with gap analysis
"""

import logging
import warnings
from typing import List, Optional, Sequence, Tuple

from .document_parser import parse_resume
from .errors import EmptyInputWarning
from .models import JobRequirement, ParsedDocument, ScoreReport
from .scoring_engine import calculate_match_score

logger = logging.getLogger(__name__)


def _warn_empty(what: str) -> None:
    message = f"Empty {what}; scores fall back to defaults"
    logger.warning(message)
    warnings.warn(message, EmptyInputWarning, stacklevel=3)


def analyze(
    parsed_resume: ParsedDocument,
    job_description: str,
    required_skills: Optional[List[str]] = None
) -> ScoreReport:
    """
    Score a parsed resume against a job description.

    This is the main entry point for the analyzer. Empty inputs do not fail:
    an EmptyInputWarning is issued and the default-score rules apply.

    Args:
        parsed_resume: Output of parse_resume / parse_text
        job_description: Full job description text
        required_skills: Skills the job requires; empty gives the default
            skills score

    Returns:
        ScoreReport with overall, skills, experience and education scores,
        missing skills and recommendations

    Example:
        >>> report = analyze(parse_text(resume_text), job_desc, ["Python"])
        >>> print(f"Match: {report.overall_score}%")
    """
    required_skills = list(required_skills or [])

    if not (job_description or "").strip():
        _warn_empty("job description")
    if not parsed_resume.raw_text.strip():
        _warn_empty("resume text")

    logger.info(f"Analyzing resume ({len(parsed_resume.skills)} skills) against job "
                f"({len(required_skills)} required skills)")

    report = calculate_match_score(parsed_resume, job_description or "", required_skills)

    logger.info(f"MATCHING COMPLETE - Score: {report.overall_score}% "
                f"(skills={report.skills_score}, experience={report.experience_score}, "
                f"education={report.education_score})")
    return report


def analyze_requirement(parsed_resume: ParsedDocument, requirement: JobRequirement) -> ScoreReport:
    """Score a parsed resume against a JobRequirement."""
    return analyze(parsed_resume, requirement.description, requirement.required_skills)


def match_resume(
    raw: bytes,
    mime_type: str,
    job_description: str,
    required_skills: Optional[List[str]] = None
) -> ScoreReport:
    """
    Parse an uploaded resume and score it in one call.

    Raises:
        UnsupportedFormatError: If the MIME type is not supported
        DecodeError: If the document cannot be decoded
    """
    parsed_resume = parse_resume(raw, mime_type)
    return analyze(parsed_resume, job_description, required_skills)


def analyze_multiple_jobs(
    parsed_resume: ParsedDocument,
    requirements: Sequence[JobRequirement]
) -> List[Tuple[int, ScoreReport]]:
    """
    Score one resume against several jobs.

    Args:
        parsed_resume: Parsed resume
        requirements: Jobs to compare against

    Returns:
        (job_index, report) pairs, sorted by overall score (highest first).
        Jobs with equal scores keep their input order.

    Example:
        >>> results = analyze_multiple_jobs(resume, [job1, job2, job3])
        >>> for index, report in results:
        >>>     print(f"Job {index}: {report.overall_score}%")
    """
    logger.info(f"Matching resume against {len(requirements)} jobs")

    results = [
        (index, analyze_requirement(parsed_resume, requirement))
        for index, requirement in enumerate(requirements)
    ]
    results.sort(key=lambda item: item[1].overall_score, reverse=True)

    if results:
        logger.info(f"Top match: job {results[0][0]} at {results[0][1].overall_score}%")
    return results
