"""
Rule-Based Resume/Job Compatibility Engine

This package provides a two-step matching system:
1. Resume parsing into skills, experience, education and certifications
2. Deterministic compatibility scoring with gap analysis

Usage:
    from resume_match import parse_resume, analyze

    resume = parse_resume(pdf_bytes, "application/pdf")
    report = analyze(resume, job_description, ["Python", "AWS"])
    print(f"Match: {report.overall_score}%")
"""

from .catalog import extract_required_skills
from .document_parser import parse_resume, parse_text
from .matcher import analyze, analyze_requirement, analyze_multiple_jobs, match_resume
from .models import ParsedDocument, JobRequirement, ScoreReport
from .errors import (
    ResumeMatchError,
    UnsupportedFormatError,
    DecodeError,
    DocumentTooLargeError,
    EmptyInputWarning,
)

__all__ = [
    "parse_resume",
    "parse_text",
    "extract_required_skills",
    "analyze",
    "analyze_requirement",
    "analyze_multiple_jobs",
    "match_resume",
    "ParsedDocument",
    "JobRequirement",
    "ScoreReport",
    "ResumeMatchError",
    "UnsupportedFormatError",
    "DecodeError",
    "DocumentTooLargeError",
    "EmptyInputWarning",
]
__version__ = "1.0.0"
