"""
Catalog lookups shared by the resume parser and job requirements.
"""

from typing import Iterable, List

from . import config


def match_catalog(text: str, catalog: Iterable[str]) -> List[str]:
    """Catalog entries contained in text (case-insensitive), in catalog order."""
    lowered = text.lower()
    return [entry for entry in catalog if entry.lower() in lowered]


def extract_required_skills(description: str) -> List[str]:
    """Known technologies mentioned anywhere in a job description."""
    return match_catalog(description or "", config.JOB_SKILL_CATALOG)
