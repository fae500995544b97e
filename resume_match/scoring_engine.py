"""
Deterministic Scoring Engine

All scoring functions are deterministic - same inputs produce same outputs.
Scores are rule-based: token overlap, catalog lookups and regex extraction.
"""

import logging
import math
import re
from typing import List, Optional, Sequence

from . import config
from .models import ParsedDocument, ScoreReport

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

_REQUIRED_YEARS = [re.compile(p, re.IGNORECASE) for p in config.REQUIRED_YEARS_PATTERNS]
_CANDIDATE_YEARS = [re.compile(p, re.IGNORECASE) for p in config.CANDIDATE_YEARS_PATTERNS]

_SYNONYMS = dict(config.SKILL_SYNONYMS)


def clean_text(text: str) -> str:
    """Lower-case, replace punctuation with spaces and collapse whitespace."""
    text = _PUNCTUATION.sub(" ", (text or "").lower())
    return _WHITESPACE.sub(" ", text).strip()


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _overlaps(a: str, b: str) -> bool:
    """Substring match in either direction."""
    return a in b or b in a


def lexical_similarity(text_a: str, text_b: str) -> float:
    """
    Jaccard similarity of the two texts' word sets (0-100).

    Formula: |tokens_a & tokens_b| / |tokens_a | tokens_b| * 100

    Two empty texts have nothing in common, so the result is 0.
    """
    tokens_a = set(clean_text(text_a).split())
    tokens_b = set(clean_text(text_b).split())

    union = tokens_a | tokens_b
    if not union:
        logger.debug("Both texts are empty, similarity = 0")
        return 0.0

    score = len(tokens_a & tokens_b) / len(union) * 100
    logger.debug(f"Lexical similarity: {len(tokens_a & tokens_b)}/{len(union)} tokens = {score:.2f}%")
    return score


def get_related_terms(skill: str) -> Sequence[str]:
    """Synonyms that earn partial credit for a required skill."""
    return _SYNONYMS.get(skill.lower(), ())


def calculate_skills_score(
    resume_skills: List[str],
    required_skills: List[str],
    job_text: str
) -> float:
    """
    Calculate skills match score (0-100).

    Formula:
    - Direct match (substring either way): 1.0 point
    - Skill named in the job text and a synonym matches a resume skill: 0.7
    - Final: min(100, points / len(required_skills) * 100)

    Args:
        resume_skills: Skills found in the resume
        required_skills: Skills the job requires
        job_text: Job description text

    Returns:
        Score from 0-100
    """
    if not required_skills:
        logger.debug("No required skills specified, using default score")
        return float(config.DEFAULT_SCORES["skills_no_requirements"])

    candidate = [s.lower() for s in resume_skills]
    job_lower = (job_text or "").lower()
    points = 0.0

    for skill in required_skills:
        skill_lower = skill.lower()

        if any(_overlaps(skill_lower, s) for s in candidate):
            points += config.SKILL_MATCH_POINTS["direct"]
            logger.debug(f"Skill '{skill}': direct match")
            continue

        if skill_lower in job_lower:
            related = get_related_terms(skill_lower)
            if any(_overlaps(term, s) for term in related for s in candidate):
                points += config.SKILL_MATCH_POINTS["related"]
                logger.debug(f"Skill '{skill}': related match")

    score = min(points / len(required_skills) * 100, 100.0)
    logger.info(f"Skills score: {score:.2f}%")
    return score


def extract_years(text: str, patterns) -> Optional[int]:
    """Years number from the first pattern that matches, or None."""
    for pattern in patterns:
        match = pattern.search(text or "")
        if match:
            digits = match.group(1)
            if len(digits) > config.MAX_YEARS_DIGITS:
                logger.warning(f"Ignoring implausible years value ({len(digits)} digits)")
                return None
            return int(digits)
    return None


def extract_required_years(job_text: str) -> Optional[int]:
    return extract_years(job_text, _REQUIRED_YEARS)


def extract_candidate_years(experience_text: str) -> Optional[int]:
    return extract_years(experience_text, _CANDIDATE_YEARS)


def calculate_experience_score(
    resume_experience: List[str],
    job_text: str
) -> float:
    """
    Calculate experience match score (0-100).

    Formula:
    - No experience entries: 60
    - Required and candidate years both known:
      candidate >= required: 90, candidate >= required - 1: 80, else 60
    - Otherwise: 70

    Args:
        resume_experience: Experience entries from the resume
        job_text: Job description text

    Returns:
        Score from 0-100
    """
    if not resume_experience:
        logger.debug("No experience entries, using default score")
        return float(config.DEFAULT_SCORES["experience_no_entries"])

    required_years = extract_required_years(job_text)
    candidate_years = extract_candidate_years(" ".join(resume_experience))

    # Zero years counts as unknown
    if required_years and candidate_years:
        if candidate_years >= required_years:
            score = config.EXPERIENCE_SCORES["meets"]
        elif candidate_years >= required_years - 1:
            score = config.EXPERIENCE_SCORES["one_below"]
        else:
            score = config.EXPERIENCE_SCORES["below"]
        logger.debug(f"Experience: {candidate_years} vs {required_years} required years, score = {score}")
    else:
        score = config.DEFAULT_SCORES["experience_base"]
        logger.debug(f"Experience: required={required_years}, candidate={candidate_years}, base score = {score}")

    logger.info(f"Experience score: {score:.2f}%")
    return float(score)


def education_level(text: str) -> int:
    """Highest education level named in text (0 if none)."""
    lowered = (text or "").lower()
    return max((level for keyword, level in config.EDUCATION_LEVELS if keyword in lowered), default=0)


def calculate_education_score(
    resume_education: List[str],
    job_text: str
) -> float:
    """
    Calculate education match score (0-100).

    Levels: phd/doctorate=5, master(s)=4, bachelor=3, associate=2,
    diploma/certificate=1.

    Formula:
    - No education entries: 70
    - Job names no level: 85
    - candidate >= job: 95, candidate == job - 1: 80, else 65
    """
    if not resume_education:
        logger.debug("No education entries, using default score")
        return float(config.DEFAULT_SCORES["education_no_entries"])

    candidate_level = max(education_level(entry) for entry in resume_education)
    job_level = education_level(job_text)

    if job_level == 0:
        score = config.DEFAULT_SCORES["education_no_requirement"]
        logger.debug("Job states no education level, using default score")
    elif candidate_level >= job_level:
        score = config.EDUCATION_SCORES["meets"]
    elif candidate_level == job_level - 1:
        score = config.EDUCATION_SCORES["one_below"]
    else:
        score = config.EDUCATION_SCORES["below"]

    logger.debug(f"Education level: candidate={candidate_level}, job={job_level}")
    logger.info(f"Education score: {score:.2f}%")
    return float(score)


def extract_technical_terms(job_text: str) -> List[str]:
    """Catalog technical terms found in the job text, in catalog order."""
    lowered = (job_text or "").lower()
    return [term for term in config.TECHNICAL_TERMS if term in lowered]


def find_missing_skills(
    resume_skills: List[str],
    required_skills: List[str],
    job_text: str
) -> List[str]:
    """
    List skills the job asks for that the resume lacks.

    Required skills come first, then technical terms from the job text that
    no resume skill contains. Truncated to the configured limit.
    """
    candidate = [s.lower() for s in resume_skills]
    missing = [
        skill for skill in required_skills
        if not any(_overlaps(skill.lower(), s) for s in candidate)
    ]

    for term in extract_technical_terms(job_text):
        if any(term in s for s in candidate):
            continue
        if any(term in m.lower() for m in missing):
            continue
        missing.append(term)

    logger.debug(f"Missing skills before truncation: {missing}")
    return missing[:config.LIMITS["missing_skills"]]


def generate_recommendations(
    missing_skills: List[str],
    skills_score: float,
    experience_score: float
) -> List[str]:
    """Ordered, fixed-text suggestions for improving the resume."""
    texts = config.RECOMMENDATIONS
    recommendations = []

    if missing_skills:
        top = missing_skills[:config.LIMITS["recommended_skills"]]
        recommendations.append(texts["missing_skills"].format(skills=", ".join(top)))

    if skills_score < config.RECOMMENDATION_THRESHOLDS["skills"]:
        recommendations.append(texts["skills"])

    if experience_score < config.RECOMMENDATION_THRESHOLDS["experience"]:
        recommendations.append(texts["experience"])

    recommendations.append(texts["keywords"])
    recommendations.append(texts["accomplishments"])

    return recommendations[:config.LIMITS["recommendations"]]


def calculate_match_score(
    parsed_resume: ParsedDocument,
    job_description: str,
    required_skills: List[str]
) -> ScoreReport:
    """
    Calculate the full score report.

    Args:
        parsed_resume: Parsed resume fields
        job_description: Job description text
        required_skills: Skills the job requires (may be empty)

    Returns:
        ScoreReport with overall score, sub-scores, missing skills and
        recommendations
    """
    resume_text = clean_text(parsed_resume.raw_text)
    job_text = clean_text(job_description)

    similarity = lexical_similarity(resume_text, job_text)
    skills_score = calculate_skills_score(parsed_resume.skills, required_skills, job_text)
    experience_score = calculate_experience_score(parsed_resume.experience, job_text)
    education_score = calculate_education_score(parsed_resume.education, job_text)

    missing_skills = find_missing_skills(parsed_resume.skills, required_skills, job_text)
    recommendations = generate_recommendations(missing_skills, skills_score, experience_score)

    # Overall uses unrounded components
    overall = (similarity + skills_score + experience_score + education_score) / 4
    logger.info(f"FINAL MATCH SCORE: {overall:.2f}%")

    return ScoreReport(
        overall_score=round_half_up(overall),
        skills_score=round_half_up(skills_score),
        experience_score=round_half_up(experience_score),
        education_score=round_half_up(education_score),
        missing_skills=missing_skills,
        recommendations=recommendations,
    )
