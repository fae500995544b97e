"""
Configuration for the rule-based resume/job compatibility engine.
Adjust default scores, thresholds and catalogs here.

Catalogs are tuples: their order decides the order of parsed skills and
missing-skill suggestions, so keep it stable.
"""

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()


def int_from_env(name: str, default: int) -> int:
    """Positive integer from the environment, or the default if unset or invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} must be positive, using {default}")
        return default
    return value


# Environment overrides
LOG_LEVEL = os.getenv("RESUME_MATCH_LOG_LEVEL", "INFO").upper()
MAX_DOCUMENT_BYTES = int_from_env("RESUME_MATCH_MAX_DOCUMENT_BYTES", 10 * 1024 * 1024)

# Accepted document formats (MIME type -> short format name)
MIME_TEXT = "text/plain"
MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_FORMATS = {
    MIME_TEXT: "text",
    MIME_PDF: "pdf",
    MIME_DOCX: "docx",
}

# Fallback scores used when a component has nothing to compare
DEFAULT_SCORES = {
    "skills_no_requirements": 85,
    "experience_no_entries": 60,
    "experience_base": 70,
    "education_no_entries": 70,
    "education_no_requirement": 85,
}

# Experience scores by candidate years vs. required years
EXPERIENCE_SCORES = {
    "meets": 90,
    "one_below": 80,
    "below": 60,
}

# Education scores by candidate level vs. job level
EDUCATION_SCORES = {
    "meets": 95,
    "one_below": 80,
    "below": 65,
}

# Skills scoring
SKILL_MATCH_POINTS = {
    "direct": 1.0,
    "related": 0.7,
}

# Recommendation thresholds
RECOMMENDATION_THRESHOLDS = {
    "skills": 70,
    "experience": 70,
}

# Result size limits
LIMITS = {
    "experience_entries": 5,
    "education_entries": 3,
    "certification_entries": 5,
    "missing_skills": 5,
    "recommendations": 4,
    "recommended_skills": 3,
}

# Section headings, matched as lower-case substrings of a line
SECTION_HEADINGS = {
    "skills": ("skills", "technical skills", "technologies", "expertise"),
    "experience": ("experience", "work experience", "employment", "career"),
    "education": ("education", "academic background", "qualifications"),
    "certifications": ("certifications", "certificates", "licenses"),
}

# Any of these on a later line ends the current section
SECTION_BOUNDARY_KEYWORDS = (
    "experience", "education", "skills", "certifications", "projects", "awards",
)

# Technologies recognised in a resume's skills section
RESUME_SKILL_CATALOG = (
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Node.js", "Python", "Java",
    "Spring", "Django", "Flask", "SQL", "NoSQL", "MongoDB", "PostgreSQL", "MySQL",
    "AWS", "Azure", "Docker", "Kubernetes", "Git", "CI/CD", "REST", "GraphQL",
    "HTML", "CSS", "SASS", "Redux", "Express", "Jest", "Cypress", "Webpack",
)

# Technologies pulled from a job description when no required skills are given
JOB_SKILL_CATALOG = tuple(skill for skill in RESUME_SKILL_CATALOG if skill != "Webpack")

# Terms looked up in the job description when listing missing skills
TECHNICAL_TERMS = (
    "typescript", "javascript", "react", "vue", "angular", "python", "java",
    "spring", "django", "flask", "sql", "nosql", "mongodb", "postgresql",
    "aws", "azure", "docker", "kubernetes", "git", "ci/cd", "api", "rest",
    "graphql", "microservices", "agile", "scrum", "testing", "jest", "cypress",
)

# Related terms that earn partial credit, keyed by the required skill
SKILL_SYNONYMS = (
    ("javascript", ("js", "node", "react", "vue", "angular")),
    ("python", ("django", "flask", "pandas", "numpy")),
    ("java", ("spring", "hibernate", "maven")),
    ("react", ("jsx", "redux", "hooks")),
    ("database", ("sql", "mysql", "postgresql", "mongodb")),
    ("aws", ("cloud", "ec2", "s3", "lambda")),
)

# Line classifiers
EXPERIENCE_LINE_PATTERNS = (
    r"\d{4}.*\d{4}",
    r"(january|february|march|april|may|june|july|august|september|october|november|december)",
    r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)",
    r"\d{1,2}/\d{4}",
)
EXPERIENCE_LINE_KEYWORDS = ("years", "months")

EDUCATION_LINE_KEYWORDS = (
    "bachelor", "master", "phd", "doctorate", "associate", "degree", "university",
    "college", "institute", "school", "certification", "diploma",
)
EDUCATION_LINE_PATTERN = r"\d{4}"

CERTIFICATION_LINE_KEYWORDS = (
    "certified", "certification", "license", "aws", "azure", "google", "microsoft",
    "oracle", "cisco", "comptia", "pmp", "scrum",
)

# Education hierarchy
EDUCATION_LEVELS = (
    ("phd", 5),
    ("doctorate", 5),
    ("masters", 4),
    ("master", 4),
    ("bachelor", 3),
    ("associate", 2),
    ("diploma", 1),
    ("certificate", 1),
)

# Years-of-experience extraction, first match wins
REQUIRED_YEARS_PATTERNS = (
    r"(\d+)[+\-\s]*years?\s*(?:of\s*)?experience",
    r"(\d+)[+\-\s]*yrs?\s*(?:of\s*)?experience",
    r"minimum\s*(\d+)\s*years?",
    r"at\s*least\s*(\d+)\s*years?",
)
CANDIDATE_YEARS_PATTERNS = (
    r"(\d+)[+\-\s]*years?\s*(?:of\s*)?experience",
    r"(\d+)[+\-\s]*yrs?\s*experience",
)

# Longer years values count as not stated
MAX_YEARS_DIGITS = 4

# Recommendation texts
RECOMMENDATIONS = {
    "missing_skills": "Add experience with: {skills}",
    "skills": "Highlight more relevant technical skills in your resume",
    "experience": "Emphasize relevant work experience and achievements",
    "keywords": "Tailor your resume keywords to match the job description",
    "accomplishments": "Include specific examples of your accomplishments",
}


def configure_logging(level: str = None) -> None:
    """Configure root logging for scripts. Library code never calls this."""
    logging.basicConfig(
        level=(level or LOG_LEVEL),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
