"""
Resume Document Parser

Splits resume text into skills, experience, education and certifications
using heading keywords and per-line classifiers. Rule-based and single pass.
"""

import logging
import re
from typing import List, Optional, Sequence

from . import config
from .catalog import match_catalog
from .extract import decode_document
from .models import ParsedDocument

logger = logging.getLogger(__name__)

# Section scanner states
SEARCHING = "searching"
IN_SECTION = "in_section"

_EXPERIENCE_PATTERNS = [re.compile(p, re.IGNORECASE) for p in config.EXPERIENCE_LINE_PATTERNS]
_EDUCATION_PATTERN = re.compile(config.EDUCATION_LINE_PATTERN)


def _is_boundary(line: str, headings: Sequence[str]) -> bool:
    """A line ends a section if it names another section."""
    if any(name in line for name in headings):
        return False
    return any(keyword in line for keyword in config.SECTION_BOUNDARY_KEYWORDS)


def _inline_content(line: str, headings: Sequence[str]) -> str:
    """Text after 'Heading:' on the heading line itself, e.g. 'Skills: Python'."""
    label, sep, rest = line.partition(":")
    if not sep or not any(name in label.lower() for name in headings):
        return ""
    return rest.strip()


def find_section(text: str, headings: Sequence[str]) -> Optional[str]:
    """
    Return the body of the first section introduced by one of ``headings``.

    The scan has two states. While SEARCHING, the first line containing a
    heading keyword switches to IN_SECTION. In IN_SECTION every line is kept
    until a non-empty line names a different section. Content written after
    a colon on the heading line ("Skills: Python, AWS") opens the body.

    Args:
        text: Full resume text
        headings: Lower-case heading synonyms for the section

    Returns:
        The section body, or None if no heading was found
    """
    state = SEARCHING
    body: List[str] = []

    for line in text.splitlines():
        lowered = line.strip().lower()

        if state == SEARCHING:
            if any(name in lowered for name in headings):
                state = IN_SECTION
                inline = _inline_content(line, headings)
                if inline:
                    body.append(inline)
            continue

        if lowered and _is_boundary(lowered, headings):
            break
        body.append(line)

    if state == SEARCHING:
        return None
    return "\n".join(body)


def _select_lines(section: Optional[str], predicate, limit: int) -> List[str]:
    if not section:
        return []
    lines = [line.strip() for line in section.splitlines() if line.strip()]
    return [line for line in lines if predicate(line)][:limit]


def is_experience_entry(line: str) -> bool:
    if any(pattern.search(line) for pattern in _EXPERIENCE_PATTERNS):
        return True
    lowered = line.lower()
    return any(keyword in lowered for keyword in config.EXPERIENCE_LINE_KEYWORDS)


def is_education_entry(line: str) -> bool:
    lowered = line.lower()
    if any(keyword in lowered for keyword in config.EDUCATION_LINE_KEYWORDS):
        return True
    return bool(_EDUCATION_PATTERN.search(line))


def is_certification_entry(line: str) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in config.CERTIFICATION_LINE_KEYWORDS)


def extract_skills(text: str) -> List[str]:
    section = find_section(text, config.SECTION_HEADINGS["skills"])
    if not section:
        return []
    return match_catalog(section, config.RESUME_SKILL_CATALOG)


def extract_experience(text: str) -> List[str]:
    section = find_section(text, config.SECTION_HEADINGS["experience"])
    return _select_lines(section, is_experience_entry, config.LIMITS["experience_entries"])


def extract_education(text: str) -> List[str]:
    section = find_section(text, config.SECTION_HEADINGS["education"])
    return _select_lines(section, is_education_entry, config.LIMITS["education_entries"])


def extract_certifications(text: str) -> List[str]:
    section = find_section(text, config.SECTION_HEADINGS["certifications"])
    return _select_lines(section, is_certification_entry, config.LIMITS["certification_entries"])


def parse_text(text: str) -> ParsedDocument:
    """Split already-decoded resume text into its structured fields."""
    parsed = ParsedDocument(
        raw_text=text,
        skills=extract_skills(text),
        experience=extract_experience(text),
        education=extract_education(text),
        certifications=extract_certifications(text),
    )
    logger.info(f"Parsed resume: {len(parsed.skills)} skills, "
                f"{len(parsed.experience)} experience entries, "
                f"{len(parsed.education)} education entries, "
                f"{len(parsed.certifications)} certifications")
    return parsed


def parse_resume(raw: bytes, mime_type: str) -> ParsedDocument:
    """
    Decode and parse an uploaded resume.

    Args:
        raw: Document bytes
        mime_type: Declared MIME type (text/plain, PDF or DOCX)

    Returns:
        ParsedDocument with the raw text and extracted sections

    Raises:
        UnsupportedFormatError: If the MIME type is not supported
        DecodeError: If the document cannot be decoded
    """
    text = decode_document(raw, mime_type)
    return parse_text(text)
