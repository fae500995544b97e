from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .catalog import extract_required_skills
from .config import LIMITS


class ParsedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: List[str] = Field(
        default_factory=list,
        max_length=LIMITS["experience_entries"],
    )
    education: List[str] = Field(
        default_factory=list,
        max_length=LIMITS["education_entries"],
    )
    certifications: List[str] = Field(
        default_factory=list,
        max_length=LIMITS["certification_entries"],
    )


class JobRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = ""
    required_skills: List[str] = Field(
        default_factory=list,
        description="Skills the job asks for; empty means no stated requirement",
    )

    @classmethod
    def from_description(
        cls,
        description: str,
        required_skills: Optional[List[str]] = None,
    ) -> "JobRequirement":
        """Build a requirement, pulling skills from the description when none are given."""
        if not required_skills:
            required_skills = extract_required_skills(description)
        return cls(description=description, required_skills=list(required_skills))


class ScoreReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    skills_score: int = Field(ge=0, le=100)
    experience_score: int = Field(ge=0, le=100)
    education_score: int = Field(ge=0, le=100)
    missing_skills: List[str] = Field(
        default_factory=list,
        max_length=LIMITS["missing_skills"],
    )
    recommendations: List[str] = Field(
        default_factory=list,
        max_length=LIMITS["recommendations"],
    )
