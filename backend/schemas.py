from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class MatchInput(BaseModel):
    resume_text: str
    job_description: str


class MatchResult(BaseModel):
    base_score: int = Field(ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    job_skills: List[str] = Field(default_factory=list)


class SuggestionSource(str, Enum):
    NO_CREDENTIAL = "no_credential"
    FALLBACK = "fallback"
    MODEL = "model"


class SuggestionResult(BaseModel):
    suggestions: List[str]
    match_score: int = Field(ge=0, le=100)
    source: SuggestionSource


class AnalysisResult(BaseModel):
    score: int = Field(ge=0, le=100)
    score_band: str
    matching_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    source: SuggestionSource


class ExtractResult(BaseModel):
    filename: str
    text: str
    pages: int


def score_band(score: int) -> str:
    # same thresholds the results panel colours by (green / yellow / red)
    if score >= 70:
        return "high"
    if score >= 40:
        return "medium"
    return "low"
