import logging

from errors import MissingInputError
from matcher import analyze_match
from schemas import AnalysisResult, score_band
from suggestions import get_ai_suggestions

logger = logging.getLogger(__name__)


def run_analysis(resume_text: str, job_text: str, client=None) -> AnalysisResult:
    if not resume_text.strip() or not job_text.strip():
        raise MissingInputError("Please provide both resume and job description")

    # 1. keyword overlap
    match = analyze_match(resume_text, job_text)
    # 2. model suggestions (may bump the score)
    ai = get_ai_suggestions(resume_text, job_text, match, client=client)

    logger.info(
        "analysis done: base=%d score=%d source=%s",
        match.base_score, ai.match_score, ai.source.value,
    )
    return AnalysisResult(
        score=ai.match_score,
        score_band=score_band(ai.match_score),
        matching_skills=match.matching_skills,
        missing_skills=match.missing_skills,
        suggestions=ai.suggestions,
        source=ai.source,
    )
