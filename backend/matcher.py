import logging
import math

from schemas import MatchResult
from utils import SKILL_VOCABULARY, normalize_skill

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 50


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def analyze_match(resume_text: str, job_text: str, vocabulary=SKILL_VOCABULARY) -> MatchResult:
    """Keyword overlap between resume and job description.

    A vocabulary term counts when it appears as a substring of the lowercased text.
    The score is the share of the job's terms also found in the resume, or 50 when
    the job mentions none of them.
    """
    resume_lower = resume_text.lower()
    job_lower = job_text.lower()

    job_skills = [s for s in map(normalize_skill, vocabulary) if s in job_lower]
    matching = [s for s in job_skills if s in resume_lower]
    missing = [s for s in job_skills if s not in resume_lower]

    if job_skills:
        base_score = _round_half_up(100 * len(matching) / len(job_skills))
    else:
        base_score = DEFAULT_SCORE

    logger.debug("job skills=%s matching=%s score=%d", job_skills, matching, base_score)
    return MatchResult(
        base_score=base_score,
        matching_skills=matching,
        missing_skills=missing,
        job_skills=job_skills,
    )
