import json
import logging
import re

from openai import OpenAI

import config
from prompts import FALLBACK_SUGGESTIONS, NO_CREDENTIAL_SUGGESTIONS, build_suggestion_prompt
from schemas import MatchResult, SuggestionResult, SuggestionSource

logger = logging.getLogger(__name__)

# first "[" through the last "]", newlines included
JSON_ARRAY_RX = re.compile(r"\[.*\]", re.DOTALL)

# flat bonus for getting a model-backed analysis, not derived from the reply
MODEL_SCORE_BONUS = 5


def make_client(api_key: str) -> OpenAI:
    # Groq speaks the OpenAI chat-completions protocol; no retries, SDK default timeout
    return OpenAI(api_key=api_key, base_url=config.GROQ_BASE_URL, max_retries=0)


def parse_suggestions(content: str):
    """Pull the suggestion list out of a model reply.

    Uses the JSON array embedded in the reply when there is one, otherwise the
    whole reply becomes a single suggestion.
    """
    m = JSON_ARRAY_RX.search(content)
    if m:
        try:
            parsed = json.loads(m.group(0))
        except ValueError:
            logger.warning("model reply contained an unparseable array, using raw reply")
        else:
            if isinstance(parsed, list):
                return [s if isinstance(s, str) else json.dumps(s) for s in parsed]
    return [content]


def _request_completion(client, prompt: str) -> str:
    resp = client.chat.completions.create(
        model=config.GROQ_MODEL,
        messages=[{"role": "user", "content": prompt}],
        temperature=config.TEMPERATURE,
        max_tokens=config.MAX_TOKENS,
    )
    content = resp.choices[0].message.content
    if not isinstance(content, str):
        raise ValueError("chat completion reply has no message content")
    return content


def get_ai_suggestions(resume_text: str, job_text: str, match: MatchResult, client=None) -> SuggestionResult:
    api_key = config.get_api_key()
    if not api_key:
        logger.info("no Groq key configured, returning setup instructions")
        return SuggestionResult(
            suggestions=list(NO_CREDENTIAL_SUGGESTIONS),
            match_score=match.base_score,
            source=SuggestionSource.NO_CREDENTIAL,
        )

    prompt = build_suggestion_prompt(resume_text, job_text, match)
    try:
        if client is None:
            client = make_client(api_key)
        content = _request_completion(client, prompt)
    except Exception:
        # network errors, non-2xx responses and malformed bodies all end up here
        logger.exception("Groq suggestion request failed")
        return SuggestionResult(
            suggestions=list(FALLBACK_SUGGESTIONS),
            match_score=match.base_score,
            source=SuggestionSource.FALLBACK,
        )

    return SuggestionResult(
        suggestions=parse_suggestions(content),
        match_score=min(match.base_score + MODEL_SCORE_BONUS, 100),
        source=SuggestionSource.MODEL,
    )
