# Prompt template and canned suggestions used when calling Groq
from config import MAX_PROMPT_CHARS
from utils import join_skills, truncate

SUGGESTION_PROMPT = """Analyze this resume against the job description and provide 3-5 specific, actionable improvement suggestions.

Resume: {resume_text}

Job Description: {job_text}

Matching Skills: {matching_skills}
Missing Skills: {missing_skills}

Provide concise suggestions in a JSON array format: ["suggestion 1", "suggestion 2", ...]"""

# returned when no Groq key is configured
NO_CREDENTIAL_SUGGESTIONS = (
    "Add an API key to get AI-powered suggestions",
    "Set GROQ_API_KEY in your .env file",
    "You can get a free API key from https://console.groq.com",
)

# returned when the Groq call fails for any reason
FALLBACK_SUGGESTIONS = (
    "Highlight relevant experience that matches the job requirements",
    "Quantify your achievements with specific metrics and numbers",
    "Tailor your resume summary to align with the job description",
    "Add missing technical skills mentioned in the job posting",
)


def build_suggestion_prompt(resume_text: str, job_text: str, match) -> str:
    return SUGGESTION_PROMPT.format(
        resume_text=truncate(resume_text, MAX_PROMPT_CHARS),
        job_text=truncate(job_text, MAX_PROMPT_CHARS),
        matching_skills=join_skills(match.matching_skills),
        missing_skills=join_skills(match.missing_skills),
    )
