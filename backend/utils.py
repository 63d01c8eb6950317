# common tech / professional terms the matcher looks for, order is the output order
SKILL_VOCABULARY = (
    "javascript", "python", "java", "react", "node", "sql", "aws", "docker",
    "kubernetes", "git", "agile", "scrum", "leadership", "management",
    "communication", "teamwork", "problem solving", "analytical", "creative",
    "typescript", "angular", "vue", "mongodb", "postgresql", "redis",
    "ci/cd", "devops", "cloud", "azure", "gcp", "machine learning", "ai",
    "data analysis", "excel", "powerpoint", "project management",
)


def normalize_skill(s: str) -> str:
    return s.strip().lower()


def truncate(text: str, limit: int) -> str:
    return text[:limit]


def join_skills(skills) -> str:
    return ", ".join(skills) or "None identified"
