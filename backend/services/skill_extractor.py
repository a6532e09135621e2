"""Taxonomy-driven skill extraction.

Skills are found by case-insensitive substring search over the raw text, not
over tokens, so multi-word skills ("Machine Learning") and punctuated names
("Node.js", "C++") match as written. Substrings of longer words also match
("Java" inside "JavaScript"); that is accepted.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from models.responses import SkillCategory


SKILL_TAXONOMY: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Programming": (
        "Python", "JavaScript", "TypeScript", "Java", "Go", "Rust", "C++",
        "C#", "Ruby", "PHP", "Swift", "Kotlin", "Scala", "SQL",
    ),
    "Frameworks": (
        "React", "Angular", "Vue", "Next.js", "Node.js", "Express",
        "Django", "Flask", "FastAPI", "Spring", "Tailwind",
    ),
    "Databases": (
        "PostgreSQL", "MySQL", "MongoDB", "Redis", "SQLite", "DynamoDB",
        "Elasticsearch", "Cassandra",
    ),
    "Tools": (
        "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Git",
        "Jenkins", "Linux", "GraphQL",
    ),
    "AI/ML": (
        "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch",
        "Scikit-learn", "Pandas", "NumPy", "NLP", "Computer Vision", "LLM",
    ),
})


def _flatten(taxonomy: Mapping[str, Iterable[str]]) -> list[str]:
    return [skill for skills in taxonomy.values() for skill in skills]


def extract_skills(
    text: str, taxonomy: Mapping[str, Iterable[str]] = SKILL_TAXONOMY
) -> list[str]:
    """Return canonical skills present in text, in taxonomy order, deduplicated."""
    text_lower = text.lower()
    found = [skill for skill in _flatten(taxonomy) if skill.lower() in text_lower]
    # dict.fromkeys keeps the first occurrence of skills listed under two categories
    return list(dict.fromkeys(found))


def filter_matched_skills(skills: Iterable[str], job_description: str) -> list[str]:
    """Keep skills that appear verbatim in the job description.

    Unlike extract_skills this test is case-sensitive: "python" in a job
    description does not match the canonical "Python".
    """
    return [skill for skill in skills if skill in job_description]


def group_skills(
    skills: Iterable[str], taxonomy: Mapping[str, Iterable[str]] = SKILL_TAXONOMY
) -> list[SkillCategory]:
    """Group canonical skills by their taxonomy category, skipping empty categories."""
    wanted = set(skills)
    groups = []
    for category, members in taxonomy.items():
        present = [skill for skill in members if skill in wanted]
        if present:
            groups.append(SkillCategory(category=category, skills=present))
    return groups
