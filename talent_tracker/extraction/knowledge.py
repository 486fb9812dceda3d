"""Fixed keyword tables used by the resume extraction stages.

All tables are immutable and shared across calls. Skill vocabulary and
variant spellings live in the taxonomy package.
"""

from __future__ import annotations

SKILLS_SECTION_KEYWORDS: tuple[str, ...] = (
    "skills",
    "technical skills",
    "professional skills",
    "core competencies",
    "technologies",
    "expertise",
)

# Headers that close a skills section when a following line starts with them.
SECTION_STOP_HEADERS: tuple[str, ...] = (
    "experience",
    "education",
    "work history",
    "employment",
    "projects",
    "certifications",
)

EXPERIENCE_SECTION_HEADERS: frozenset[str] = frozenset(
    {
        "experience",
        "work experience",
        "professional experience",
        "employment history",
        "employment",
        "work history",
        "career history",
    }
)

KNOWN_SECTION_HEADERS: frozenset[str] = EXPERIENCE_SECTION_HEADERS | frozenset(
    {
        "summary",
        "professional summary",
        "objective",
        "profile",
        "about",
        "about me",
        "skills",
        "technical skills",
        "professional skills",
        "core competencies",
        "technologies",
        "expertise",
        "education",
        "projects",
        "certifications",
        "awards",
        "languages",
        "interests",
        "references",
        "publications",
        "volunteer",
        "volunteer experience",
    }
)

EDUCATION_KEYWORDS: tuple[str, ...] = (
    "bachelor",
    "master",
    "phd",
    "b.s.",
    "m.s.",
    "b.tech",
    "m.tech",
    "mba",
    "degree",
)

SUMMARY_KEYWORDS: tuple[str, ...] = ("summary", "objective", "profile", "about")

LOCATION_EXCLUSIONS: tuple[str, ...] = (
    "university", "college", "institute", "school",
    "vercel", "github", "linkedin", "deployed", "live",
    "bachelor", "master", "degree", "certification",
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
    "experience", "summary", "skills", "education", "work",
    "project", "stack", "tech", "tools",
    "deployment", "enhancement", "maintenance", "development",
    "implementation", "migration", "testing", "analysis", "design",
    "production", "environment", "solution", "process",
)

KNOWN_CITIES: tuple[str, ...] = (
    "new york", "los angeles", "chicago", "houston", "phoenix",
    "philadelphia", "san antonio", "san diego", "dallas", "san jose",
    "austin", "jacksonville", "san francisco", "columbus", "indianapolis",
    "seattle", "denver", "boston", "portland", "detroit", "miami",
    "atlanta", "nashville", "baltimore", "milwaukee", "albuquerque",
    "toronto", "vancouver", "montreal", "calgary",
    "london", "paris", "berlin", "madrid", "rome",
    "mumbai", "delhi", "bangalore", "hyderabad", "chennai",
    "kolkata", "pune", "ahmedabad", "jaipur", "lucknow",
)
