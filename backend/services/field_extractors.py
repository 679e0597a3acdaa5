"""Single-field extractors for pasted job postings.

Every function takes normalized posting text (see ``text_normalizer``) and
returns a best-effort value; nothing here raises on odd input. Patterns are
tried in priority order through ``extraction_rules.first_valid``.
"""

import logging
import re

from models.parsed_job import DEFAULT_DEPARTMENT, DEFAULT_TITLE, JobType
from services.extraction_rules import Rule, first_valid
from services.vocabulary import (
    COMPANY_STOPWORDS,
    DEPARTMENT_KEYWORDS,
    GENERIC_TITLE_PHRASES,
    JOB_TYPE_KEYWORDS,
    KNOWN_CITIES,
    OFFICE_KEYWORDS,
    REMOTE_KEYWORDS,
    SKILL_GROUPS,
    TITLE_KEYWORDS,
    TITLE_LEAD_FILLERS,
    TITLE_NOISE_GLYPHS,
    alternation,
    literal_alternation,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Job title
# ---------------------------------------------------------------------------

_TITLE_KEYWORD_RE = re.compile(alternation(TITLE_KEYWORDS), re.IGNORECASE)
_TITLE_NOISE_RE = re.compile(f"[{re.escape(TITLE_NOISE_GLYPHS)}]+")
_TITLE_LEAD_RE = re.compile(
    rf"^{literal_alternation(TITLE_LEAD_FILLERS)}\b[\s:\-]*", re.IGNORECASE
)
_TITLE_ARTICLE_RE = re.compile(r"^(?:an?|the)\s+", re.IGNORECASE)
_TITLE_TRAILING_RE = re.compile(r"(?:^|\s+)(?:to join|in|at)\b.*$|\s*!.*$", re.IGNORECASE | re.DOTALL)
_LEADING_PUNCT_RE = re.compile(r"^[\s:\-]+")

# A title candidate ends before one of these
_TITLE_END = r"(?=\s+to join\b|\s+in\b|\s+at\b|\s*!|\s*\n)"


def clean_job_title(title: str) -> str:
    """Strip decorations, filler phrases and trailing clauses from a title."""
    title = _TITLE_NOISE_RE.sub("", title).strip()
    title = _LEADING_PUNCT_RE.sub("", title)
    title = _TITLE_LEAD_RE.sub("", title)
    title = _TITLE_ARTICLE_RE.sub("", title)
    title = _TITLE_TRAILING_RE.sub("", title)
    title = _LEADING_PUNCT_RE.sub("", title)
    return title.strip()


def is_valid_job_title(title: str) -> bool:
    if not title or len(title) < 5 or len(title) > 100:
        return False
    if title.strip().lower() in GENERIC_TITLE_PHRASES:
        return False
    return bool(_TITLE_KEYWORD_RE.search(title))


def _title_rule(name: str, pattern: str, flags: int = re.IGNORECASE) -> Rule:
    return Rule(name, re.compile(pattern, flags), is_valid_job_title, clean_job_title)


TITLE_RULES: list[Rule] = [
    _title_rule(
        "hiring_phrase",
        r"(?:hiring|looking for|seeking).{0,50}?(?:an?\s+)?([^.\n!]{10,80}?)" + _TITLE_END,
    ),
    _title_rule(
        "position_phrase",
        r"(?:position|role|vacancy|opening).{0,20}?:?\s*([^.\n!]{10,80}?)" + _TITLE_END,
    ),
    _title_rule("we_are_hiring", r"we're hiring.{0,30}?([^.\n!]{10,80}?)" + _TITLE_END),
    _title_rule("emoji_role_label", r"🧑‍💼\s*role\s*:?\s*([^.\n!]{10,80}?)(?=\s*\n|\s*-|\Z)"),
    _title_rule("role_label", r"\brole\s*:?\s*([^.\n!]{15,80}?)(?=\s*\n|\s*-|\Z)"),
    _title_rule(
        "title_label",
        r"(?:job title|position|role|vacancy)\s*:?\s*([^.\n!]{10,80}?)(?=\s*\n|\Z)",
    ),
    _title_rule("double_quoted", r'"([^"]{10,80}?)"'),
    _title_rule("single_quoted", r"'([^']{10,80})'"),
    _title_rule(
        "capitalized_line",
        r"^.{0,100}?([A-Z][^.\n!]{15,80}?)(?=\s*\(|$)",
        re.MULTILINE,
    ),
]


def extract_title(text: str) -> str:
    """Find the job title, falling back to the first line, then a placeholder."""
    title = first_valid(text, TITLE_RULES)
    if title:
        return title

    first_line = text.split("\n", 1)[0].strip()
    if 10 <= len(first_line) <= 100:
        cleaned = clean_job_title(first_line)
        if is_valid_job_title(cleaned):
            return cleaned

    return DEFAULT_TITLE


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

_CITY_RE = re.compile(rf"\b{literal_alternation(KNOWN_CITIES)}\b", re.IGNORECASE)
_PLACE_CHARS_RE = re.compile(r"[A-Za-z\s,.-]+")
_LINE_END = r"(?=\s*\n|\Z)"


def is_valid_location(location: str) -> bool:
    """Known city anywhere in the value, or nothing but letters and separators."""
    if not location or len(location) < 2 or len(location) > 50:
        return False
    return bool(_CITY_RE.search(location) or _PLACE_CHARS_RE.fullmatch(location))


def _location_rule(name: str, pattern: str) -> Rule:
    return Rule(name, re.compile(pattern, re.IGNORECASE), is_valid_location)


LOCATION_RULES: list[Rule] = [
    _location_rule("pin_label", r"📍\s*location\s*:?\s*([^.\n]{3,50}?)" + _LINE_END),
    _location_rule("location_label", r"\blocation\s*:?\s*([^.\n]{3,50}?)" + _LINE_END),
    _location_rule("based_in", r"\bbased\s+in\s+([^.\n]{3,50}?)" + _LINE_END),
    _location_rule("office_in", r"\boffice\s+in\s+([^.\n]{3,50}?)" + _LINE_END),
    _location_rule(
        "work_from_office",
        r"\bwork\s+from\s+(?:our\s+|the\s+)?([^.\n]{3,50}?)\s+office\b",
    ),
]


def extract_location(text: str) -> str:
    return first_valid(text, LOCATION_RULES)


# ---------------------------------------------------------------------------
# Work arrangement
# ---------------------------------------------------------------------------

_REMOTE_RE = re.compile(rf"\b{alternation(REMOTE_KEYWORDS)}", re.IGNORECASE)
_OFFICE_RE = re.compile(rf"\b{alternation(OFFICE_KEYWORDS)}", re.IGNORECASE)


def extract_remote_availability(text: str) -> bool:
    """Remote wording wins over office wording; silence means office."""
    if _REMOTE_RE.search(text):
        return True
    if _OFFICE_RE.search(text):
        return False
    return False


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

EXPERIENCE_RULES: list[Rule] = [
    Rule("experience_label", re.compile(
        r"🕓?\s*experience\s*:?\s*(\d+\s*[-–]\s*\d+\s*years?)", re.IGNORECASE)),
    Rule("range_of_experience", re.compile(
        r"(\d+\s*[-–]\s*\d+)\s*years?\s*(?:of\s*)?experience", re.IGNORECASE)),
    Rule("minimum_range", re.compile(
        r"minimum\s*(\d+\s*[-–]\s*\d+)\s*years", re.IGNORECASE)),
    Rule("years_plus", re.compile(
        r"(\d+\+?)\s*years?\s*(?:of\s*)?experience", re.IGNORECASE)),
]


def extract_experience(text: str) -> str:
    """Experience text as written in the posting, e.g. ``"4 - 8 Years"``."""
    return first_valid(text, EXPERIENCE_RULES)


# ---------------------------------------------------------------------------
# Salary
# ---------------------------------------------------------------------------

_CURRENCY = r"(?:rs\.?\s*|₹\s*)?"
SALARY_RE = re.compile(
    rf"(?:salary|ctc|package)\s*:?\s*{_CURRENCY}(\d[\d,]*)\s*[-–]\s*{_CURRENCY}(\d[\d,]*)",
    re.IGNORECASE,
)


def _to_int(raw: str) -> int | None:
    digits = raw.replace(",", "")
    return int(digits) if digits.isdigit() else None


def extract_salary_range(text: str) -> tuple[int | None, int | None]:
    """Return ``(min, max)`` from a labeled salary range, or ``(None, None)``."""
    match = SALARY_RE.search(text)
    if not match:
        return None, None
    return _to_int(match.group(1)), _to_int(match.group(2))


def extract_salary_min(text: str) -> int | None:
    return extract_salary_range(text)[0]


def extract_salary_max(text: str) -> int | None:
    return extract_salary_range(text)[1]


# ---------------------------------------------------------------------------
# Job type and department
# ---------------------------------------------------------------------------

_JOB_TYPE_PATTERNS: list[tuple[JobType, re.Pattern]] = [
    (job_type, re.compile(rf"\b{alternation(fragments)}\b", re.IGNORECASE))
    for job_type, fragments in JOB_TYPE_KEYWORDS
]

_DEPARTMENT_PATTERNS: list[tuple[str, re.Pattern]] = [
    (department, re.compile(rf"\b{alternation(fragments)}", re.IGNORECASE))
    for department, fragments in DEPARTMENT_KEYWORDS
]


def extract_job_type(text: str) -> JobType:
    """First matching category wins: contract, part time, internship."""
    for job_type, pattern in _JOB_TYPE_PATTERNS:
        if pattern.search(text):
            return job_type
    return "full_time"


def extract_department(title: str) -> str:
    """Infer the department from an already extracted job title."""
    lower_title = title.lower()
    for department, pattern in _DEPARTMENT_PATTERNS:
        if pattern.search(lower_title):
            return department
    return DEFAULT_DEPARTMENT


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

# Boundaries that keep "java" out of "javascript" and "ts" out of "its"
_SKILL_PATTERNS: list[tuple[str, re.Pattern]] = [
    (group, re.compile(rf"(?<![\w.#]){literal_alternation(words)}(?![\w#+])", re.IGNORECASE))
    for group, words in SKILL_GROUPS
]


def extract_skills(text: str) -> str:
    """Comma-joined skill keywords, lower-cased, in first-seen order per group."""
    skills: dict[str, None] = {}
    for _, pattern in _SKILL_PATTERNS:
        for match in pattern.finditer(text):
            skills.setdefault(match.group().lower(), None)
    return ", ".join(skills)


# ---------------------------------------------------------------------------
# Company name
# ---------------------------------------------------------------------------

_COMPANY_CHARS_RE = re.compile(r"[A-Za-z0-9 &.-]+")


def is_valid_company_name(name: str) -> bool:
    if not name or len(name) < 2 or len(name) > 50:
        return False
    if name.lower() in COMPANY_STOPWORDS:
        return False
    return bool(_COMPANY_CHARS_RE.fullmatch(name))


COMPANY_RULES: list[Rule] = [
    Rule("hiring_at", re.compile(
        r"\b(?i:hiring at|join|at)\s+([A-Z][A-Za-z0-9 &.]+?)(?=\s*!|[ \t]*$)",
        re.MULTILINE,
    ), is_valid_company_name),
    Rule("is_hiring", re.compile(
        r"\b([A-Z][A-Za-z0-9&.]*(?: [A-Z][A-Za-z0-9&.]*)*) (?i:is )?(?i:hiring)\b",
    ), is_valid_company_name),
    Rule("building_emoji", re.compile(
        r"🏢\s*([A-Za-z0-9 &.]+?)[ \t]*$", re.MULTILINE,
    ), is_valid_company_name),
]


def extract_company_name(text: str) -> str:
    return first_valid(text, COMPANY_RULES)


# ---------------------------------------------------------------------------
# Contact emails
# ---------------------------------------------------------------------------

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def extract_contact_emails(text: str) -> list[str]:
    """Distinct email addresses in the order they first appear."""
    return list(dict.fromkeys(EMAIL_RE.findall(text)))
