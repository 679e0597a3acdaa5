"""Job posting section segmentation: bullet sections and free-text description."""

import logging
import re

from models.parsed_job import DEFAULT_DESCRIPTION, BulletSection
from services.vocabulary import (
    BENEFIT_RUN_KEYWORDS,
    BULLET_MARKERS,
    DESCRIPTION_END_MARKERS,
    DESCRIPTION_START_MARKERS,
    REQUIREMENT_RUN_KEYWORDS,
    REQUIREMENT_SECTION_KEYWORDS,
    RESPONSIBILITY_RUN_KEYWORDS,
    RESPONSIBILITY_SECTION_KEYWORDS,
    alternation,
)

logger = logging.getLogger(__name__)

_BULLETS = re.escape(BULLET_MARKERS)

# "🔑 Key Skills", "Requirements:", "WHAT YOU'LL DO:", "✅ Key Requirements:"
HEADER_RE = re.compile(r"^(?:🔑|(?:[^\w\s•▪\-]+\s*)?[A-Z][^:]*:$)")
BULLET_RE = re.compile(rf"^[{_BULLETS}]")
_BULLET_PREFIX_RE = re.compile(rf"^[{_BULLETS}]\s*")

_REQUIREMENT_TITLE_RE = re.compile(alternation(REQUIREMENT_SECTION_KEYWORDS), re.IGNORECASE)
_RESPONSIBILITY_TITLE_RE = re.compile(alternation(RESPONSIBILITY_SECTION_KEYWORDS), re.IGNORECASE)


# A block of consecutive bullet lines
_BULLET_RUN_RE = re.compile(rf"(?:^[ \t]*[{_BULLETS}].*(?:\n|\Z))+", re.MULTILINE)

_REQUIREMENT_KEYWORD_RE = re.compile(alternation(REQUIREMENT_RUN_KEYWORDS), re.IGNORECASE)
_RESPONSIBILITY_KEYWORD_RE = re.compile(alternation(RESPONSIBILITY_RUN_KEYWORDS), re.IGNORECASE)
_BENEFIT_KEYWORD_RE = re.compile(alternation(BENEFIT_RUN_KEYWORDS), re.IGNORECASE)


def _bullet_run_after(text: str, keyword_re: re.Pattern) -> str:
    """Cleaned bullet block nearest after the first keyword, or ''.

    Only the first keyword is tried: any run found after a later keyword
    also follows the first one.
    """
    keyword = keyword_re.search(text)
    if not keyword:
        return ""
    run = _BULLET_RUN_RE.search(text, keyword.end())
    return clean_bullet_points(run.group()) if run else ""


def extract_bullet_sections(text: str) -> list[BulletSection]:
    """Group bullet lines under the header line that precedes them.

    Bullets before the first header and lines that are neither headers
    nor bullets are ignored.
    """
    sections: list[BulletSection] = []
    current: BulletSection | None = None
    current_lines: list[str] = []

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue

        if HEADER_RE.match(stripped):
            if current is not None:
                current.content = "\n".join(current_lines)
                sections.append(current)
            current = BulletSection(title=stripped)
            current_lines = []
        elif current is not None and BULLET_RE.match(stripped):
            current_lines.append(stripped)

    if current is not None:
        current.content = "\n".join(current_lines)
        sections.append(current)

    return sections


def clean_bullet_points(text: str) -> str:
    """Trim bullet lines, drop blanks and normalize every marker to '• '."""
    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(_BULLET_PREFIX_RE.sub("• ", line) for line in lines if line)


def _section_or_run(
    text: str, title_re: re.Pattern, keyword_re: re.Pattern, field: str
) -> str:
    for section in extract_bullet_sections(text):
        if section.content and title_re.search(section.title):
            logger.debug("%s taken from section %r", field, section.title)
            return section.content

    run = _bullet_run_after(text, keyword_re)
    if run:
        logger.debug("%s taken from bullet run after keyword", field)
    return run


def extract_requirements(text: str) -> str:
    return _section_or_run(text, _REQUIREMENT_TITLE_RE, _REQUIREMENT_KEYWORD_RE, "requirements")


def extract_responsibilities(text: str) -> str:
    return _section_or_run(
        text, _RESPONSIBILITY_TITLE_RE, _RESPONSIBILITY_KEYWORD_RE, "responsibilities"
    )


def extract_benefits(text: str) -> str:
    return _bullet_run_after(text, _BENEFIT_KEYWORD_RE)


def extract_description(text: str) -> str:
    """Free text between the pitch line and the first structured section.

    The pitch starts at the first line mentioning a hook such as
    "passionate" or "join" (or the first line when none does) and stops
    before the first line naming responsibilities, requirements or
    qualifications.
    """
    lines = text.split("\n")

    start = 0
    for i, line in enumerate(lines):
        lower = line.lower()
        if any(marker in lower for marker in DESCRIPTION_START_MARKERS):
            start = i
            break

    end = len(lines)
    for i in range(start, len(lines)):
        lower = lines[i].lower()
        if any(marker in lower for marker in DESCRIPTION_END_MARKERS):
            end = i
            break

    description = "\n".join(lines[start:end]).strip()
    return description or DEFAULT_DESCRIPTION
