"""Smart-import orchestrator: pasted posting text → ParsedJobData.

Flow:
    raw text
      └─ normalize()
           ├─ extract_title()        → title
           │     └─ extract_department(title)
           ├─ section extractors     → description, requirements,
           │                           responsibilities, benefits
           └─ field extractors       → location, salary, job type,
                                       experience, skills, remote,
                                       company, emails

Extractors are pure and independent apart from department, which reads
the extracted title. A failing extractor is logged and replaced by the
field default so a parse always returns a full record.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from models.parsed_job import (
    DEFAULT_DEPARTMENT,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    ParsedJobData,
)
from services import field_extractors, section_parser
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _safe(field: str, extractor: Callable[[str], T], text: str, default: T) -> T:
    try:
        return extractor(text)
    except Exception as e:
        logger.warning("Extractor for %s failed, using default: %s", field, e)
        return default


def parse_job_posting(text: str | None) -> ParsedJobData:
    """Extract every job field from a pasted posting. Never raises."""
    normalized = normalize(text or "")

    title = _safe("title", field_extractors.extract_title, normalized, DEFAULT_TITLE)
    salary_min, salary_max = _safe(
        "salary", field_extractors.extract_salary_range, normalized, (None, None)
    )

    parsed = ParsedJobData(
        title=title,
        description=_safe(
            "description", section_parser.extract_description, normalized, DEFAULT_DESCRIPTION
        ),
        requirements=_safe("requirements", section_parser.extract_requirements, normalized, ""),
        responsibilities=_safe(
            "responsibilities", section_parser.extract_responsibilities, normalized, ""
        ),
        department=_safe(
            "department", field_extractors.extract_department, title, DEFAULT_DEPARTMENT
        ),
        location=_safe("location", field_extractors.extract_location, normalized, ""),
        salary_min=salary_min,
        salary_max=salary_max,
        job_type=_safe("job_type", field_extractors.extract_job_type, normalized, "full_time"),
        experience_level=_safe(
            "experience_level", field_extractors.extract_experience, normalized, ""
        ),
        skills=_safe("skills", field_extractors.extract_skills, normalized, ""),
        benefits=_safe("benefits", section_parser.extract_benefits, normalized, ""),
        is_remote_available=_safe(
            "is_remote_available", field_extractors.extract_remote_availability, normalized, False
        ),
        company_name=_safe("company_name", field_extractors.extract_company_name, normalized, ""),
        contact_emails=_safe(
            "contact_emails", field_extractors.extract_contact_emails, normalized, []
        ),
    )

    logger.debug("Parsed posting %r (%d chars)", parsed.title, len(normalized))
    return parsed
