"""Hand-off from a parsed posting to the job-creation form.

A recruiter reviews smart-import results before saving, so this module
maps a ``ParsedJobData`` onto the form draft and grades how trustworthy
each reviewed field looks.
"""

from config import Settings
from config import settings as app_settings
from models.job_draft import FieldConfidence, JobDraft
from models.parsed_job import ParsedJobData

# Fields shown for review, by wire name
REVIEWED_FIELDS: tuple[str, ...] = (
    "title", "location", "experienceLevel", "jobType", "isRemoteAvailable",
    "skills", "department", "companyName",
)

# Strings at or under this length are shown as low confidence
_SHORT_VALUE_LENGTH = 10


def to_job_draft(parsed: ParsedJobData, settings: Settings | None = None) -> JobDraft:
    """Pre-fill a job-creation draft. Zero salary bounds count as unknown."""
    if settings is None:
        settings = app_settings

    return JobDraft(
        title=parsed.title,
        description=parsed.description,
        requirements=parsed.requirements,
        responsibilities=parsed.responsibilities,
        department=parsed.department,
        location=parsed.location,
        salary_min=parsed.salary_min or None,
        salary_max=parsed.salary_max or None,
        job_type=parsed.job_type,
        status=settings.draft_status,
        priority=settings.draft_priority,
        experience_level=parsed.experience_level,
        skills=parsed.skills,
        benefits=parsed.benefits,
        is_remote_available=parsed.is_remote_available,
        application_deadline=None,
    )


def count_detected_fields(parsed: ParsedJobData) -> int:
    """Number of fields holding a value. An empty email list counts as absent."""
    return sum(1 for value in parsed.model_dump().values() if value)


def field_confidence(value: object) -> FieldConfidence:
    if not value:
        return "missing"
    if isinstance(value, bool):
        return "high"
    if isinstance(value, (str, list)):
        return "high" if len(value) > _SHORT_VALUE_LENGTH else "low"
    return "low"


def review_fields(parsed: ParsedJobData) -> dict[str, FieldConfidence]:
    """Confidence per reviewed field, keyed by wire name."""
    data = parsed.model_dump(by_alias=True)
    return {name: field_confidence(data[name]) for name in REVIEWED_FIELDS}
