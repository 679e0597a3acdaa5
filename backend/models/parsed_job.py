"""Structured output of the job-posting parser."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

JobType = Literal["full_time", "part_time", "contract", "internship"]

DEFAULT_TITLE = "Job Position"
DEFAULT_DEPARTMENT = "General"
DEFAULT_DESCRIPTION = "Join our dynamic team and make a real impact in our organization."


class BulletSection(BaseModel):
    """A header line and the bullet lines found under it."""
    title: str
    content: str = ""


class ParsedJobData(BaseModel):
    """Best-effort fields pulled from a pasted job posting.

    Absent values are empty strings, None (salary bounds), False or an
    empty list. ``model_dump(by_alias=True)`` gives the camelCase names
    the job form expects.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    requirements: str = ""
    responsibilities: str = ""
    department: str = DEFAULT_DEPARTMENT
    location: str = ""
    salary_min: int | None = None
    salary_max: int | None = None
    job_type: JobType = "full_time"
    experience_level: str = ""
    skills: str = ""  # ", "-joined
    benefits: str = ""
    is_remote_available: bool = False
    company_name: str = ""
    contact_emails: list[str] = []
