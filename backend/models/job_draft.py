"""Job-creation form payload pre-filled from a smart import."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.parsed_job import JobType

FieldConfidence = Literal["missing", "low", "high"]


class JobDraft(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    description: str = ""
    requirements: str = ""
    responsibilities: str = ""
    department: str = ""
    location: str = ""
    salary_min: int | None = None
    salary_max: int | None = None
    job_type: JobType = "full_time"
    status: str = "draft"
    priority: str = "medium"
    experience_level: str = ""
    skills: str = ""
    benefits: str = ""
    is_remote_available: bool = False
    application_deadline: str | None = None
