from __future__ import annotations

from pydantic import BaseModel, Field


class WorkEntry(BaseModel):
    position: str = ""
    company: str = ""
    duration: str = ""
    description: list[str] = Field(default_factory=list)


class ParsedResume(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    skills: list[str] = Field(default_factory=list)
    experience_years: float = 0
    education: str = ""
    location: str = ""
    summary: str = Field(default="", max_length=500)
    work_experience: list[WorkEntry] = Field(default_factory=list)
