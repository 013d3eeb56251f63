from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Base for resume records: camelCase on the wire, nulls fall back to defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ResumeHeader(ResumeModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = Field(
        default="",
        validation_alias=AliasChoices("linkedinUrl", "linkedin_url", "linkedin"),
        serialization_alias="linkedinUrl",
    )
    github_url: str = Field(
        default="",
        validation_alias=AliasChoices("githubUrl", "github_url", "github"),
        serialization_alias="githubUrl",
    )


class ExperienceEntry(ResumeModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    bullets: list[str] = Field(default_factory=list)


class ProjectEntry(ResumeModel):
    title: str = ""
    description: str = ""
    bullets: list[str] = Field(default_factory=list)


class EducationEntry(ResumeModel):
    degree: str = ""
    institution: str = ""
    duration: str = ""
    gpa: str = ""


class ResumeSkills(ResumeModel):
    technical: list[str] = Field(default_factory=list)


class ResumeStructure(ResumeModel):
    header: ResumeHeader = Field(default_factory=ResumeHeader)
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: ResumeSkills = Field(default_factory=ResumeSkills)
    achievements: list[str] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
