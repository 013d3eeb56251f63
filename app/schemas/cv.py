from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.resume import ResumeStructure


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PipelineMode(str, Enum):
    MODEL_DERIVED = "model-derived"
    HEURISTIC_FALLBACK = "heuristic-fallback"


class JobTargeting(CamelModel):
    company_name: str = ""
    position: str = ""
    job_description: str = ""

    @field_validator("company_name", "position", "job_description", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    def is_empty(self) -> bool:
        return not (self.company_name or self.position or self.job_description)


class QualityAnalysis(CamelModel):
    score: int = Field(ge=0, le=100)
    structure_detection: str
    content_enhancement: str
    ats_optimization: str


class PipelineResult(CamelModel):
    mode: PipelineMode
    structured_data: ResumeStructure
    quality_analysis: QualityAnalysis
    improvements_narrative: list[str] = Field(default_factory=list)
    cover_letter_paragraph: str = ""
    pipeline_description: str = ""


# HTTP payloads

class ImproveRequest(JobTargeting):
    cv_text: str = Field(
        default="",
        validation_alias=AliasChoices("cvText", "cv_text", "cvContent"),
    )

    def targeting(self) -> JobTargeting:
        return JobTargeting(
            company_name=self.company_name,
            position=self.position,
            job_description=self.job_description,
        )


class ImproveResponse(PipelineResult):
    success: bool = True
    message: str = ""
    html_content: str = ""


class UploadResponse(CamelModel):
    success: bool = True
    text: str
    page_count: int
    characters: int
    original_file_name: str = ""


class RenderRequest(CamelModel):
    structured_data: ResumeStructure | None = None
    html_content: str | None = None
