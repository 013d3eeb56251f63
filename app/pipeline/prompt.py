from __future__ import annotations

from app.ai.types import ChatMessage
from app.schemas.cv import JobTargeting

SYSTEM_PROMPT = (
    "You are an expert resume parser. Extract information from resume text and return "
    "structured JSON. Always return valid JSON format."
)

RESUME_SCHEMA_TEMPLATE = """{
  "header": {
    "name": "ACTUAL NAME FROM RESUME",
    "email": "ACTUAL EMAIL",
    "phone": "ACTUAL PHONE",
    "linkedin": "",
    "github": ""
  },
  "summary": "Professional summary based on the resume",
  "experience": [
    {
      "title": "ACTUAL JOB TITLE",
      "company": "ACTUAL COMPANY",
      "duration": "ACTUAL DATES",
      "bullets": ["Improved responsibility 1", "Enhanced responsibility 2"]
    }
  ],
  "projects": [
    {
      "title": "ACTUAL PROJECT NAME",
      "description": "Project description",
      "bullets": ["Project detail 1", "Project detail 2"]
    }
  ],
  "education": [
    {
      "degree": "ACTUAL DEGREE",
      "institution": "ACTUAL INSTITUTION",
      "duration": "ACTUAL DATES",
      "gpa": "ACTUAL GPA IF MENTIONED"
    }
  ],
  "skills": {
    "technical": ["ACTUAL SKILLS FROM RESUME"]
  },
  "achievements": ["ACTUAL ACHIEVEMENTS"]
}"""

_INSTRUCTION_HEADER = (
    "Extract and improve the following resume content. "
    "Return ONLY valid JSON in this exact format:"
)


def _targeting_lines(job: JobTargeting | None) -> list[str]:
    if job is None:
        return []
    lines: list[str] = []
    if job.job_description:
        lines.append(f"Target job: {job.job_description}")
    if job.company_name:
        lines.append(f"Company: {job.company_name}")
    if job.position:
        lines.append(f"Position: {job.position}")
    return lines


def build_instruction(cv_text: str, job: JobTargeting | None = None) -> str:
    parts = [
        _INSTRUCTION_HEADER,
        RESUME_SCHEMA_TEMPLATE,
        f"Resume content:\n{cv_text}",
    ]
    targeting = _targeting_lines(job)
    if targeting:
        parts.append("\n".join(targeting))
    return "\n\n".join(parts)


def build_messages(cv_text: str, job: JobTargeting | None = None) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_instruction(cv_text, job)),
    ]
