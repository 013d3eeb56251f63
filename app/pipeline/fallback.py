from __future__ import annotations

import re

from app.schemas.resume import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeHeader,
    ResumeSkills,
    ResumeStructure,
)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
NAME_TOKEN_RE = re.compile(r"[A-Za-z]{1,19}")

NAME_TOKEN_LIMIT = 2

# Fixed placeholders; this mode does not attempt section extraction.
PLACEHOLDER_SUMMARY = "Professional with technical background and experience."
PLACEHOLDER_EXPERIENCE = ExperienceEntry(
    title="Professional Experience",
    company="Technology Company",
    duration="Recent",
    bullets=["Professional experience in technology sector"],
)
PLACEHOLDER_PROJECT = ProjectEntry(
    title="Technical Project",
    description="Software development project",
    bullets=["Developed technical solution"],
)
PLACEHOLDER_EDUCATION = EducationEntry(
    degree="Academic Qualification",
    institution="Educational Institution",
    duration="Completed",
    gpa="",
)
PLACEHOLDER_SKILLS = ["Technical Skills"]
PLACEHOLDER_ACHIEVEMENTS = ["Professional achievements"]


def split_lines(text: str) -> list[str]:
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def _first_match(pattern: re.Pattern[str], lines: list[str]) -> str:
    for line in lines:
        match = pattern.search(line)
        if match:
            return match.group(0).strip()
    return ""


def find_email(lines: list[str]) -> str:
    return _first_match(EMAIL_RE, lines)


def find_phone(lines: list[str]) -> str:
    return _first_match(PHONE_RE, lines)


def guess_name(first_line: str) -> str:
    tokens: list[str] = []
    for word in first_line.split(" "):
        if not word:
            continue
        if not NAME_TOKEN_RE.fullmatch(word):
            break
        tokens.append(word)
    if len(tokens) < 2:
        return ""
    return " ".join(tokens[:NAME_TOKEN_LIMIT])


def extract_fallback_structure(text: str) -> ResumeStructure:
    lines = split_lines(text)
    header = ResumeHeader(
        name=guess_name(lines[0]) if lines else "",
        email=find_email(lines),
        phone=find_phone(lines),
    )
    return ResumeStructure(
        header=header,
        summary=PLACEHOLDER_SUMMARY,
        experience=[PLACEHOLDER_EXPERIENCE.model_copy(deep=True)],
        projects=[PLACEHOLDER_PROJECT.model_copy(deep=True)],
        education=[PLACEHOLDER_EDUCATION.model_copy(deep=True)],
        skills=ResumeSkills(technical=list(PLACEHOLDER_SKILLS)),
        achievements=list(PLACEHOLDER_ACHIEVEMENTS),
    )
