from __future__ import annotations

from app.schemas.cv import JobTargeting, PipelineMode, QualityAnalysis

MODEL_SCORE = 94
FALLBACK_SCORE = 80

MODEL_IMPROVEMENTS = (
    "AI-powered parsing with a large language model",
    "Enhanced content with action verbs",
    "Structured data extraction",
    "ATS-optimized formatting",
)
FALLBACK_IMPROVEMENTS = ("Basic parsing and structure",)

PIPELINE_DESCRIPTIONS = {
    PipelineMode.MODEL_DERIVED: "PDF/Text → Normalize → LLM JSON → Parse → HTML",
    PipelineMode.HEURISTIC_FALLBACK: "PDF/Text → Normalize → Heuristic Extraction → HTML",
}


def build_quality_analysis(mode: PipelineMode, *, model_label: str = "LLM") -> QualityAnalysis:
    if mode is PipelineMode.MODEL_DERIVED:
        return QualityAnalysis(
            score=MODEL_SCORE,
            structure_detection=model_label,
            content_enhancement="Excellent",
            ats_optimization="Strong",
        )
    return QualityAnalysis(
        score=FALLBACK_SCORE,
        structure_detection="Basic",
        content_enhancement="Basic",
        ats_optimization="Basic",
    )


def build_improvements(mode: PipelineMode) -> list[str]:
    if mode is PipelineMode.MODEL_DERIVED:
        return list(MODEL_IMPROVEMENTS)
    return list(FALLBACK_IMPROVEMENTS)


def build_cover_letter(mode: PipelineMode, job: JobTargeting | None = None) -> str:
    job = job or JobTargeting()
    if mode is PipelineMode.MODEL_DERIVED:
        return (
            f"I am excited to apply for {job.position or 'this position'} at "
            f"{job.company_name or 'your organization'}. My background in technology and "
            "demonstrated skills make me a strong candidate for this role."
        )
    return f"I am interested in the {job.position or 'position'} at {job.company_name or 'your company'}."


def describe_pipeline(mode: PipelineMode) -> str:
    return PIPELINE_DESCRIPTIONS[mode]
