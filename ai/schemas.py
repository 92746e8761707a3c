"""Declared shapes for portfolio content and every AI flow's input and output.

Leaf strings are StrictStr so a model answering {"answer": 42} is rejected
instead of coerced.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from ai.errors import FlowValidationError

MAX_LABEL_LENGTH = 36
MAX_QUESTION_LENGTH = 140


# ── portfolio snapshot ────────────────────────────────────────────────────────

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Project(_Frozen):
    name: StrictStr
    title: StrictStr
    technologies: StrictStr
    description: StrictStr
    link: Optional[StrictStr] = None


class Experience(_Frozen):
    company: StrictStr
    role: StrictStr
    period: StrictStr
    description: StrictStr


class Contact(_Frozen):
    name: StrictStr
    value: StrictStr
    link: StrictStr


class Skill(_Frozen):
    name: StrictStr
    level: StrictStr  # Beginner | Intermediate | Advanced | Expert
    category: StrictStr


class PortfolioSnapshot(_Frozen):
    about_me: StrictStr
    skills: tuple[StrictStr, ...]
    projects: tuple[Project, ...]
    experience: tuple[Experience, ...]
    contact: tuple[Contact, ...]


# ── flow inputs ───────────────────────────────────────────────────────────────

class AskInput(BaseModel):
    question: StrictStr = Field(min_length=1, max_length=500)
    portfolio: PortfolioSnapshot


class ProjectDescriptionInput(BaseModel):
    project_name: StrictStr = Field(min_length=1)
    technologies: StrictStr
    brief_overview: StrictStr


class PortfolioInput(BaseModel):
    """Input of the flows that only need portfolio context (skills, suggestions)."""

    portfolio: PortfolioSnapshot


# ── flow outputs ──────────────────────────────────────────────────────────────

class AskOutput(BaseModel):
    answer: StrictStr


class ProjectDescriptionOutput(BaseModel):
    description: StrictStr


SkillsListOutput = TypeAdapter(list[StrictStr])


class PromptSuggestion(BaseModel):
    label: StrictStr
    question: StrictStr


class PromptSuggestionsOutput(BaseModel):
    prompts: list[PromptSuggestion] = Field(min_length=3, max_length=6)


# ── validation ────────────────────────────────────────────────────────────────

def validate(shape, data, stage: str):
    """Validate data against a model class or TypeAdapter.

    Raises FlowValidationError naming the first offending field.
    """
    try:
        if isinstance(shape, TypeAdapter):
            return shape.validate_python(data)
        return shape.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise FlowValidationError(stage, field, first["msg"]) from exc
