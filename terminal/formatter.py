"""Build renderable Output nodes for the web terminal.

The page only displays what it receives; every decision (wording, error
classification, which links to show) is made here.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field

from ai.errors import (
    CooldownError,
    FlowValidationError,
    MissingConfigError,
    ProviderError,
)
from ai.schemas import Project, Skill
import portfolio

OutputKind = Literal["empty", "clear", "text", "list", "project", "notice", "error"]


class Link(BaseModel):
    label: str
    href: str


class Output(BaseModel):
    kind: OutputKind = "text"
    title: Optional[str] = None
    subtitle: Optional[str] = None
    lines: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    # A command the page may render as clickable (e.g. "did you mean")
    highlight: Optional[str] = None


COMMAND_HELP = {
    "help": "Show this help message",
    "aboutme": "Who I am and what I do",
    "skills": "Technical skills (AI-curated)",
    "skill": "skill <name> - proficiency and category for one skill",
    "projects": "List my projects",
    "project": "project <name> - details for one project (AI-written)",
    "experience": "Work history",
    "education": "Degrees and schools",
    "resume": "Resume summary and download link",
    "contact": "How to reach me",
    "ask": 'ask "<question>" - ask the AI anything about me',
    "coffee": "Refuel the terminal",
    "cat": "Summon the terminal cat",
    "clear": "Clear the terminal",
}

_COFFEE = r"""
   ( (
    ) )
  ........
  |      |]
  \      /
   `----'
Coffee deployed."""

_CAT = r"""
  ⢀⡴⠑⡄⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢀⠀⠀⠀
  ⠸⡇⠀⠿⡿⠁⠀⠀⠀⠀⢀⡴⠚⠉⠉⠢⡀
  ⠀⠀⠀⠀⠑⡄⠀⠀⠀⡰⠁⠀⠀⠀⠀⠀⡇
  ⠀⠀⠀⠀⠀⠘⠢⠤⠴⠁⠀⠀⠀⠀⠀⢀⠇
  ⠀⠀⠀⠀⠀⠀⠀⠀⠘⠤⠤⠤⠤⠤⠚⠁
meow."""


def empty() -> Output:
    return Output(kind="empty")


def clear() -> Output:
    return Output(kind="clear")


def text(*lines: str) -> Output:
    return Output(kind="text", lines=list(lines))


def format_help(commands) -> Output:
    return Output(
        kind="list",
        title="Available commands",
        lines=[f"{name:<12}{COMMAND_HELP.get(name, '')}" for name in commands],
    )


def format_about() -> Output:
    return Output(kind="text", lines=portfolio.ABOUT_ME.splitlines())


def format_skills(skills: list[str]) -> Output:
    return Output(kind="list", title="Skills", lines=list(skills))


def format_skill(skill: Skill) -> Output:
    return Output(
        kind="list",
        title=skill.name,
        subtitle=skill.category,
        lines=[f"Level: {skill.level}"],
    )


def format_skill_not_found(name: str) -> Output:
    return text(f"Skill not found: {name}. Try 'skills' to see what I work with.")


def format_projects() -> Output:
    return Output(
        kind="list",
        title="Here are my projects. Use 'project <name>' to see details.",
        lines=[f"{p.name:<20} - {p.title}" for p in portfolio.PROJECTS],
    )


def format_project(project: Project, description: str) -> Output:
    links = [Link(label="View on GitHub", href=project.link)] if project.link else []
    return Output(
        kind="project",
        title=project.title,
        subtitle=project.technologies,
        lines=description.strip().splitlines(),
        links=links,
    )


def format_project_not_found(name: str) -> Output:
    return text(f"Project not found: {name}. Try 'projects' to see a list of available projects.")


def format_experience() -> Output:
    lines = []
    for exp in portfolio.EXPERIENCE:
        lines.extend([f"{exp.role} @ {exp.company}", exp.period, exp.description, ""])
    return Output(kind="list", title="Experience", lines=lines[:-1])


def format_education() -> Output:
    lines = [f"{degree} - {school} ({period})" for degree, school, period in portfolio.EDUCATION]
    return Output(kind="list", title="Education", lines=lines)


def format_resume() -> Output:
    first_line = portfolio.ABOUT_ME.splitlines()[0]
    return Output(
        kind="text",
        lines=[first_line],
        links=[Link(label="Download resume", href=portfolio.RESUME_URL)],
    )


def format_contact() -> Output:
    return Output(
        kind="list",
        title="Contact",
        lines=[f"{c.name}: {c.value}" for c in portfolio.CONTACT],
        links=[Link(label=c.value, href=c.link) for c in portfolio.CONTACT],
    )


def format_coffee() -> Output:
    return Output(kind="text", lines=_COFFEE.strip("\n").splitlines())


def format_cat() -> Output:
    return Output(kind="text", lines=_CAT.strip("\n").splitlines())


def format_unknown(name: str, suggestion: Optional[str]) -> Output:
    if suggestion:
        return Output(
            kind="text",
            lines=[f"Command not found: {name}. Did you mean: {suggestion}?"],
            highlight=suggestion,
        )
    return text(f"Command not found: {name}. Type 'help' for a list of commands.")


# ── AI errors ─────────────────────────────────────────────────────────────────

def format_ai_error(exc: Exception) -> Output:
    """Map any AI-path failure to one user-facing message.

    Raw exception text never leaves this function except the missing setting's
    name, which the operator needs.
    """
    if isinstance(exc, CooldownError):
        seconds = exc.remaining_seconds
        duration = f"{seconds} seconds" if seconds > 0 else "a moment"
        return Output(
            kind="notice",
            title="Cooldown active",
            lines=[f"Please wait {duration} before running this AI command again."],
        )
    if isinstance(exc, MissingConfigError):
        return Output(
            kind="error",
            title="AI configuration missing",
            lines=[f"Missing {exc.setting}. Add it to the server environment (.env)."],
        )
    if isinstance(exc, ProviderError) or (
        isinstance(exc, FlowValidationError) and exc.stage == "output"
    ):
        return Output(
            kind="error",
            title="AI provider error",
            lines=["The AI provider returned an error. Please try again later."],
        )
    return Output(
        kind="error",
        title="AI error",
        lines=["Failed to get a response from the AI model."],
    )
