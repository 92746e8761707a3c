import logging
from typing import Callable

import portfolio
from ai.cooldown import CooldownGate
from ai.errors import CooldownError, FlowValidationError, MissingConfigError
from ai.flows import generate_ask_response, generate_project_description, generate_skills_list
from ai.llm import LLMClient, get_llm_client
from ai.schemas import PortfolioSnapshot
from terminal import formatter
from terminal.formatter import Output
from terminal.parser import (
    KNOWN_COMMANDS,
    Command,
    EmptyLine,
    ParsedLine,
    UnknownCommand,
    parse_line,
    quoted_question,
)

logger = logging.getLogger(__name__)

_ASK_USAGE = 'Please enclose your question in double quotes. Usage: ask "What do you work on?"'
_PROJECT_USAGE = "Please specify a project name. Use 'projects' to see a list."
_SKILL_USAGE = "Please specify a skill name. Use 'skills' to see a list."


class Interpreter:
    """Runs one terminal line to completion and returns what to render.

    AI failures are classified into an Output here; nothing raised by a flow
    reaches the caller.
    """

    def __init__(
        self,
        gate: CooldownGate,
        llm_factory: Callable[[], LLMClient] = get_llm_client,
        snapshot: Callable[[], PortfolioSnapshot] = portfolio.get_portfolio_snapshot,
    ):
        self._gate = gate
        self._llm_factory = llm_factory
        self._snapshot = snapshot

    async def interpret(self, raw: str) -> Output:
        parsed = parse_line(raw)
        if isinstance(parsed, EmptyLine):
            return formatter.empty()
        if isinstance(parsed, UnknownCommand):
            return formatter.format_unknown(parsed.name, parsed.suggestion)
        return await self._dispatch(parsed)

    async def _dispatch(self, line: ParsedLine) -> Output:
        command = line.command
        if command is Command.HELP:
            return formatter.format_help(KNOWN_COMMANDS)
        if command is Command.ABOUTME:
            return formatter.format_about()
        if command is Command.SKILLS:
            return await self._run_ai(self._skills)
        if command is Command.SKILL:
            if not line.args:
                return formatter.text(_SKILL_USAGE)
            return self._skill(" ".join(line.args))
        if command is Command.PROJECTS:
            return formatter.format_projects()
        if command is Command.PROJECT:
            if not line.args:
                return formatter.text(_PROJECT_USAGE)
            return await self._project(line.args[0])
        if command is Command.EXPERIENCE:
            return formatter.format_experience()
        if command is Command.EDUCATION:
            return formatter.format_education()
        if command is Command.RESUME:
            return formatter.format_resume()
        if command is Command.CONTACT:
            return formatter.format_contact()
        if command is Command.ASK:
            question = quoted_question(line)
            if question is None:
                return formatter.text(_ASK_USAGE)
            return await self._run_ai(self._ask, question)
        if command is Command.COFFEE:
            return formatter.format_coffee()
        if command is Command.CAT:
            return formatter.format_cat()
        if command is Command.CLEAR:
            return formatter.clear()
        raise AssertionError(f"Unhandled command: {command!r}")

    def _skill(self, name: str) -> Output:
        skill = portfolio.find_skill(name)
        if skill is None:
            return formatter.format_skill_not_found(name)
        return formatter.format_skill(skill)

    async def _project(self, name: str) -> Output:
        project = portfolio.find_project(name)
        if project is None:
            return formatter.format_project_not_found(name)
        return await self._run_ai(self._project_details, project)

    # ── AI-backed handlers ───────────────────────────────────────────────────

    async def _run_ai(self, handler, *args) -> Output:
        try:
            return await handler(*args)
        except CooldownError as exc:
            return formatter.format_ai_error(exc)
        except MissingConfigError as exc:
            logger.warning("AI command refused: %s", exc)
            return formatter.format_ai_error(exc)
        except FlowValidationError as exc:
            if exc.stage == "input":
                logger.warning("AI command rejected input: %s", exc)
            else:
                logger.exception("AI command failed")
            return formatter.format_ai_error(exc)
        except Exception as exc:
            logger.exception("AI command failed")
            return formatter.format_ai_error(exc)

    async def _skills(self) -> Output:
        skills = await generate_skills_list(self._snapshot(), self._llm_factory(), self._gate)
        return formatter.format_skills(skills)

    async def _ask(self, question: str) -> Output:
        answer = await generate_ask_response(
            question, self._snapshot(), self._llm_factory(), self._gate,
        )
        return formatter.text(*answer.strip().splitlines())

    async def _project_details(self, project) -> Output:
        description = await generate_project_description(
            project.title, project.technologies, project.description,
            self._llm_factory(), self._gate,
        )
        return formatter.format_project(project, description)
