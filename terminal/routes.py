"""HTTP endpoints consumed by the terminal web page."""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ai.errors import CooldownError, MissingConfigError
from ai.flows import generate_prompt_suggestions
from ai.schemas import PromptSuggestion
from terminal import formatter
from terminal.formatter import Output
from terminal.parser import KNOWN_COMMANDS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class CommandRequest(BaseModel):
    line: str = Field(default="", max_length=1000)


class SuggestionsResponse(BaseModel):
    prompts: list[PromptSuggestion]


@router.post("/command", response_model=Output)
async def run_command(body: CommandRequest, request: Request) -> Output:
    return await request.app.state.interpreter.interpret(body.line)


@router.get("/commands")
async def list_commands() -> dict:
    return {"commands": list(KNOWN_COMMANDS)}


@router.get("/prompt-suggestions", response_model=SuggestionsResponse)
async def prompt_suggestions(request: Request):
    state = request.app.state
    try:
        prompts = await generate_prompt_suggestions(
            state.snapshot(), state.llm_factory(), state.gate,
        )
    except CooldownError as exc:
        return _error_response(exc, 429, headers={"Retry-After": str(exc.remaining_seconds)})
    except MissingConfigError as exc:
        logger.warning("Prompt suggestions refused: %s", exc)
        return _error_response(exc, 503)
    except Exception as exc:
        logger.exception("Prompt suggestions failed")
        return _error_response(exc, 502)
    return SuggestionsResponse(prompts=prompts)


def _error_response(exc: Exception, status_code: int, headers: dict | None = None) -> JSONResponse:
    output = formatter.format_ai_error(exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": output.model_dump()},
        headers=headers,
    )
