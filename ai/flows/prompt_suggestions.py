"""Suggested `ask` questions for the terminal's quick-prompt chips.

Providers occasionally return near-duplicates or blank entries, so the parsed
list is cleaned before use:
  - `"` and backticks become `'`, whitespace runs collapse, text is trimmed
    and cut to MAX_LABEL_LENGTH / MAX_QUESTION_LENGTH
  - entries with an empty question are dropped; an empty label falls back
    to the question
  - duplicates by case-insensitive label::question are dropped, first wins
Fewer than MIN_SUGGESTIONS survivors is an error, never a short list.
"""
import logging
import re
from typing import Optional

from ai.cooldown import CooldownGate
from ai.errors import IncompleteSuggestionsError
from ai.flows.base import new_seed, run_flow
from ai.llm import LLMClient
from ai.prompts import suggestions as prompts
from ai.schemas import (
    MAX_LABEL_LENGTH,
    MAX_QUESTION_LENGTH,
    PortfolioInput,
    PortfolioSnapshot,
    PromptSuggestion,
    PromptSuggestionsOutput,
    validate,
)

logger = logging.getLogger(__name__)

CATEGORY = "prompt-suggestions"
MIN_SUGGESTIONS = 3
MAX_SUGGESTIONS = 4

_QUOTES_RE = re.compile(r'["`]')
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text(value: str, max_length: int) -> str:
    value = _QUOTES_RE.sub("'", value)
    value = _WHITESPACE_RE.sub(" ", value).strip()
    return value[:max_length]


def sanitize_suggestion(suggestion: PromptSuggestion) -> Optional[PromptSuggestion]:
    question = sanitize_text(suggestion.question, MAX_QUESTION_LENGTH)
    if not question:
        return None
    label = sanitize_text(suggestion.label, MAX_LABEL_LENGTH) or sanitize_text(question, MAX_LABEL_LENGTH)
    return PromptSuggestion(label=label, question=question)


def dedupe_suggestions(suggestions: list[PromptSuggestion]) -> list[PromptSuggestion]:
    seen: set[str] = set()
    unique = []
    for s in suggestions:
        key = f"{s.label.lower()}::{s.question.lower()}"
        if key in seen:
            continue
        seen.add(key)
        unique.append(s)
    return unique


def clean_suggestions(suggestions: list[PromptSuggestion]) -> list[PromptSuggestion]:
    """Sanitize, drop empties, dedupe, and cap. Raises when too few remain."""
    sanitized = [s for s in (sanitize_suggestion(p) for p in suggestions) if s is not None]
    unique = dedupe_suggestions(sanitized)
    if len(unique) < MIN_SUGGESTIONS:
        logger.warning(
            "Prompt suggestions incomplete: %d of %d usable", len(unique), len(suggestions)
        )
        raise IncompleteSuggestionsError(len(unique))
    return unique[:MAX_SUGGESTIONS]


async def generate_prompt_suggestions(
    portfolio: PortfolioSnapshot,
    llm: LLMClient,
    gate: CooldownGate,
    seed: Optional[str] = None,
) -> list[PromptSuggestion]:
    data = validate(PortfolioInput, {"portfolio": portfolio}, "input")
    user_prompt = prompts.USER_TEMPLATE.format(
        seed=seed or new_seed(),
        portfolio=data.portfolio.model_dump_json(indent=2),
    )
    result: PromptSuggestionsOutput = await run_flow(
        CATEGORY, prompts.SYSTEM, user_prompt, PromptSuggestionsOutput, llm, gate, max_tokens=512,
    )
    return clean_suggestions(result.prompts)
