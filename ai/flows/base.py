import json
import logging
from datetime import datetime, timezone

from ai.cooldown import CooldownGate
from ai.errors import DecodeError, FlowValidationError
from ai.extract import extract_json_payload
from ai.llm import LLMClient, generate_text
from ai.schemas import validate

logger = logging.getLogger(__name__)


def new_seed() -> str:
    """Randomization seed that nudges the model toward varied output."""
    return datetime.now(timezone.utc).isoformat()


async def run_flow(
    category: str,
    system: str,
    user: str,
    output_shape,
    llm: LLMClient,
    gate: CooldownGate,
    max_tokens: int = 1024,
):
    """Cooldown → provider call → JSON extraction → output validation.

    Input must already be validated by the caller; nothing here runs before
    the cooldown slot is taken.
    """
    await gate.enforce(category)
    raw = await generate_text(llm, system, user, max_tokens=max_tokens)
    payload = extract_json_payload(raw)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        logger.warning("%s flow: response is not JSON (%d chars)", category, len(raw))
        raise DecodeError(f"{category} response is not valid JSON: {exc.msg}") from exc

    try:
        return validate(output_shape, data, "output")
    except FlowValidationError as exc:
        logger.warning("%s flow: response failed validation at %s", category, exc.field or "<root>")
        raise
