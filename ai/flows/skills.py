from typing import Optional

from ai.cooldown import CooldownGate
from ai.flows.base import new_seed, run_flow
from ai.llm import LLMClient
from ai.prompts import skills as prompts
from ai.schemas import PortfolioInput, PortfolioSnapshot, SkillsListOutput, validate

CATEGORY = "skills"


async def generate_skills_list(
    portfolio: PortfolioSnapshot,
    llm: LLMClient,
    gate: CooldownGate,
    seed: Optional[str] = None,
) -> list[str]:
    """Return skill names in model order. Uniqueness is not guaranteed."""
    data = validate(PortfolioInput, {"portfolio": portfolio}, "input")
    user_prompt = prompts.USER_TEMPLATE.format(
        seed=seed or new_seed(),
        portfolio=data.portfolio.model_dump_json(indent=2),
    )
    return await run_flow(
        CATEGORY, prompts.SYSTEM, user_prompt, SkillsListOutput, llm, gate, max_tokens=512,
    )
