from ai.cooldown import CooldownGate
from ai.flows.base import run_flow
from ai.llm import LLMClient
from ai.prompts import ask as prompts
from ai.schemas import AskInput, AskOutput, PortfolioSnapshot, validate

CATEGORY = "ask"


async def generate_ask_response(
    question: str,
    portfolio: PortfolioSnapshot,
    llm: LLMClient,
    gate: CooldownGate,
) -> str:
    """Answer a visitor's question from portfolio data only."""
    data = validate(AskInput, {"question": question, "portfolio": portfolio}, "input")
    user_prompt = prompts.USER_TEMPLATE.format(
        question=data.question,
        portfolio=data.portfolio.model_dump_json(indent=2),
    )
    result: AskOutput = await run_flow(
        CATEGORY, prompts.SYSTEM, user_prompt, AskOutput, llm, gate, max_tokens=512,
    )
    return result.answer
