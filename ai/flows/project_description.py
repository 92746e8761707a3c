from ai.cooldown import CooldownGate
from ai.flows.base import run_flow
from ai.llm import LLMClient
from ai.prompts import project as prompts
from ai.schemas import ProjectDescriptionInput, ProjectDescriptionOutput, validate

CATEGORY = "project"


async def generate_project_description(
    project_name: str,
    technologies: str,
    brief_overview: str,
    llm: LLMClient,
    gate: CooldownGate,
) -> str:
    data = validate(
        ProjectDescriptionInput,
        {
            "project_name": project_name,
            "technologies": technologies,
            "brief_overview": brief_overview,
        },
        "input",
    )
    user_prompt = prompts.USER_TEMPLATE.format(
        project_name=data.project_name,
        technologies=data.technologies,
        brief_overview=data.brief_overview,
    )
    result: ProjectDescriptionOutput = await run_flow(
        CATEGORY, prompts.SYSTEM, user_prompt, ProjectDescriptionOutput, llm, gate, max_tokens=768,
    )
    return result.description
