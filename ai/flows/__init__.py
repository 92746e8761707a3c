from ai.flows.ask import generate_ask_response
from ai.flows.project_description import generate_project_description
from ai.flows.prompt_suggestions import generate_prompt_suggestions
from ai.flows.skills import generate_skills_list

__all__ = [
    "generate_ask_response",
    "generate_project_description",
    "generate_prompt_suggestions",
    "generate_skills_list",
]
