import asyncio
import json

import pytest

from ai.errors import (
    CooldownError,
    DecodeError,
    FlowValidationError,
    IncompleteSuggestionsError,
    ProviderError,
)
from ai.flows import (
    generate_ask_response,
    generate_project_description,
    generate_prompt_suggestions,
    generate_skills_list,
)
from ai.flows.prompt_suggestions import clean_suggestions
from ai.schemas import PromptSuggestion
from .utils import FakeLLM


def _suggestions(*pairs):
    return json.dumps({"prompts": [{"label": label, "question": q} for label, q in pairs]})


# ── ask ───────────────────────────────────────────────────────────────────────

def test_ask_returns_answer_and_grounds_prompt(gate, snapshot):
    llm = FakeLLM('{"answer": "I run Kubernetes at FutureTech."}')

    answer = asyncio.run(generate_ask_response("Where do you work?", snapshot, llm, gate))

    assert answer == "I run Kubernetes at FutureTech."
    call = llm.calls[0]
    assert "JSON" in call.system
    assert "Where do you work?" in call.user
    assert "FutureTech Inc." in call.user


def test_ask_accepts_fenced_response(gate, snapshot):
    llm = FakeLLM('Here you go:\n```json\n{"answer": "Yes."}\n```')
    assert asyncio.run(generate_ask_response("Docker?", snapshot, llm, gate)) == "Yes."


def test_invalid_input_fails_before_cooldown_and_provider(gate, snapshot):
    llm = FakeLLM('{"answer": "ok"}')

    with pytest.raises(FlowValidationError) as info:
        asyncio.run(generate_ask_response("", snapshot, llm, gate))

    assert info.value.stage == "input"
    assert info.value.field == "question"
    assert llm.calls == []
    # the cooldown slot is still free
    assert asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate)) == "ok"


def test_wrong_output_type_is_rejected_not_coerced(gate, snapshot):
    llm = FakeLLM('{"answer": 42}')

    with pytest.raises(FlowValidationError) as info:
        asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate))

    assert info.value.stage == "output"
    assert info.value.field == "answer"


def test_missing_output_key_is_rejected(gate, snapshot):
    llm = FakeLLM('{"reply": "hello"}')
    with pytest.raises(FlowValidationError) as info:
        asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate))
    assert info.value.field == "answer"


def test_non_json_response_is_a_decode_error(gate, snapshot):
    llm = FakeLLM("Sorry, I can't help with that.")
    with pytest.raises(DecodeError):
        asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate))


def test_failed_provider_call_still_consumes_cooldown(gate, snapshot):
    llm = FakeLLM(ProviderError("upstream 500"), '{"answer": "never reached"}')

    with pytest.raises(ProviderError):
        asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate))
    with pytest.raises(CooldownError):
        asyncio.run(generate_ask_response("Hi again?", snapshot, llm, gate))
    assert len(llm.calls) == 1


def test_empty_provider_response_is_a_provider_error(gate, snapshot):
    llm = FakeLLM("   ")
    with pytest.raises(ProviderError):
        asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate))


# ── project description ──────────────────────────────────────────────────────

def test_project_description(gate):
    llm = FakeLLM('{"description": "A controller that scales fleets."}')

    result = asyncio.run(generate_project_description(
        "Auto-Scaling Cloud Infrastructure", "Terraform, AWS", "Scales EC2 fleets.", llm, gate,
    ))

    assert result == "A controller that scales fleets."
    assert "Auto-Scaling Cloud Infrastructure" in llm.calls[0].user
    assert "Terraform, AWS" in llm.calls[0].user


def test_project_description_uses_its_own_cooldown_category(gate, snapshot):
    llm = FakeLLM('{"answer": "a"}', '{"description": "b"}')
    asyncio.run(generate_ask_response("Hi?", snapshot, llm, gate))
    assert asyncio.run(generate_project_description("P", "T", "O", llm, gate)) == "b"


# ── skills ───────────────────────────────────────────────────────────────────

def test_skills_list_keeps_model_order(gate, snapshot):
    llm = FakeLLM('```json\n["Terraform", "Docker", "Docker"]\n```')

    skills = asyncio.run(generate_skills_list(snapshot, llm, gate, seed="seed-1"))

    assert skills == ["Terraform", "Docker", "Docker"]
    assert "seed-1" in llm.calls[0].user


def test_skills_list_rejects_object(gate, snapshot):
    llm = FakeLLM('{"skills": ["Docker"]}')
    with pytest.raises(FlowValidationError) as info:
        asyncio.run(generate_skills_list(snapshot, llm, gate))
    assert info.value.stage == "output"


def test_skills_list_rejects_non_string_items(gate, snapshot):
    llm = FakeLLM('["Docker", 7]')
    with pytest.raises(FlowValidationError) as info:
        asyncio.run(generate_skills_list(snapshot, llm, gate))
    assert info.value.field == "1"


# ── prompt suggestions ───────────────────────────────────────────────────────

def test_suggestions_drop_duplicates_and_blanks_in_order(gate, snapshot):
    llm = FakeLLM(_suggestions(
        ("Cloud Work", "What cloud platforms  have you\n used?"),
        ("cloud work", "What cloud platforms have you used?"),
        ("Blank", "   "),
        ("GitOps", 'How does the "GitOps" pipeline promote releases?'),
        ("", "Which project had the biggest impact?"),
    ))

    prompts = asyncio.run(generate_prompt_suggestions(snapshot, llm, gate, seed="s"))

    assert [p.model_dump() for p in prompts] == [
        {"label": "Cloud Work", "question": "What cloud platforms have you used?"},
        {"label": "GitOps", "question": "How does the 'GitOps' pipeline promote releases?"},
        {"label": "Which project had the biggest impact",
         "question": "Which project had the biggest impact?"},
    ]


def test_suggestions_are_capped_at_four(gate, snapshot):
    llm = FakeLLM(_suggestions(*[(f"Label {i}", f"Question number {i}?") for i in range(6)]))

    prompts = asyncio.run(generate_prompt_suggestions(snapshot, llm, gate))

    assert [p.label for p in prompts] == ["Label 0", "Label 1", "Label 2", "Label 3"]


def test_too_few_usable_suggestions_fail(gate, snapshot):
    llm = FakeLLM(_suggestions(
        ("Impact", "What was your biggest impact?"),
        ("IMPACT", "what was your biggest impact?"),
        ("Empty", ""),
        ("Stack", "Which stack do you prefer?"),
    ))

    with pytest.raises(IncompleteSuggestionsError) as info:
        asyncio.run(generate_prompt_suggestions(snapshot, llm, gate))
    assert info.value.count == 2


def test_suggestions_outside_schema_bounds_are_rejected(gate, snapshot):
    llm = FakeLLM(_suggestions(("A", "Question a?"), ("B", "Question b?")))
    with pytest.raises(FlowValidationError) as info:
        asyncio.run(generate_prompt_suggestions(snapshot, llm, gate))
    assert info.value.field == "prompts"


def test_clean_suggestions_truncates_to_limits():
    long_label = "Label " * 10
    long_question = "word " * 40
    cleaned = clean_suggestions([
        PromptSuggestion(label=long_label, question=long_question),
        PromptSuggestion(label="B", question="`Backticks` too?"),
        PromptSuggestion(label="C", question="Third question?"),
    ])
    assert len(cleaned[0].label) <= 36
    assert len(cleaned[0].question) <= 140
    assert cleaned[1].question == "'Backticks' too?"


@pytest.mark.parametrize(
    "flow, valid_response",
    [
        (generate_prompt_suggestions, _suggestions(*[(f"L{i}", f"Question {i}?") for i in range(3)])),
        (generate_skills_list, '["Docker"]'),
    ],
)
def test_malformed_portfolio_fails_before_cooldown_and_provider(gate, snapshot, flow, valid_response):
    llm = FakeLLM()

    with pytest.raises(FlowValidationError) as info:
        asyncio.run(flow({"about_me": 1}, llm, gate))

    assert info.value.stage == "input"
    assert info.value.field.startswith("portfolio")
    assert llm.calls == []
    # the cooldown slot is still free
    llm.responses.append(valid_response)
    assert asyncio.run(flow(snapshot, llm, gate))
