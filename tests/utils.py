from types import SimpleNamespace

from ai.llm import LLMClient, LLMResponse


class FakeLLM(LLMClient):
    """Replays canned responses in order; an Exception item is raised instead."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def complete(self, system: str, user: str, max_tokens: int = 1024) -> LLMResponse:
        self.calls.append(SimpleNamespace(system=system, user=user, max_tokens=max_tokens))
        if not self.responses:
            raise AssertionError("FakeLLM ran out of responses")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return LLMResponse(content=item, tokens_used=10, model="fake")


class ManualClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
