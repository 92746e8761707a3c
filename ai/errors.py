"""Error taxonomy shared by the AI flows and the command interpreter."""
from typing import Optional


class AIError(Exception):
    """Base class for every failure raised on the AI path."""


class FlowValidationError(AIError):
    """Flow input or parsed model output does not match its declared shape.

    stage is "input" (rejected before any cooldown or network cost) or
    "output" (the model answered with the wrong shape). field is the dotted
    location of the first offending value, None when the root itself is wrong.
    """

    def __init__(self, stage: str, field: Optional[str], message: str):
        self.stage = stage
        self.field = field
        location = field or "<root>"
        super().__init__(f"Invalid {stage} at {location}: {message}")


class CooldownError(AIError):
    def __init__(self, category: str, remaining_seconds: int):
        self.category = category
        self.remaining_seconds = remaining_seconds
        super().__init__(f"AI cooldown active for {category!r}: retry in {remaining_seconds}s")


class MissingConfigError(AIError):
    """The AI integration cannot run because a required setting is empty."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"Missing {setting}.")


class ProviderError(AIError):
    """The generative backend failed or returned unusable content."""


class DecodeError(ProviderError):
    """The model response did not contain parseable JSON."""


class IncompleteSuggestionsError(ProviderError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Prompt suggestions were incomplete ({count} usable).")
