import json
import re

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.IGNORECASE | re.DOTALL)


def extract_json_payload(raw: str) -> str:
    """Return the part of an LLM response most likely to be valid JSON.

    Handles ```json ... ``` fences and prose before/after the object. Never
    raises: if nothing better is found the trimmed text is returned and the
    caller's json.loads surfaces the error.
    """
    match = _FENCE_RE.search(raw)
    candidate = match.group(1) if match else raw
    trimmed = candidate.strip()

    try:
        json.loads(trimmed)
        return trimmed
    except json.JSONDecodeError:
        pass

    # Fallback: outermost {...} span
    start = trimmed.find("{")
    end = trimmed.rfind("}")
    if start != -1 and end > start:
        return trimmed[start:end + 1]
    return trimmed
