"""Cleanup of raw model text before JSON parsing."""

_FENCE = "```"
_JSON_FENCE = "```json"


def sanitize_response_text(text: str) -> str:
    """Strip markdown fences and cut the widest ``{...}`` span from model text.

    Returns the trimmed input unchanged when no brace pair is found; parse
    failures are left to the caller.
    """
    trimmed = text.strip()
    if trimmed.startswith(_FENCE):
        trimmed = trimmed.replace(_JSON_FENCE, "").replace(_FENCE, "").strip()
    start = trimmed.find("{")
    end = trimmed.rfind("}")
    if start == -1 or end < start:
        return trimmed
    return trimmed[start : end + 1]
