import re

FENCE = "```"
_OPENING_INFO_STRING = re.compile(r"^```[A-Za-z0-9_+.\-]+")


def sanitize(text: str) -> str:
    """
    Strips markdown code-fence wrapping that models sometimes add around JSON.

    '```json\\n{...}\\n```' and '```\\n{...}\\n```' both become '{...}'.
    Unfenced text is returned trimmed. Never raises.
    """
    s = text.strip()

    opening = _OPENING_INFO_STRING.match(s)
    if opening:
        s = s[opening.end():]
    elif s.startswith(FENCE):
        s = s[len(FENCE):]

    if s.endswith(FENCE):
        s = s[:-len(FENCE)]

    return s.strip()
