"""
Content Sanitizer

Produces a sanitized deep copy of validated content. Every string value has
executable markup removed:
- ``<script>...</script>`` and ``<iframe>...</iframe>`` blocks
- ``javascript:`` URI prefixes
- inline event handler attributes (``onerror=``, ``onclick =``, ...), also
  when glued to a preceding word character (``_onerror=``, ``xonclick=``)

and is then trimmed. The transform is repeated until the text stops
changing, so sanitizing already sanitized content is a no-op. Any other
character (non-Latin scripts, emoji, combining marks, bidirectional and
zero-width characters, quotes and braces) is kept verbatim.
"""

import re
from typing import Any

_SCRIPT_BLOCK = re.compile(r"<script[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_IFRAME_BLOCK = re.compile(r"<iframe[^>]*>.*?</iframe\s*>", re.IGNORECASE | re.DOTALL)
_JAVASCRIPT_URI = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)

_PATTERNS = (_SCRIPT_BLOCK, _IFRAME_BLOCK, _JAVASCRIPT_URI, _EVENT_HANDLER)


def sanitize_text(text: str) -> str:
    """Strip executable markup from a single string."""
    previous = None
    while text != previous:
        previous = text
        for pattern in _PATTERNS:
            text = pattern.sub("", text)
        text = text.strip()
    return text


def sanitize_content(value: Any) -> Any:
    """Return a deep copy of ``value`` with every string value sanitized.

    Dict keys and non-string scalars are copied unchanged.
    """
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, dict):
        return {key: sanitize_content(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize_content(item) for item in value]
    return value
