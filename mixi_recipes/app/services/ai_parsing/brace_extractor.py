"""Extract top-level JSON object spans from noisy LLM output."""

import logging
from typing import List

logger = logging.getLogger(__name__)


def extract_json_chunks(raw: str) -> List[str]:
    """Return every balanced top-level ``{...}`` span in ``raw``, in order.

    Braces inside double-quoted strings are ignored and backslash escapes are
    honoured. An object still open at end of input yields nothing.
    """
    chunks: List[str] = []
    depth = 0
    start = -1
    in_string = False
    escaped = False

    for idx, ch in enumerate(raw):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            if depth == 0:
                start = idx
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                chunks.append(raw[start : idx + 1])
                start = -1

    if depth > 0:
        logger.debug("Dropping unterminated JSON object starting at offset %d", start)
    return chunks
