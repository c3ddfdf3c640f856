"""Strict JSON parsing of extracted chunks with a lenient repair pass."""

import json
import logging
import re
from typing import Any, List, Optional

from mixi_recipes.app.services.ai_parsing.models import ChunkOutcome, SkipReason

logger = logging.getLogger(__name__)

_IDENT_START = re.compile(r"[A-Za-z_]")
_IDENT_CHAR = re.compile(r"[\w\-]")


def strip_invalid_control_chars(s: str) -> str:
    """Remove ASCII control chars that frequently break json.loads (except \\n, \\r, \\t)."""
    return re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F]", "", s)


def strip_code_fence(text: str) -> str:
    txt = text.strip()
    if txt.startswith("```"):
        # Remove leading fence with optional language tag
        txt = re.sub(r"^```[a-zA-Z0-9_-]*\s*", "", txt, count=1)
        txt = re.sub(r"\s*```$", "", txt, count=1).strip()
    return txt


def _next_significant(text: str, pos: int) -> Optional[str]:
    while pos < len(text):
        if not text[pos].isspace():
            return text[pos]
        pos += 1
    return None


def _last_significant(out: List[str]) -> Optional[str]:
    for piece in reversed(out):
        stripped = piece.rstrip()
        if stripped:
            return stripped[-1]
    return None


def repair_json(raw: str) -> str:
    """Fix trailing commas and bare keys outside string literals."""
    text = strip_code_fence(strip_invalid_control_chars(raw))
    out: List[str] = []
    in_string = False
    escaped = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        if ch == "," and _next_significant(text, i + 1) in ("}", "]"):
            i += 1
            continue

        if _IDENT_START.match(ch) and _last_significant(out) in ("{", ","):
            end = i + 1
            while end < len(text) and _IDENT_CHAR.match(text[end]):
                end += 1
            if _next_significant(text, end) == ":":
                out.append(f'"{text[i:end]}"')
                i = end
                continue

        out.append(ch)
        i += 1
    return "".join(out)


def _keep_duplicate_pairs(pairs: List[tuple]) -> dict:
    """Build an object where the first occurrence of a key wins.

    Keys made only of whitespace/punctuation are orphans; repeats of those are
    kept under a padded key so the key normalizer still sees every value.
    """
    result: dict = {}
    for key, value in pairs:
        if key in result:
            if any(ch.isalnum() for ch in key):
                continue
            while key in result:
                key += " "
        result[key] = value
    return result


def _loads(text: str) -> Any:
    # strict=False only admits raw control characters inside strings (e.g. newlines leaked into keys)
    return json.loads(text, strict=False, object_pairs_hook=_keep_duplicate_pairs)


def parse_chunk(chunk: str, index: int = 0, lenient: bool = True) -> ChunkOutcome:
    """Parse one chunk; never raises for malformed JSON."""
    try:
        value = _loads(chunk)
        repaired = False
    except RecursionError:
        logger.debug("Chunk %d nests too deeply to decode", index)
        return ChunkOutcome(index=index, skip_reason=SkipReason.TOO_DEEP)
    except json.JSONDecodeError as exc:
        if not lenient:
            logger.debug("Chunk %d failed strict parse: %s", index, exc)
            return ChunkOutcome(index=index, skip_reason=SkipReason.INVALID_JSON)
        try:
            value = _loads(repair_json(chunk))
            repaired = True
        except RecursionError:
            return ChunkOutcome(index=index, skip_reason=SkipReason.TOO_DEEP)
        except json.JSONDecodeError as repair_exc:
            logger.debug(
                "Chunk %d unrecoverable after repair: %s (preview=%r)",
                index,
                repair_exc,
                chunk[:200],
            )
            return ChunkOutcome(index=index, skip_reason=SkipReason.INVALID_JSON)

    if not isinstance(value, dict):
        return ChunkOutcome(index=index, skip_reason=SkipReason.NOT_AN_OBJECT)
    if repaired:
        logger.debug("Chunk %d parsed after lenient repair", index)
    return ChunkOutcome(index=index, value=value, repaired=repaired)


def parse_chunk_outcomes(chunks: List[str], lenient: bool = True) -> List[ChunkOutcome]:
    return [parse_chunk(chunk, index=idx, lenient=lenient) for idx, chunk in enumerate(chunks)]


def parse_chunks(chunks: List[str], lenient: bool = True) -> List[dict]:
    """Parse chunks independently, keeping successes in input order."""
    return [outcome.value for outcome in parse_chunk_outcomes(chunks, lenient=lenient) if outcome.ok]


def parse_document(raw: str) -> List[dict]:
    """Try the whole response as one JSON document.

    An object yields itself; an array yields its object elements. Anything else,
    including a parse failure, yields an empty list.
    """
    text = strip_code_fence(strip_invalid_control_chars(raw))
    if not text or text[0] not in "{[":
        return []
    try:
        value = _loads(text)
    except (json.JSONDecodeError, RecursionError):
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return []
