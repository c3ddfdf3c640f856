"""Line-oriented fallback parser for recipes written as markdown or prose.

Handles the shapes models fall back to when they ignore the JSON contract:

    ### Margarita
    _Bright and tart._

    **Ingredients**
    - 2 oz tequila
    - 1 oz lime juice (fresh)

    **Instructions**
    1) Shake with ice.
    2) Strain into a coupe.

    **Glassware**: Coupe
    **Tags**: classic, sour
    ---

Numbered titles ("1. Margarita"), bare title lines, and label variants
("Method:", "Directions", "Glass:") are accepted. A title may carry its
description after a dash ("1. Margarita - Bright and tart"). This is a best-effort lexer;
nested sub-steps and other exotic layouts are not guaranteed to survive.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from mixi_recipes.app.services.ai_parsing.key_normalizer import canonical_key
from mixi_recipes.app.services.ai_parsing.models import Recipe
from mixi_recipes.app.services.ai_parsing.parsing_utils import (
    clean_text,
    split_tags,
    strip_numbering,
)
from mixi_recipes.app.services.ai_parsing.schema_validator import coerce_recipe

logger = logging.getLogger(__name__)

_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,}|={3,})$")
_HEADING_RE = re.compile(r"^#{1,6}\s*(.+?)\s*#*$")
_NUMBERED_RE = re.compile(r"^\d+\s*[.)]\s+(.+)$")
_BULLET_RE = re.compile(r"^[-•*+]\s+(.+)$")
_ITALIC_RE = re.compile(r"^(?:_(?!_)(.+)_|\*(?!\*)(.+)\*)$")
_LABEL_RE = re.compile(r"^([A-Za-zÀ-ÿ][A-Za-zÀ-ÿ \-]{0,30}?)(?:\s*\([^)]*\))?\s*(?::\s*(.*))?$")
# "Old Fashioned - A timeless classic with bourbon"
_TITLE_SPLIT_RE = re.compile(r"\s+[-–—]\s+")

_LIST_SECTIONS = ("ingredients", "instructions")
_SCALAR_SECTIONS = ("name", "description", "glassware", "garnish", "tags")


def _strip_emphasis(text: str) -> str:
    return clean_text(text.replace("**", "").replace("__", "").strip("*_` "))


def _match_label(line: str):
    """Return (canonical field, inline content) for a section label line, else None."""
    plain = _strip_emphasis(re.sub(r"^#{1,6}\s*", "", line))
    match = _LABEL_RE.match(plain)
    if not match:
        return None
    field = canonical_key(match.group(1))
    if field not in _LIST_SECTIONS and field not in _SCALAR_SECTIONS:
        return None
    content = clean_text(match.group(2) or "")
    if field in _SCALAR_SECTIONS and not content:
        return None
    return field, content


class _RecipeBuilder:
    def __init__(self, title: str = "") -> None:
        # "### 1. Margarita" and "**Margarita**" both name "Margarita"
        self.title = strip_numbering(_strip_emphasis(title))
        name, description = self.title, None
        parts = _TITLE_SPLIT_RE.split(self.title, maxsplit=1)
        if len(parts) == 2 and parts[0] and parts[1]:
            name, description = parts
        self.data: Dict[str, Any] = {
            "name": name,
            "description": description,
            "ingredients": [],
            "instructions": [],
            "glassware": None,
            "garnish": None,
            "tags": [],
        }

    @property
    def has_content(self) -> bool:
        return bool(self.data["ingredients"] or self.data["instructions"])

    def set_scalar(self, field: str, value: str) -> None:
        if field == "tags":
            self.data["tags"].extend(split_tags(value))
        else:
            self.data[field] = value

    def add(self, section: str, line: str) -> None:
        if section == "ingredients":
            text = clean_text(re.sub(r"^[-•*+]\s+", "", line))
        else:
            text = strip_numbering(line)
        if text:
            self.data[section].append(text)


def _looks_like_prose(text: str) -> bool:
    return text.endswith((".", "!", "?", ":")) or len(text.split()) > 8


class _MarkdownRecipeLexer:
    def __init__(self) -> None:
        self.candidates: List[Dict[str, Any]] = []
        self.current: Optional[_RecipeBuilder] = None
        self.section: Optional[str] = None
        self.last_section: Optional[str] = None

    def close(self) -> None:
        if self.current is not None:
            data = self.current.data
            if data["name"] and self.current.has_content:
                self.candidates.append(data)
            else:
                logger.debug("Discarding markdown block without name or content: %r", data["name"])
        self.current = None
        self.section = None
        self.last_section = None

    def open(self, title: str) -> None:
        self.close()
        self.current = _RecipeBuilder(title)

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()
        if not line:
            self.section = None
            return
        if _RULE_RE.match(line):
            self.close()
            return

        bullet = _BULLET_RE.match(line)
        numbered = _NUMBERED_RE.match(line)

        if not bullet:
            label = _match_label(line)
            if label is not None:
                self._apply_label(*label)
                return

        heading = _HEADING_RE.match(line)
        if heading:
            self.open(heading.group(1))
            return

        if self.section is not None:
            self.current.add(self.section, line)
            return
        if self.last_section is not None and not self.current.data[self.last_section]:
            # Blank line between a section label and its first entry
            self.section = self.last_section
            self.current.add(self.section, line)
            return
        if bullet and self.last_section is not None:
            # Bullet runs interrupted by blank lines keep their section
            self.current.add(self.last_section, line)
            return
        if numbered:
            self.open(numbered.group(1))
            return
        if bullet:
            return

        italic = _ITALIC_RE.match(line)
        if italic and self._wants_description():
            self.current.data["description"] = clean_text(italic.group(1) or italic.group(2))
            return

        if line.endswith(":"):
            return
        if self.current is None or self.current.has_content:
            self.open(line)
        elif _looks_like_prose(self.current.title):
            # The "title" was an intro sentence; this line is the real title
            self.open(line)
        elif self._wants_description():
            self.current.data["description"] = _strip_emphasis(line)

    def _wants_description(self) -> bool:
        return (
            self.current is not None
            and bool(self.current.data["name"])
            and self.current.data["description"] is None
            and not self.current.has_content
        )

    def _apply_label(self, field: str, content: str) -> None:
        if field == "name":
            self.open(content)
            return
        if self.current is None:
            self.current = _RecipeBuilder()
        if field in _LIST_SECTIONS:
            self.section = field
            self.last_section = field
            if content:
                self.current.add(field, content)
            return
        self.section = None
        self.last_section = None
        self.current.set_scalar(field, content)


def parse_markdown_recipes(raw: str) -> List[Recipe]:
    """Parse heading/section delimited recipes out of non-JSON text."""
    lexer = _MarkdownRecipeLexer()
    for line in raw.splitlines():
        lexer.feed(line)
    lexer.close()

    recipes = []
    for candidate in lexer.candidates:
        recipe = coerce_recipe(candidate)
        if recipe is not None:
            recipes.append(recipe)
    logger.debug("Markdown fallback produced %d recipes", len(recipes))
    return recipes
