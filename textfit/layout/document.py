"""layout/document.py — JSON document I/O.

Schema::

    {
      "styles": {"Body": {"tracking": 0, "horizontal_scale": 100, "letter_spacing": 0}},
      "stories": [
        {"name": "...", "capacity_lines": 40, "on_master_page": false,
         "paragraphs": [{"text": "...", "width": 240, "font_size": 10,
                         "style": "Body", "hyphenation": true}]}
      ]
    }

Per-paragraph ``tracking``, ``horizontal_scale`` and ``letter_spacing`` are
optional overrides of the style values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..config import LayoutConfig
from .model import Document, Paragraph, ParagraphStyle, Story

logger = logging.getLogger(__name__)

_OVERRIDES = ("tracking", "horizontal_scale", "letter_spacing")


class DocumentError(ValueError):
    """Raised when a document file cannot be interpreted."""


def _parse_style(name: str, raw: dict[str, Any]) -> ParagraphStyle:
    try:
        return ParagraphStyle(
            name=name,
            tracking=float(raw.get("tracking", 0.0)),
            horizontal_scale=float(raw.get("horizontal_scale", 100.0)),
            letter_spacing=float(raw.get("letter_spacing", 0.0)),
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise DocumentError(f"style {name!r}: {exc}") from exc


def _parse_paragraph(
    raw: dict[str, Any],
    styles: dict[str, ParagraphStyle],
    rules: LayoutConfig,
    where: str,
) -> Paragraph:
    if not isinstance(raw, dict):
        raise DocumentError(f"{where}: expected an object, got {type(raw).__name__}")
    style_name = raw.get("style", "Body")
    if not isinstance(style_name, str):
        raise DocumentError(f"{where}: style must be a name, got {style_name!r}")
    if style_name not in styles:
        if style_name != "Body":
            raise DocumentError(f"{where}: unknown style {style_name!r}")
        styles[style_name] = ParagraphStyle()
    try:
        overrides = {k: float(raw[k]) for k in _OVERRIDES if raw.get(k) is not None}
        return Paragraph(
            text=str(raw["text"]),
            width=float(raw["width"]),
            font_size=float(raw.get("font_size", 10.0)),
            style=styles[style_name],
            hyphenation=bool(raw.get("hyphenation", True)),
            rules=rules,
            **overrides,
        )
    except KeyError as exc:
        raise DocumentError(f"{where}: missing field {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise DocumentError(f"{where}: {exc}") from exc


def parse_document(data: dict[str, Any], rules: LayoutConfig | None = None) -> Document:
    """Build a :class:`Document` from its decoded JSON form."""
    if rules is None:
        rules = LayoutConfig()
    if not isinstance(data, dict):
        raise DocumentError("document root must be an object")

    raw_styles = data.get("styles") or {}
    if not isinstance(raw_styles, dict):
        raise DocumentError("styles must be an object")
    for name, raw in raw_styles.items():
        if not isinstance(raw, dict):
            raise DocumentError(f"style {name!r}: expected an object, got {type(raw).__name__}")
    styles = {name: _parse_style(name, raw) for name, raw in raw_styles.items()}

    raw_stories = data.get("stories") or []
    if not isinstance(raw_stories, list):
        raise DocumentError("stories must be a list")
    stories: list[Story] = []
    for s_idx, raw_story in enumerate(raw_stories):
        if not isinstance(raw_story, dict):
            raise DocumentError(
                f"story {s_idx}: expected an object, got {type(raw_story).__name__}"
            )
        raw_paragraphs = raw_story.get("paragraphs") or []
        if not isinstance(raw_paragraphs, list):
            raise DocumentError(f"story {s_idx}: paragraphs must be a list")
        paragraphs = [
            _parse_paragraph(raw_p, styles, rules, f"story {s_idx} paragraph {p_idx}")
            for p_idx, raw_p in enumerate(raw_paragraphs)
        ]
        capacity = raw_story.get("capacity_lines")
        try:
            capacity_lines = int(capacity) if capacity is not None else None
        except (TypeError, ValueError, OverflowError) as exc:
            raise DocumentError(f"story {s_idx}: bad capacity_lines {capacity!r}") from exc
        stories.append(
            Story(
                paragraphs=paragraphs,
                capacity_lines=capacity_lines,
                on_master_page=bool(raw_story.get("on_master_page", False)),
                name=str(raw_story.get("name", f"story-{s_idx}")),
            )
        )
    return Document(stories=stories, styles=styles)


def load_document(path: str | Path, rules: LayoutConfig | None = None) -> Document:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DocumentError(f"{path}: invalid JSON ({exc})") from exc
    doc = parse_document(data, rules)
    logger.info(
        "Document loaded ← %s  (%d stories, %d paragraphs)",
        path, len(doc.stories), sum(len(s.paragraphs) for s in doc.stories),
    )
    return doc


def document_to_dict(doc: Document) -> dict[str, Any]:
    return {
        "styles": {
            name: {
                "tracking": st.tracking,
                "horizontal_scale": st.horizontal_scale,
                "letter_spacing": st.letter_spacing,
            }
            for name, st in doc.styles.items()
        },
        "stories": [
            {
                "name": story.name,
                "capacity_lines": story.capacity_lines,
                "on_master_page": story.on_master_page,
                "paragraphs": [
                    {
                        "text": p.text,
                        "width": p.width,
                        "font_size": p.font_size,
                        "style": p.style.name,
                        "hyphenation": p.hyphenation,
                        "tracking": round(float(p.tracking), 4),
                        "horizontal_scale": round(float(p.horizontal_scale), 4),
                        "letter_spacing": round(float(p.letter_spacing), 4),
                        "lines": p.line_count,
                    }
                    for p in story.paragraphs
                ],
            }
            for story in doc.stories
        ],
    }


def dump_document(doc: Document, path: str | Path) -> None:
    path = Path(path)
    path.write_text(json.dumps(document_to_dict(doc), indent=2))
    logger.info("Document saved → %s", path)
