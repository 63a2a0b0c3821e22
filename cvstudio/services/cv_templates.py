"""
Template registry.

A template is a LayoutStrategy: a header composer plus an ``arrange`` function that
places the shared sections into blocks. Modern, Classic and Executive are the
closed set; anything else resolves to Modern.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from cvstudio.services.cv_layout import (
    Block,
    Columns,
    Header,
    Section,
    compose_header,
    compose_split_header,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "Modern"

Sections = Dict[str, Optional[Section]]


def _present(sections: Sections, *keys: str) -> List[Section]:
    return [sections[key] for key in keys if sections.get(key) is not None]


def arrange_modern(sections: Sections) -> List[Block]:
    """Single column in fixed order."""
    return _present(
        sections, "summary", "experience", "education", "skills", "projects", "certifications"
    )


def arrange_classic(sections: Sections) -> List[Block]:
    """Narrow left column (skills, certifications), wide right column for the rest."""
    left = _present(sections, "skills", "certifications")
    right = _present(sections, "summary", "experience", "education", "projects")
    if not left and not right:
        return []
    return [Columns(columns=[left, right], weights=[1, 2])]


def arrange_executive(sections: Sections) -> List[Block]:
    """Single column, then skills and certifications side by side as the last row."""
    blocks: List[Block] = _present(sections, "summary", "experience", "education")
    side_by_side = _present(sections, "skills", "certifications")
    if side_by_side:
        blocks.append(
            Columns(columns=[[section] for section in side_by_side], weights=[1] * len(side_by_side))
        )
    return blocks


@dataclass(frozen=True)
class LayoutStrategy:
    id: str
    name: str
    description: str
    summary_heading: str
    compose_header: Callable[[object], Header]
    arrange: Callable[[Sections], List[Block]]


MODERN = LayoutStrategy(
    id="Modern",
    name="Modern",
    description="Clean and professional design",
    summary_heading="PROFILE",
    compose_header=compose_header,
    arrange=arrange_modern,
)

CLASSIC = LayoutStrategy(
    id="Classic",
    name="Classic",
    description="Traditional and formal design",
    summary_heading="PROFESSIONAL SUMMARY",
    compose_header=compose_header,
    arrange=arrange_classic,
)

EXECUTIVE = LayoutStrategy(
    id="Executive",
    name="Executive",
    description="Professional executive style",
    summary_heading="EXECUTIVE SUMMARY",
    compose_header=compose_split_header,
    arrange=arrange_executive,
)


class TemplateRegistry:
    """Case-insensitive lookup of layout strategies with a Modern fallback."""

    def __init__(self, layouts=(MODERN, CLASSIC, EXECUTIVE), default=DEFAULT_TEMPLATE):
        self._layouts = {layout.id.lower(): layout for layout in layouts}
        if default.lower() not in self._layouts:
            raise ValueError(f"Default template {default!r} is not registered")
        self.default = self._layouts[default.lower()]

    def is_registered(self, template_id: Optional[str]) -> bool:
        return bool(template_id) and template_id.strip().lower() in self._layouts

    def resolve(self, template_id: Optional[str]) -> LayoutStrategy:
        if self.is_registered(template_id):
            return self._layouts[template_id.strip().lower()]
        if template_id:
            logger.warning("⚠️ Unknown template %r, falling back to %s", template_id, self.default.id)
        return self.default

    def available(self) -> List[Dict[str, str]]:
        return [
            {"id": layout.id, "name": layout.name, "description": layout.description}
            for layout in self._layouts.values()
        ]
