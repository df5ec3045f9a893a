"""ResolveContext — the state shared by every converter during one resolve() call."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from svgscene.engine.options import ResolveOptions
from svgscene.models.scene_document import SceneDocument
from svgscene.svg.tree import GenericDocument, GenericNode


class Scope(enum.Enum):
    """Where content is being converted."""

    DOCUMENT = "document"
    CLIP_PATH = "clip_path"
    PATTERN = "pattern"

    @property
    def follows_links(self) -> bool:
        # Definitions never reference other definitions.
        return self is Scope.DOCUMENT


@dataclass
class ResolveContext:
    tree: GenericDocument
    doc: SceneDocument
    options: ResolveOptions
    log: logging.Logger
    # Lookups already made during this resolve
    _elements_by_id: dict[str, GenericNode | None] = field(default_factory=dict, init=False, repr=False)

    def element_by_id(self, element_id: str) -> GenericNode | None:
        if element_id not in self._elements_by_id:
            self._elements_by_id[element_id] = self.tree.element_by_id(element_id)
        return self._elements_by_id[element_id]
