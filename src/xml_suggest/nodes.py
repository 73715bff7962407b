"""Document tree node variants returned by a DocumentResolver.

Nodes are tagged with a NodeKind so callers branch on ``node.kind`` instead of
inspecting classes. Only the element variant carries name tokens.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

from .exceptions import ResolutionError
from .models import ElementNameOccurrence, Range


class NodeKind(StrEnum):
    """Kinds of node a resolver may find at an offset."""

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "processing_instruction"


@dataclass(eq=False)
class ElementNode:
    """An element with its resolved name tokens."""

    local_name: str
    start: int  # offset of the '<' opening the start tag
    start_tag_name: Range | None = None  # qualified name token in the start tag
    end_tag_name: Range | None = None  # qualified name token in the end tag
    prefix: str | None = None
    namespace_uri: str | None = None
    parent: "ElementNode | None" = None
    kind: Literal[NodeKind.ELEMENT] = field(default=NodeKind.ELEMENT, init=False)

    def name_occurrence(self) -> ElementNameOccurrence:
        """Build the occurrence describing this element's name tokens.

        Raises:
            ResolutionError: If the start tag name was not resolved.
        """
        if self.start_tag_name is None:
            raise ResolutionError(
                f"Element '{self.local_name}' has no start tag name range",
                context={"offset": self.start},
            )
        return ElementNameOccurrence(
            local_name=self.local_name,
            prefix=self.prefix,
            start_tag_range=self.start_tag_name,
            end_tag_range=self.end_tag_name,
        )


@dataclass(eq=False)
class TextNode:
    start: int
    data: str = ""
    parent: ElementNode | None = None
    kind: Literal[NodeKind.TEXT] = field(default=NodeKind.TEXT, init=False)


@dataclass(eq=False)
class CommentNode:
    start: int
    data: str = ""
    parent: ElementNode | None = None
    kind: Literal[NodeKind.COMMENT] = field(default=NodeKind.COMMENT, init=False)


@dataclass(eq=False)
class ProcessingInstructionNode:
    start: int
    target: str = ""
    data: str = ""
    parent: ElementNode | None = None
    kind: Literal[NodeKind.PROCESSING_INSTRUCTION] = field(
        default=NodeKind.PROCESSING_INSTRUCTION, init=False
    )


DocumentNode = ElementNode | TextNode | CommentNode | ProcessingInstructionNode
