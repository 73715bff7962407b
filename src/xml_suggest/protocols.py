"""Protocol definitions for the collaborators the engine depends on."""

from collections.abc import Iterable
from typing import Protocol

from .models import Position
from .nodes import DocumentNode, ElementNode


class DocumentResolver(Protocol):
    """Protocol for a parsed document that maps positions to tree nodes."""

    def offset_at(self, position: Position) -> int:
        """Convert a line/character position into a document offset.

        Raises:
            Any exception if the position lies outside the document; the
            caller treats it as a resolution failure.
        """
        ...

    def node_at(self, offset: int) -> DocumentNode | None:
        """Return the innermost node containing `offset`, or None."""
        ...


class ContentModelProvider(Protocol):
    """Protocol for schema lookups of legal element names.

    Both methods may return names in any order, with duplicates, and may
    contain None or empty entries. Returning None means no content model
    covers the request.
    """

    def legal_child_names(
        self, parent: ElementNode, at_offset: int
    ) -> Iterable[str | None] | None:
        """Names legal as children of `parent` at `at_offset`."""
        ...

    def all_element_names(
        self, namespace_uri: str | None
    ) -> Iterable[str | None] | None:
        """Every element name declared by the schema of `namespace_uri`."""
        ...
