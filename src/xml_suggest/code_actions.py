"""Quick-fix participants for schema validation diagnostics."""

import logging
from collections.abc import Iterable
from typing import Protocol

from .consts import INVALID_CHILD_CODE
from .exceptions import ContentModelUnavailableError, ResolutionError, XmlSuggestError
from .models import Diagnostic, EditProposal
from .nodes import ElementNode, NodeKind
from .protocols import ContentModelProvider, DocumentResolver
from .suggestions import SuggestionBuilder, get_suggestion_builder

logger = logging.getLogger("xml-suggest.code_actions")


class CodeActionParticipant(Protocol):
    """Protocol for objects proposing fixes for one diagnostic code."""

    def do_code_action(
        self,
        diagnostic: Diagnostic,
        document: DocumentResolver,
        content_model: ContentModelProvider,
    ) -> list[EditProposal]: ...


class InvalidChildCodeAction:
    """Suggest element names for ``cvc-complex-type.2.4.a`` diagnostics.

    The validator reports this code when an element is not allowed where it
    appears, which in practice is usually a misspelled element name.
    """

    def __init__(self, builder: SuggestionBuilder | None = None):
        self._builder = builder

    @property
    def builder(self) -> SuggestionBuilder:
        return self._builder or get_suggestion_builder()

    def do_code_action(
        self,
        diagnostic: Diagnostic,
        document: DocumentResolver,
        content_model: ContentModelProvider,
    ) -> list[EditProposal]:
        """Propose replacement names for the element the diagnostic points at.

        Args:
            diagnostic: The invalid child diagnostic.
            document: Resolver for the document the diagnostic belongs to.
            content_model: Schema lookups for legal element names.

        Returns:
            Ordered proposals; empty when the element or its content model
            cannot be resolved. Never raises.
        """
        try:
            element = self._resolve_element(diagnostic, document)
            names = possible_element_names(element, content_model)
            return self.builder.build(
                element.local_name,
                element.prefix is not None,
                element.name_occurrence(),
                names,
            )
        except XmlSuggestError as e:
            logger.debug(f"No quick fix for {diagnostic.code}: {e.message}")
        except Exception as e:
            logger.warning(
                f"Quick fix for {diagnostic.code} failed: {e}", exc_info=True
            )
        return []

    @staticmethod
    def _resolve_element(
        diagnostic: Diagnostic, document: DocumentResolver
    ) -> ElementNode:
        offset = document.offset_at(diagnostic.range.start)
        node = document.node_at(offset)
        if node is None:
            raise ResolutionError(
                f"No node at offset {offset}", context={"offset": offset}
            )
        if node.kind != NodeKind.ELEMENT:
            raise ResolutionError(
                f"Node at offset {offset} is a {node.kind}, not an element",
                context={"offset": offset, "kind": str(node.kind)},
            )
        return node


def possible_element_names(
    element: ElementNode, content_model: ContentModelProvider
) -> Iterable[str | None]:
    """Collect the element names that could replace `element`.

    When the element's prefix differs from its parent's (``<b:bean><camel:beani``)
    there is no structural relationship to filter on, so the whole vocabulary
    of the element's namespace is returned.

    Raises:
        ResolutionError: If the element has no parent element.
        ContentModelUnavailableError: If no content model covers the lookup.
    """
    parent = element.parent
    if parent is None:
        raise ResolutionError(
            f"Element '{element.local_name}' has no parent element",
            context={"offset": element.start},
        )

    if element.prefix is not None and element.prefix != parent.prefix:
        names = content_model.all_element_names(element.namespace_uri)
        if names is None:
            raise ContentModelUnavailableError(
                f"No content model for namespace '{element.namespace_uri}'",
                context={"namespace_uri": element.namespace_uri},
            )
        return names

    names = content_model.legal_child_names(parent, element.start)
    if names is None:
        raise ContentModelUnavailableError(
            f"No content model for element '{parent.local_name}'",
            context={"parent": parent.local_name, "offset": element.start},
        )
    return names


CODE_ACTION_PARTICIPANTS: dict[str, CodeActionParticipant] = {
    INVALID_CHILD_CODE: InvalidChildCodeAction(),
}


def get_code_actions(
    diagnostic: Diagnostic,
    document: DocumentResolver,
    content_model: ContentModelProvider,
) -> list[EditProposal]:
    """Run the participant registered for the diagnostic's code, if any."""
    participant = CODE_ACTION_PARTICIPANTS.get(diagnostic.code)
    if participant is None:
        logger.debug(f"No quick-fix participant for code {diagnostic.code}")
        return []
    return participant.do_code_action(diagnostic, document, content_model)
