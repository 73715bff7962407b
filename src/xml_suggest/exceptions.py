"""xml-suggest custom exceptions.

Exception Design Principles:
1. Raise these only inside the engine; the quick-fix boundary converts every
   one of them into "no suggestions" for the diagnostic.
2. Split on the stage that failed:
   - The offending node or its name token cannot be resolved (ResolutionError)
   - The schema has nothing to say about the position (ContentModelUnavailableError)
3. Malformed candidate names are not errors: they are skipped one by one.
"""


class XmlSuggestError(Exception):
    """Base exception for all xml-suggest errors.

    Carries the failing context so the boundary can log something useful
    before degrading to an empty result.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        context: dict = None,  # additional detailed context
    ):
        """Initialize XmlSuggestError.

        Args:
            message: Primary error message
            errors: List of specific error details
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.context = context or {}


class ResolutionError(XmlSuggestError):
    """The offending element cannot be located in the document tree.

    Raised when:
    - No node exists at the diagnostic offset
    - The node found is not an element (text, comment, ...)
    - The element has no element parent
    - The element carries no start-tag name range
    """

    pass


class RegionError(ResolutionError):
    """The replacement region for a name token cannot be computed.

    Typically the prefix reported for the element does not fit inside the
    start or end tag name range.
    """

    pass


class ContentModelUnavailableError(XmlSuggestError):
    """No content model covers the parent element or the foreign namespace.

    Treated as "no candidates" rather than as a fault.
    """

    pass
