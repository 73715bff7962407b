"""xml-suggest package

Quick-fix suggestions for XML schema validation errors: ranks the element
names legal at a position against a misspelled one and returns ready-made
replacement proposals.
"""

from .code_actions import InvalidChildCodeAction, get_code_actions
from .collation import CollatedSet
from .config import Config, get_config, setup_logging
from .consts import PACKAGE_VERSION
from .exceptions import (
    ContentModelUnavailableError,
    RegionError,
    ResolutionError,
    XmlSuggestError,
)
from .models import (
    Diagnostic,
    EditProposal,
    ElementNameOccurrence,
    Position,
    Range,
    TextEdit,
)
from .similarity import bounded_levenshtein, is_similar
from .suggestions import SuggestionBuilder, get_suggestion_builder

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "get_config",
    "get_code_actions",
    "get_suggestion_builder",
    "setup_logging",
    "bounded_levenshtein",
    "is_similar",
    "Config",
    "CollatedSet",
    "InvalidChildCodeAction",
    "SuggestionBuilder",
    "Diagnostic",
    "EditProposal",
    "ElementNameOccurrence",
    "Position",
    "Range",
    "TextEdit",
    "XmlSuggestError",
    "ResolutionError",
    "RegionError",
    "ContentModelUnavailableError",
]
