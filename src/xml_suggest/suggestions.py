"""Turn candidate element names into ordered replacement proposals."""

import logging
from collections.abc import Iterable
from functools import cache

from .collation import CollatedSet
from .config import get_config
from .consts import MAX_DISTANCE_DIFF_RATIO, OTHER_LABEL, SIMILAR_LABEL
from .exceptions import RegionError, XmlSuggestError
from .models import EditProposal, ElementNameOccurrence, Range
from .similarity import classify

logger = logging.getLogger("xml-suggest.suggestions")


def select_regions(
    occurrence: ElementNameOccurrence, local_name_only: bool
) -> tuple[Range, ...]:
    """Select the ranges a replacement name is written into.

    Args:
        occurrence: Name tokens of the offending element.
        local_name_only: Replace only the part after ``prefix:``, leaving the
            prefix in place.

    Returns:
        The start tag range, followed by the end tag range when the element
        is not self-closing.

    Raises:
        RegionError: If the prefix does not fit in a name token, or the two
            ranges overlap.
    """
    ranges = [occurrence.start_tag_range]
    if occurrence.end_tag_range is not None:
        ranges.append(occurrence.end_tag_range)

    if local_name_only:
        if occurrence.prefix is None:
            raise RegionError(
                f"Element '{occurrence.local_name}' has no prefix to skip",
                context={"local_name": occurrence.local_name},
            )
        ranges = [_local_name_range(r, occurrence.prefix) for r in ranges]

    if len(ranges) == 2 and ranges[0].overlaps(ranges[1]):
        raise RegionError(
            "Start and end tag name ranges overlap",
            errors=[str(r) for r in ranges],
            context={"local_name": occurrence.local_name},
        )
    return tuple(ranges)


def _local_name_range(name_range: Range, prefix: str) -> Range:
    """Narrow a ``prefix:local`` token range to its ``local`` part."""
    skip = len(prefix) + 1  # prefix and colon
    width = name_range.end.character - name_range.start.character
    if not name_range.is_single_line or width < skip:
        raise RegionError(
            f"Prefix '{prefix}' does not fit in name range",
            context={"prefix": prefix, "range": name_range.model_dump()},
        )
    return Range(start=name_range.start.shifted(skip), end=name_range.end)


class SuggestionBuilder:
    """Rank legal element names as replacements for a misspelled one.

    Names within the typo threshold of the observed name are proposed as
    "Did you mean"; only when none qualify is every legal name proposed as a
    plain replacement. The two kinds never appear together.
    """

    def __init__(self, max_distance_ratio: float = MAX_DISTANCE_DIFF_RATIO):
        self.max_distance_ratio = max_distance_ratio

    def build(
        self,
        observed_name: str,
        has_prefix: bool,
        occurrence: ElementNameOccurrence,
        candidates: Iterable[str | None],
    ) -> list[EditProposal]:
        """Build replacement proposals for one offending element.

        Args:
            observed_name: Local name found in the document.
            has_prefix: Whether the element name carries a namespace prefix.
            occurrence: Name tokens of the element.
            candidates: Legal names in any order, possibly repeated. Entries that
                are not non-empty strings are skipped.

        Returns:
            Proposals in collation order, or an empty list if the replacement
            ranges cannot be computed or the candidates cannot be read.
        """
        try:
            ranges = select_regions(occurrence, has_prefix)
            similar, other = self._partition(observed_name, candidates)
        except XmlSuggestError as e:
            logger.debug(f"No proposals for '{observed_name}': {e.message}")
            return []
        except Exception as e:
            logger.warning(
                f"Reading candidates for '{observed_name}' failed: {e}", exc_info=True
            )
            return []

        if similar:
            names, label = similar, SIMILAR_LABEL
        else:
            names, label = other, OTHER_LABEL

        proposals = [
            EditProposal(
                label=label.format(name=name), replacement=name, ranges=ranges
            )
            for name in names
        ]
        logger.debug(
            f"Built {len(proposals)} proposals for '{observed_name}' "
            f"({len(similar)} similar, {len(other)} other)"
        )
        return proposals

    def _partition(
        self, observed_name: str, candidates: Iterable[str | None]
    ) -> tuple[CollatedSet, CollatedSet]:
        """Split usable candidates into similar and other names."""
        similar = CollatedSet()
        other = CollatedSet()
        usable = (name for name in candidates if self._is_usable(name))
        for candidate in classify(usable, observed_name, self.max_distance_ratio):
            if candidate.is_similar:
                similar.add(candidate.name)
            else:
                other.add(candidate.name)
        return similar, other

    @staticmethod
    def _is_usable(name: object) -> bool:
        if not isinstance(name, str) or not name:
            logger.debug(f"Skipping malformed candidate name {name!r}")
            return False
        return True


@cache
def get_suggestion_builder() -> SuggestionBuilder:
    """Get a cached SuggestionBuilder configured from the environment."""
    return SuggestionBuilder(get_config().max_distance_ratio)
