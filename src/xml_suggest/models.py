from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# DOCUMENT LOCATION MODELS
# =============================================================================
# Zero-based line/character coordinates, as reported by the validator.


class Position(BaseModel):
    """A zero-based line/character position in a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0, description="Zero-based line number")
    character: int = Field(..., ge=0, description="Zero-based character offset")

    def as_tuple(self) -> tuple[int, int]:
        """Sort key ordering positions by line, then character."""
        return (self.line, self.character)

    def shifted(self, characters: int) -> "Position":
        """Return the position `characters` further along the same line."""
        return Position(line=self.line, character=self.character + characters)


class Range(BaseModel):
    """A half-open [start, end) span of a document."""

    model_config = ConfigDict(frozen=True)

    start: Position = Field(..., description="Inclusive start position")
    end: Position = Field(..., description="Exclusive end position")

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.end.as_tuple() < self.start.as_tuple():
            raise ValueError(f"Range end {self.end} precedes start {self.start}")
        return self

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def overlaps(self, other: "Range") -> bool:
        """Whether the two spans share at least one character."""
        return (
            self.start.as_tuple() < other.end.as_tuple()
            and other.start.as_tuple() < self.end.as_tuple()
        )


class Diagnostic(BaseModel):
    """A validation error reported against a document range.

    Created by the validator and consumed once by the quick-fix participants;
    never mutated.
    """

    model_config = ConfigDict(frozen=True)

    range: Range = Field(..., description="Range bracketing the offending name")
    message: str = Field("", description="Human-readable validator message")
    code: str | None = Field(None, description="Validator error code")
    source: str | None = Field(None, description="Validator that produced it")


# =============================================================================
# SUGGESTION MODELS
# =============================================================================
# The resolved element name the engine works on, and the edit proposals it
# hands back to the caller.


class ElementNameOccurrence(BaseModel):
    """Name tokens of the offending element in its start and end tags.

    Both ranges cover the whole qualified name (``prefix:local``). Name tokens
    never span lines.
    """

    model_config = ConfigDict(frozen=True)

    local_name: str = Field(..., description="Local part of the element name")
    prefix: str | None = Field(None, description="Namespace prefix, if any")
    start_tag_range: Range = Field(..., description="Name token in the start tag")
    end_tag_range: Range | None = Field(
        None, description="Name token in the end tag; None when self-closing"
    )

    @property
    def qualified_name(self) -> str:
        if self.prefix is None:
            return self.local_name
        return f"{self.prefix}:{self.local_name}"


class TextEdit(BaseModel):
    """Replace the text of `range` with `new_text`."""

    model_config = ConfigDict(frozen=True)

    range: Range
    new_text: str


class EditProposal(BaseModel):
    """A labelled replacement applied to one or two ranges at once."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Title shown for the quick fix")
    replacement: str = Field(..., description="Text written into every range")
    ranges: tuple[Range, ...] = Field(
        ..., min_length=1, max_length=2, description="Ranges to overwrite"
    )

    @model_validator(mode="after")
    def _check_disjoint(self) -> "EditProposal":
        for i, first in enumerate(self.ranges):
            for second in self.ranges[i + 1 :]:
                if first.overlaps(second):
                    raise ValueError(f"Edit ranges overlap: {first} and {second}")
        return self

    def to_text_edits(self) -> list[TextEdit]:
        """Expand into one TextEdit per range, in range order."""
        return [TextEdit(range=r, new_text=self.replacement) for r in self.ranges]
