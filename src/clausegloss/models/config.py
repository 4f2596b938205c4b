"""Runtime configuration model for ClauseGloss."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GlossaryConfig(BaseModel):
    """Tunable limits of the extraction engine plus logging flags.

    Attributes:
        max_definition_length: Extracted phrases longer than this are
            truncated with an ellipsis
        min_definition_length: Shortest extraction any rule may return
        min_phrase_length: Shortest result accepted from the nearest-phrase
            heuristic before falling through to the last sentence
        verbose: Enable debug logging
        quiet: Only log errors
    """

    model_config = ConfigDict(extra="forbid")

    max_definition_length: int = Field(260, ge=2)
    min_definition_length: int = Field(15, ge=1)
    min_phrase_length: int = Field(20, ge=1)
    verbose: bool = False
    quiet: bool = False

    @model_validator(mode="after")
    def check_lengths(self) -> "GlossaryConfig":
        """Ensure the minimum lengths fit under the truncation limit."""
        if self.min_definition_length > self.max_definition_length:
            raise ValueError(
                f"min_definition_length ({self.min_definition_length}) must not "
                f"exceed max_definition_length ({self.max_definition_length})"
            )
        return self
