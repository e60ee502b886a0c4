"""
Run configuration, policy constants and error types for polycolor.
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError

DEFAULT_LIBRARY = "pentominoes"

# Only this many valid variations are rendered after an overlay search
MAX_RENDERED_SOLUTIONS = 10

# A "nice" coloring has every color class the same size. These sizes fit a
# 60-cell board tiled by the twelve pentominoes: three classes of four
# pieces, or four classes of three pieces. Other boards need other values.
BALANCED_CLASS_SIZES: dict[int, int] = {
    3: 4 * 5,
    4: 3 * 5,
}


class InvalidConfiguration(ValueError):
    """Malformed board size or out-of-range solution index."""


class MissingShapeLibrary(LookupError):
    """The requested shape library does not exist."""


class RunConfig(BaseModel):
    """Arguments of one run: board size and optional solution indices."""
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    base_index: Optional[int] = Field(default=None, ge=0)
    target_index: Optional[int] = Field(default=None, ge=0)
    library: str = DEFAULT_LIBRARY
    svg_path: Optional[str] = None

    @classmethod
    def build(cls, **kwargs) -> "RunConfig":
        """Validate arguments, raising InvalidConfiguration on failure."""
        try:
            config = cls(**kwargs)
        except ValidationError as e:
            raise InvalidConfiguration(str(e)) from e
        if config.target_index is not None and config.base_index is None:
            raise InvalidConfiguration("A target solution needs a base solution")
        return config

    def check_index(self, index: int, solution_count: int) -> None:
        """Raise if index does not name one of the enumerated solutions."""
        if index >= solution_count:
            raise InvalidConfiguration(
                f"Solution {index} out of range: only {solution_count} "
                f"solutions for a {self.width}x{self.height} board"
            )
