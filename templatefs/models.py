"""Template source value."""

from pydantic import BaseModel, ConfigDict, Field


class Source(BaseModel):
    """Raw template content paired with its logical name.

    The name is the one the caller asked for, never the resolved
    storage path.
    """

    model_config = ConfigDict(frozen=True)

    code: bytes = Field(..., description="Raw template content")
    name: str = Field(..., description="Logical template name")

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the template content."""
        return self.code.decode(encoding)
