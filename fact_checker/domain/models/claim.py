"""Domain model for factual claims."""

from pydantic import BaseModel, Field, field_validator


class Claim(BaseModel):
    """Represents a statement to be fact-checked."""

    text: str = Field(..., description="The claim text, trimmed of surrounding whitespace")

    @field_validator("text")
    @classmethod
    def strip_text(cls, value: str) -> str:
        """Trim surrounding whitespace from the claim text."""
        return value.strip()

    @property
    def is_empty(self) -> bool:
        """Check if there is anything left to check."""
        return not self.text

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        json_schema_extra = {
            "example": {
                "text": "The Great Wall of China is visible from space with the naked eye."
            }
        }
