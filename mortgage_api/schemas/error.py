# This project was developed with assistance from AI tools.
"""JSON error response schema."""

from pydantic import BaseModel, Field

from .calculator import FieldError


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response.

    ``fields`` is only present for request data validation errors.
    """

    error: str = Field(description="Human-readable summary of the problem.")
    fields: list[FieldError] | None = Field(
        default=None,
        description="Per-field problems, when the request body failed validation.",
    )

    def body(self) -> dict:
        """Serialize, leaving out ``fields`` when there are none."""
        return self.model_dump(exclude_none=True)
