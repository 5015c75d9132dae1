"""
Base models for Jira API data.

Every model is built from a raw API payload with ``from_api_response`` and
emitted to tool callers with ``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base class for models converted from Jira REST responses."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """Create a model instance from a raw API response."""
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to the JSON-ready shape returned to tool callers."""
        raise NotImplementedError("Subclasses must implement to_simplified_dict")
