"""Validation results."""

from pydantic import Field, computed_field

from photoshare.domain.model.common import DomainModel


class ValidationResult(DomainModel):
    """Outcome of validating a candidate entity.

    Maps field names to a human-readable error. No errors means OK.
    """

    errors: dict[str, str] = Field(default_factory=dict)

    @computed_field
    @property
    def ok(self) -> bool:
        return not self.errors
