"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; services derive changed copies with
    ``model_copy(update=...)``. Unknown fields are rejected so a misspelt
    candidate field fails loudly instead of being dropped.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
