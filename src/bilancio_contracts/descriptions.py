"""Description (category) models."""

from pydantic import Field

from .common import CamelModel, CategorizedTypeValue


class DescriptionPayload(CamelModel):
    id: int
    type: CategorizedTypeValue
    description: str
    occurrences: int | None = None


class DescriptionsResponse(CamelModel):
    earning_description: list[DescriptionPayload] = Field(default_factory=list)
    expense_description: list[DescriptionPayload] = Field(default_factory=list)


class UpdateDescriptionRequest(CamelModel):
    id: int
    type: CategorizedTypeValue
    description: str = Field(..., min_length=1, max_length=100)
