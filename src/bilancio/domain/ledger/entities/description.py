"""Description (category) entity."""

from __future__ import annotations

from dataclasses import dataclass

from bilancio.domain.ledger.exceptions import InvalidDescriptionError
from bilancio.domain.ledger.value_objects import OperationType

MAX_DESCRIPTION_LENGTH = 100


@dataclass(frozen=True)
class Description:
    """User-defined label classifying income or expense transactions."""

    id: int
    type: OperationType
    description: str
    occurrences: int | None = None

    def __post_init__(self) -> None:
        validate_description(self.type, self.description)


def validate_description(operation: OperationType, text: str | None) -> str:
    """Check a category name and return it stripped."""
    if not operation.is_categorized:
        raise InvalidDescriptionError("withdrawals cannot be categorized", text)
    stripped = (text or "").strip()
    if not stripped:
        raise InvalidDescriptionError("category name is required", text)
    if len(stripped) > MAX_DESCRIPTION_LENGTH:
        raise InvalidDescriptionError("category name is too long", text)
    return stripped


@dataclass(frozen=True)
class DescriptionCatalog:
    """All descriptions of a user, split by operation type."""

    earning: tuple[Description, ...] = ()
    expense: tuple[Description, ...] = ()

    def for_type(self, operation: OperationType) -> tuple[Description, ...]:
        if operation is OperationType.INCOME:
            return self.earning
        if operation is OperationType.EXPENSE:
            return self.expense
        return ()

    def search(self, operation: OperationType, term: str | None) -> list[Description]:
        """Descriptions of a type whose text contains ``term`` (case-insensitive)."""
        needle = (term or "").lower()
        return [d for d in self.for_type(operation) if needle in d.description.lower()]
