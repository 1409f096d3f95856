"""Entities of the ledger domain."""

from bilancio.domain.ledger.entities.description import (
    MAX_DESCRIPTION_LENGTH,
    Description,
    DescriptionCatalog,
    validate_description,
)
from bilancio.domain.ledger.entities.total import Total
from bilancio.domain.ledger.entities.transaction import Transaction

__all__ = [
    "MAX_DESCRIPTION_LENGTH",
    "Description",
    "DescriptionCatalog",
    "Total",
    "Transaction",
    "validate_description",
]
