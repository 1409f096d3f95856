"""Domain layer: ledger entities and reporting."""
