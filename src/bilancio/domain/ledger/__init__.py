"""Ledger domain: transactions, accounts ("totals") and descriptions."""
