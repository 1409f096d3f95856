"""Bilancio command-line interface."""
