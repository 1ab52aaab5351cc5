"""Shared user models, errors and store."""
