"""Shared utilities: logging setup and the generation clock. No business logic."""
