"""Logging helpers for percentq (standard-library logging)."""
