"""Cradle backend package."""
