"""Domain layer for kakeibo application."""
