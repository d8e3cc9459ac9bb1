"""User interfaces for the card matching game."""
