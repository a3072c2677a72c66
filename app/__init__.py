"""Template kit catalog application package."""
