"""A small arcade shooter with a swaying enemy formation, drawn with pygame or run headless."""

__version__ = "0.1.0"