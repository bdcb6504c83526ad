"""pexeval - Presentation Exchange constraint evaluation for verifiable credentials."""

__version__ = "0.1.0"
