"""commit-clock: publish what time of day you commit to a GitHub gist."""

__version__ = "0.1.0"
