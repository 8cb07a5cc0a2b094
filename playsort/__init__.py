"""playsort - stable playlist reordering expressed as host move operations."""

__version__ = "0.1.0"
