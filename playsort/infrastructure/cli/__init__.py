"""Command-line interface for playsort."""
