"""Infrastructure layer: file system access and the command-line interface."""
