"""Application services orchestrating features for the CLI."""
