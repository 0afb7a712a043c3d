"""User interface layers for rcargo."""
