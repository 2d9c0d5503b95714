"""Command-line interface for SocialNet."""
