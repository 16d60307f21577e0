"""CLI module for momentum."""
