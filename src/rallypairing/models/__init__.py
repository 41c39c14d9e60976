"""Data models for Rally Pairing."""
