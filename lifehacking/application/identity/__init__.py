"""Identity application module."""
