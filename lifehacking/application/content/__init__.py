"""Content (tips and categories) application module."""
