"""Favorites application module."""
