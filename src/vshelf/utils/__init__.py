"""Utility helpers for vshelf."""
