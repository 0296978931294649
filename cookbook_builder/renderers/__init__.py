"""Rendering backends for the finished page list."""
