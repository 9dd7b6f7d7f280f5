"""Shared helpers for cachedrest."""
