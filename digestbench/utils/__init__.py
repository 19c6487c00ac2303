"""Utility helpers for digestbench."""
