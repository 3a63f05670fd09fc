"""Utility helpers for TodoMatic."""
