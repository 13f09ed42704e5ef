"""Runnable demo scenarios."""
