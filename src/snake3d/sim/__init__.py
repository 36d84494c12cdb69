"""Headless play: drive the tick logic with scripted policies, no window."""
