"""Rendering of parsed topics for the terminal and the browser."""
