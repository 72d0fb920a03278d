"""Prompt and request-body construction for the Gemini calls."""
