"""Illustration adapter package.

Scope:
    Sends the analysis `image_prompt` to the image model and turns the response
    into an `ImageOutcome` (ready data URI or unavailable).

Non-goals:
    - No retry of failed generations.
    - No caching or storage of generated images.
"""
