"""Core quiz primitives: models, errors, randomness and formatting."""
