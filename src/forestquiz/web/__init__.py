"""FastAPI web front end."""
