"""Terminal and Textual presenters."""
