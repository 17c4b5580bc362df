"""Template resolution and term generation for form-driven dialogs."""
