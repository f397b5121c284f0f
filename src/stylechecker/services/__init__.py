"""Service layer — load, annotate and check in one call."""
