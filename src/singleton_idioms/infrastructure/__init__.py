"""Infrastructure layer - logging and generic singleton access."""
