"""Infrastructure layer - logging, error handling, adapters and registries."""
