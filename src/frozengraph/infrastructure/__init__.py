"""Infrastructure layer: adapters from graph values to third-party libraries."""
