"""Application use cases grouped by actor."""
