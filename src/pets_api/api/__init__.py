"""HTTP layer: routes, handlers, schemas and mappers."""
