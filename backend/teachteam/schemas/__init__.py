"""Request Schemas — Pydantic models validating REST bodies and GraphQL inputs."""
