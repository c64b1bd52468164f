"""API layer - thin views returning pydantic responses."""
