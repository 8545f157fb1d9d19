"""Application layer: use cases, repository protocols and DTOs."""
