"""Core data model, errors and logging shared by all gitai components."""
