"""Domain layer: models, common result types, repositories and services."""
