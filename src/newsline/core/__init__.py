"""Core pipeline of the news client: models, data sources and repository."""
