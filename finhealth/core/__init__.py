"""Core models, configuration, storage and the workspace."""
