"""Core models, configuration and loaders for Tessera."""
