"""CLI command modules, one per entity kind."""
