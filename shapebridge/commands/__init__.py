"""CLI command modules for shapebridge."""
