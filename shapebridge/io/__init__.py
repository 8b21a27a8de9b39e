"""File adapters for shapebridge."""
