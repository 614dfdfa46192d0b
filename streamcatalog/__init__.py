"""A catalogue of movies and series with episodes, ratings and text listings."""

__version__ = "1.0.0"
__all__ = ["ratings", "episode", "video", "movie", "series", "cli"]