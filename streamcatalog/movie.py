"""Movies offered by the catalog."""

from __future__ import annotations

from typing import TextIO

from streamcatalog.video import Video


class Movie(Video):
    """A standalone film rated directly by viewers."""

    label = "Pelicula"

    def __init__(self, video_id, name, duration, genre) -> None:
        """Create a movie; genre and duration are validated by ``Video``."""
        super().__init__(video_id, name, duration, genre)

    def show(self, file: TextIO | None = None) -> None:
        """Print the movie card, to stdout unless ``file`` is given."""
        super().show(file)

    def __str__(self) -> str:
        return super().__str__()