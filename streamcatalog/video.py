"""Common base for every title offered by the catalog."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from streamcatalog.ratings import CatalogError, RatingList

GENRES = frozenset({"Misterio", "Accion", "Drama"})


class Video(ABC):
    """A title with an id, name, duration in minutes, genre and ratings."""

    label = "Video"

    def __init__(self, video_id: int, name: str, duration: float, genre: str) -> None:
        if genre not in GENRES:
            raise CatalogError(f"unrecognised genre: {genre!r}")
        if duration <= 0:
            raise CatalogError(f"invalid duration: {duration}")
        self.video_id = video_id
        self.name = name
        self.duration = duration
        self.genre = genre
        self.ratings = RatingList()

    def add_rating(self, rating: int) -> None:
        """Record a rating from 1 to 5."""
        self.ratings.add(rating)

    def average(self) -> float:
        """Return the mean rating of this title."""
        return self.ratings.average()

    @abstractmethod
    def show(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (stdout by default)."""
        print(str(self), end="", file=file if file is not None else sys.stdout)

    def __str__(self) -> str:
        return (
            f"{self.label}: {self.name}\n"
            f"Duracion: {self.duration:g}\n"
            f"Genero: {self.genre}\n"
            f"ID: {self.video_id}\n"
            f"Calificacion Promedio: {self.average():g}\n"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(video_id={self.video_id!r}, name={self.name!r}, "
            f"duration={self.duration!r}, genre={self.genre!r})"
        )