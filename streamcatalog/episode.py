"""Episodes belonging to a series."""

from __future__ import annotations

from typing import TextIO

from streamcatalog.ratings import CatalogError, RatingList


class Episode:
    """A single episode, with its name, season and ratings."""

    def __init__(self, name: str, season: int) -> None:
        if season <= 0:
            raise CatalogError(f"invalid season number: {season}")
        self.name = name
        self.season = season
        self.ratings = RatingList()

    def add_rating(self, rating: int) -> None:
        """Record a rating from 1 to 5."""
        self.ratings.add(rating)

    def average(self) -> float:
        """Return the mean rating of this episode."""
        return self.ratings.average()

    def _render(self, *heading: str) -> str:
        lines = (
            *heading,
            f"Temporada: {self.season}",
            f"Calificacion Promedio: {self.average():g}",
        )
        return "".join(f"{line}\n" for line in lines)

    def describe(self) -> str:
        """Return the detailed multi-line description of the episode."""
        return self._render("Episodio: ", f"Nombre: {self.name}")

    def show(self, file: TextIO | None = None) -> None:
        """Write the detailed description to ``file`` (stdout by default)."""
        print(self.describe(), end="", file=file)

    def __str__(self) -> str:
        return self._render(f"Episodio: {self.name}")

    def __repr__(self) -> str:
        return f"Episode(name={self.name!r}, season={self.season!r})"