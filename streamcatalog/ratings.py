"""Rating collections and the errors raised by the catalog."""

from __future__ import annotations

from collections.abc import Iterator

MIN_RATING = 1
MAX_RATING = 5


class CatalogError(ValueError):
    """Base class for every error raised by the catalog."""


class RatingOutOfRangeError(CatalogError):
    """A rating lies outside the accepted range."""


class NoRatingsError(CatalogError):
    """An average was requested from an empty set of ratings."""


class RatingList:
    """An ordered collection of integer ratings from 1 to 5."""

    def __init__(self) -> None:
        self._ratings: list[int] = []

    def add(self, rating: int) -> None:
        """Append a rating, rejecting anything outside 1..5."""
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise TypeError(f"rating must be an int, not {type(rating).__name__}")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise RatingOutOfRangeError(
                f"rating {rating} is out of range ({MIN_RATING}-{MAX_RATING})"
            )
        self._ratings.append(rating)

    def average(self) -> float:
        """Return the mean rating; raise NoRatingsError when empty."""
        if not self._ratings:
            raise NoRatingsError("cannot average without ratings")
        return sum(self._ratings) / len(self._ratings)

    def __len__(self) -> int:
        return len(self._ratings)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ratings)

    def __repr__(self) -> str:
        return f"RatingList({self._ratings!r})"