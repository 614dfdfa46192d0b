"""Command that builds a small sample catalog and prints it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from streamcatalog.episode import Episode
from streamcatalog.movie import Movie
from streamcatalog.series import Series
from streamcatalog.video import Video


def show_genre(videos: Iterable[Video], genre: str, file: TextIO | None = None) -> None:
    """Write every video of ``genre``, each followed by a blank line."""
    print(f"Videos del genero: {genre}", file=file)
    for video in videos:
        if video.genre == genre:
            video.show(file)
            print(file=file)


def build_sample_catalog() -> list[Video]:
    """Return the demonstration catalog: one movie and one series."""
    movie = Movie(1, "Fast and furious", 148, "Accion")
    movie.add_rating(5)

    pilot = Episode("Pilot", 1)
    pilot.add_rating(4)

    series = Series(2, "One drama story", 10.0, "Drama")
    series.add_episode(pilot)
    series.add_rating(5)

    return [movie, series]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample catalog in every available form."""
    parser = argparse.ArgumentParser(
        prog="streamcatalog",
        description="Print a sample streaming catalog.",
    )
    parser.parse_args(argv)

    videos = build_sample_catalog()
    for video in videos:
        video.show()
    print("".join(map(str, videos)))
    show_genre(videos, "Drama")
    return 0


if __name__ == "__main__":
    sys.exit(main())