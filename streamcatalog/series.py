"""Series made up of rated episodes."""

from __future__ import annotations

import sys
from typing import TextIO

from streamcatalog.episode import Episode
from streamcatalog.ratings import NoRatingsError
from streamcatalog.video import Video


class Series(Video):
    """A title whose rating is the mean of its episodes' averages."""

    label = "Serie"

    def __init__(self, video_id: int, name: str, duration: float, genre: str) -> None:
        super().__init__(video_id, name, duration, genre)
        self._episodes: list[Episode] = []

    def add_episode(self, episode: Episode) -> None:
        """Append an episode to the series."""
        self._episodes.append(episode)

    @property
    def episodes(self) -> tuple[Episode, ...]:
        """The episodes in the order they were added."""
        return tuple(self._episodes)

    def show_episodes(self, file: TextIO | None = None) -> None:
        """Write every episode's summary to ``file`` (stdout by default)."""
        out = file if file is not None else sys.stdout
        for episode in self._episodes:
            print(episode, end="", file=out)

    def average(self) -> float:
        """Return the mean of the episodes' average ratings.

        Ratings given to the series itself are not taken into account.
        """
        if not self._episodes:
            raise NoRatingsError("no episodes to average")
        return sum(ep.average() for ep in self._episodes) / len(self._episodes)

    def _header(self) -> str:
        return (
            f"{self.label}: {self.name}\n"
            f"Duracion: {self.duration:g}\n"
            f"Genero: {self.genre}\n"
            f"ID: {self.video_id}\n"
        )

    def show(self, file: TextIO | None = None) -> None:
        """Write the series description and its episodes to ``file``.

        The header lines are written before the average is computed, so an
        unrated series still leaves its header in the output when it raises.
        """
        out = file if file is not None else sys.stdout
        print(self._header(), end="", file=out)
        print(f"Calificacion Promedio: {self.average():g}", file=out)
        print("Episodios:", file=out)
        self.show_episodes(out)

    def __str__(self) -> str:
        average = self.average()
        episodes = "".join(str(ep) for ep in self._episodes)
        return (
            f"{self._header()}"
            f"Calificacion Promedio: {average:g}\n"
            "Episodios:\n"
            f"{episodes}"
        )