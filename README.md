# streamcatalog

A small model of a streaming platform's catalogue: movies and series,
episodes, ratings from 1 to 5, and average ratings shown as plain text
listings.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the sample catalogue

```
streamcatalog
```

This builds a sample catalogue with one movie and one series (with one
episode). It prints every video with its `show()` method, then the same videos
again in their `str()` form, and then the videos whose genre is `Drama`. The
command takes no options besides `--help`.

## Using the library

```python
from streamcatalog.movie import Movie
from streamcatalog.series import Series
from streamcatalog.episode import Episode
from streamcatalog.cli import show_genre, build_sample_catalog

movie = Movie(1, "Fast and furious", 148, "Accion")
movie.add_rating(5)
movie.add_rating(4)
print(movie.average())        # 4.5

pilot = Episode("Pilot", 1)
pilot.add_rating(4)

series = Series(2, "One drama story", 10, "Drama")
series.add_episode(pilot)
print(series.average())       # mean of the episodes' averages: 4.0
print(series.episodes)        # tuple of episodes in the order added

print(movie, end="")          # multi-line description
series.show()                 # writes the series and its episodes to stdout
pilot.show()                  # detailed episode description

show_genre([movie, series], "Drama")
show_genre(build_sample_catalog(), "Accion")
```

Every `show` method (and `Series.show_episodes` and `show_genre`) takes an
optional `file` argument to write somewhere other than standard output.

### Modules

- `streamcatalog.ratings` – `RatingList`, and the errors `CatalogError`,
  `RatingOutOfRangeError` and `NoRatingsError`.
- `streamcatalog.episode` – `Episode`.
- `streamcatalog.video` – the abstract base class `Video`.
- `streamcatalog.movie` – `Movie`.
- `streamcatalog.series` – `Series`.
- `streamcatalog.cli` – `show_genre`, `build_sample_catalog` and `main`.

### Rules

- The genre must be one of `Misterio`, `Accion` or `Drama`, and the duration
  must be greater than zero; otherwise the constructor raises
  `streamcatalog.ratings.CatalogError` (a subclass of `ValueError`).
- An episode's season must be greater than zero, or `CatalogError` is raised.
- Ratings must be integers from 1 to 5. An integer outside that range raises
  `RatingOutOfRangeError`; a value that is not an integer raises `TypeError`.
- Asking for an average when there are no ratings raises `NoRatingsError`.
  The same happens when showing or printing a video or episode that has no
  ratings yet.
- A series takes its average from its episodes' averages. A series with no
  episodes raises `NoRatingsError`, and ratings added to the series itself do
  not count toward its average.

## What it does not do

The catalogue lives only in memory: there is no storage, no loading or saving
of titles, and no playback. The command only prints the built-in sample
catalogue.