import io

import pytest

from streamcatalog.episode import Episode
from streamcatalog.ratings import CatalogError, NoRatingsError, RatingOutOfRangeError

PALOMA_DETAIL = "Episodio: \nNombre: Paloma\nTemporada: 18\nCalificacion Promedio: 3\n"


def _rated(name, season, *ratings):
    episode = Episode(name, season)
    for rating in ratings:
        episode.add_rating(rating)
    return episode


@pytest.mark.parametrize("season", [-11, 0])
def test_constructor_rejects_bad_season(season):
    with pytest.raises(CatalogError):
        Episode("Piloto", season)


@pytest.mark.parametrize(
    "name, season",
    [("Llamada", 12), ("Pilot", 1), ("Test Episodio", 1)],
)
def test_average_with_ratings(name, season):
    assert _rated(name, season, 4, 5).average() == pytest.approx(4.5)


@pytest.mark.parametrize("name, season", [("La llegada", 3), ("Pilot", 1)])
def test_average_without_ratings_raises(name, season):
    with pytest.raises(NoRatingsError):
        Episode(name, season).average()


def test_show_output():
    episode = _rated("Paloma", 18, 3)
    buffer = io.StringIO()
    episode.show(buffer)
    assert buffer.getvalue() == PALOMA_DETAIL
    assert episode.describe() == PALOMA_DETAIL


def test_show_defaults_to_stdout(capsys):
    _rated("Paloma", 18, 3).show()
    assert capsys.readouterr().out == PALOMA_DETAIL


def test_add_invalid_rating_raises():
    episode = Episode("Jamaica", 3)
    with pytest.raises(RatingOutOfRangeError):
        episode.add_rating(-23)


def test_show_without_ratings_raises():
    buffer = io.StringIO()
    with pytest.raises(NoRatingsError):
        Episode("Episodio sin calif", 1).show(buffer)
    assert buffer.getvalue() == ""


def test_str_format():
    episode = _rated("Inicio", 1, 4, 5)
    assert str(episode) == "Episodio: Inicio\nTemporada: 1\nCalificacion Promedio: 4.5\n"


def test_attributes_kept():
    episode = Episode("Pilot", 2)
    assert (episode.name, episode.season) == ("Pilot", 2)