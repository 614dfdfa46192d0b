import pytest

from streamcatalog.ratings import (
    CatalogError,
    NoRatingsError,
    RatingList,
    RatingOutOfRangeError,
)


def test_average_of_two_ratings():
    ratings = RatingList()
    ratings.add(4)
    ratings.add(5)
    assert ratings.average() == pytest.approx(4.5)


def test_average_of_limits():
    ratings = RatingList()
    ratings.add(1)
    ratings.add(5)
    assert ratings.average() == pytest.approx(3.0)


def test_empty_average_raises():
    with pytest.raises(NoRatingsError):
        RatingList().average()


@pytest.mark.parametrize("rating", [0, 6, -1, 10, -23, 7])
def test_out_of_range_rejected(rating):
    ratings = RatingList()
    with pytest.raises(RatingOutOfRangeError):
        ratings.add(rating)
    assert len(ratings) == 0


def test_errors_share_base_class():
    ratings = RatingList()
    with pytest.raises(CatalogError):
        ratings.add(0)
    with pytest.raises(ValueError):
        ratings.average()


@pytest.mark.parametrize("bad", [4.5, "3", True])
def test_non_int_rejected(bad):
    ratings = RatingList()
    with pytest.raises(TypeError):
        ratings.add(bad)
    assert len(ratings) == 0


def test_iteration_preserves_order_and_length():
    ratings = RatingList()
    for value in (3, 1, 5):
        ratings.add(value)
    assert list(ratings) == [3, 1, 5]
    assert len(ratings) == 3


def test_average_lies_between_min_and_max():
    ratings = RatingList()
    values = [1, 2, 3, 4, 5, 5, 2]
    for value in values:
        ratings.add(value)
    assert min(values) <= ratings.average() <= max(values)