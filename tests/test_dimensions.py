from __future__ import annotations

from leafpop.image.dimensions import display_size, format_dimension
from leafpop.image.size import ImageSize


def test_defaults_to_width_300_keeping_ratio() -> None:
    assert display_size(ImageSize(640, 480)) == (300, 225.0)


def test_width_only_derives_height() -> None:
    assert display_size(ImageSize(640, 480), width=100) == (100, 75.0)


def test_height_only_derives_width() -> None:
    assert display_size(ImageSize(400, 200), height=50) == (100.0, 50)


def test_both_given_are_kept() -> None:
    assert display_size(ImageSize(400, 200), width=10, height=90) == (10, 90)


def test_format_dimension() -> None:
    assert format_dimension(300) == "300"
    assert format_dimension(225.0) == "225"
    assert format_dimension(200.15625) == "200.1562"
    assert format_dimension("100%") == "100%"


def test_format_dimension_huge_value_uses_exponent() -> None:
    assert format_dimension(1e7) == "1e+07"
