"""Tests for star field generation."""

import math
import random

import pytest

from galaxy_backdrop.config import BackdropConfig
from galaxy_backdrop.stars import (
    create_star,
    dynamic_depth_source,
    generate_star_field,
    populate,
    static_depth_source,
)

BOUNDS = (800, 600)


def _assert_within_generation_bounds(star, bounds) -> None:
    width, height = bounds
    assert 0 <= star.x < width
    assert 0 <= star.y < height
    assert star.depth > 0
    assert star.speed >= 0
    assert 0.2 <= star.base_alpha < 0.6
    assert 0.02 <= star.flicker_speed < 0.06
    assert 0 <= star.flicker_phase < 2 * math.pi


class TestCreateStar:
    """Tests for single star creation."""

    def test_dynamic_star_values_from_midpoint_draws(self, fixed_random) -> None:
        """Every draw at 0.5 should land each attribute in the middle of its range."""
        star = create_star(BOUNDS, depth=1.2, role="dynamic", rng=fixed_random(0.5))

        assert star.x == pytest.approx(400)
        assert star.y == pytest.approx(300)
        assert star.depth == 1.2
        assert star.speed == pytest.approx(1.2 * 0.175)
        assert star.size == pytest.approx(1.0 * 1.2)
        assert star.base_alpha == pytest.approx(0.4)
        assert star.flicker_speed == pytest.approx(0.04)
        assert star.flicker_phase == pytest.approx(math.pi)

    def test_static_star_size_ignores_depth(self, fixed_random) -> None:
        star = create_star(BOUNDS, depth=0.2, role="static", rng=fixed_random(0.5))

        assert star.size == pytest.approx(1.0)
        assert star.speed == pytest.approx(0.2 * 0.175)

    def test_upper_bounds_are_exclusive(self, fixed_random) -> None:
        """Draws just below 1.0 must stay strictly inside the bounds."""
        star = create_star(BOUNDS, depth=1.0, role="dynamic", rng=fixed_random(0.9999999))

        _assert_within_generation_bounds(star, BOUNDS)

    def test_lower_bounds_are_inclusive(self, fixed_random) -> None:
        star = create_star(BOUNDS, depth=1.0, role="dynamic", rng=fixed_random(0.0))

        assert star.x == 0
        assert star.y == 0
        assert star.speed == pytest.approx(0.05)
        assert star.base_alpha == pytest.approx(0.2)
        assert star.flicker_phase == 0

    def test_zero_bounds_place_star_at_origin(self) -> None:
        star = create_star((0, 0), depth=0.5, role="dynamic", rng=random.Random(3))

        assert (star.x, star.y) == (0, 0)


class TestPopulate:
    """Tests for populating star collections."""

    @pytest.mark.parametrize("count", [0, 1, 7, 180])
    def test_returns_exactly_count_stars(self, count: int) -> None:
        stars = populate(count, BOUNDS, lambda: 0.2, "static", random.Random(1))

        assert len(stars) == count

    def test_negative_count_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Star count must be >= 0"):
            populate(-1, BOUNDS, lambda: 0.2, "static", random.Random(1))

    def test_depth_source_called_once_per_star(self) -> None:
        depths = iter([0.4, 0.8, 1.2])
        stars = populate(3, BOUNDS, lambda: next(depths), "dynamic", random.Random(1))

        assert [star.depth for star in stars] == [0.4, 0.8, 1.2]

    def test_generated_stars_respect_bounds(self) -> None:
        rng = random.Random(42)
        config = BackdropConfig()
        stars = populate(500, BOUNDS, dynamic_depth_source(config, rng), "dynamic", rng)

        for star in stars:
            _assert_within_generation_bounds(star, BOUNDS)
            assert 0.3 <= star.depth < 1.5


class TestGenerateStarField:
    """Tests for the combined dynamic/static star field."""

    def test_default_counts(self) -> None:
        field = generate_star_field(BOUNDS, BackdropConfig(), random.Random(5))

        assert len(field.dynamic_stars) == 100
        assert len(field.static_stars) == 180

    def test_static_stars_use_fixed_depth(self) -> None:
        field = generate_star_field(BOUNDS, BackdropConfig(static_depth=0.25), random.Random(5))

        assert {star.depth for star in field.static_stars} == {0.25}

    def test_collections_are_disjoint(self) -> None:
        field = generate_star_field(BOUNDS, BackdropConfig(), random.Random(5))

        dynamic_ids = {id(star) for star in field.dynamic_stars}
        assert not any(id(star) in dynamic_ids for star in field.static_stars)

    def test_empty_collections(self) -> None:
        config = BackdropConfig(dynamic_count=0, static_count=0)
        field = generate_star_field(BOUNDS, config, random.Random(5))

        assert field.dynamic_stars == []
        assert field.static_stars == []

    def test_same_seed_same_field(self) -> None:
        config = BackdropConfig(dynamic_count=20, static_count=20)

        first = generate_star_field(BOUNDS, config, random.Random(99))
        second = generate_star_field(BOUNDS, config, random.Random(99))

        assert first == second

    def test_static_depth_source_is_constant(self) -> None:
        source = static_depth_source(BackdropConfig())

        assert {source() for _ in range(5)} == {0.2}
