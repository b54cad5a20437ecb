"""Tests for the eased identity -> target animation."""
import pytest

from lintrans.animation import ANIMATING, IDLE, AnimationDriver, ease_in_out_quad
from lintrans.matrices import identity_matrix, rotation_matrix, scaling_matrix


@pytest.fixture
def driver():
    return AnimationDriver()


class TestEasing:

    def test_endpoints_and_midpoint(self):
        assert ease_in_out_quad(0) == 0
        assert ease_in_out_quad(0.5) == 0.5
        assert ease_in_out_quad(1) == 1

    def test_monotonic(self):
        values = [ease_in_out_quad(i / 100) for i in range(101)]
        assert values == sorted(values)

    def test_symmetric(self):
        for p in (0.1, 0.25, 0.4):
            assert ease_in_out_quad(p) + ease_in_out_quad(1 - p) == pytest.approx(1)


class TestAnimationDriver:

    def test_starts_idle_at_rest(self, driver):
        assert driver.state == IDLE
        assert driver.interpolation == 1
        assert driver.display_matrix() == identity_matrix()
        assert driver.tick(12345) == 1

    def test_start_shows_identity(self, driver):
        driver.request(scaling_matrix(2, 2), now_ms=5000)
        assert driver.state == ANIMATING
        assert driver.tick(5000) == 0
        assert driver.display_matrix() == identity_matrix()

    def test_midpoint(self, driver):
        driver.request(scaling_matrix(2, 2), now_ms=0)
        assert driver.tick(500) == 0.5
        assert driver.display_matrix() == scaling_matrix(1.5, 1.5)

    def test_finishes_and_commits(self, driver):
        target = scaling_matrix(2, 2)
        driver.request(target, now_ms=0)
        driver.tick(400)
        assert driver.tick(1000) == 1
        assert driver.state == IDLE
        assert driver.resting == target
        assert driver.display_matrix() == target

    def test_overshoot_is_clamped(self, driver):
        driver.request(scaling_matrix(2, 2), now_ms=0)
        assert driver.tick(4000) == 1
        assert driver.display_matrix() == scaling_matrix(2, 2)

    def test_request_while_animating_restarts(self, driver):
        first = scaling_matrix(2, 2)
        second = rotation_matrix(1.0)
        driver.request(first, now_ms=0)
        driver.tick(600)

        driver.request(second, now_ms=600)
        assert driver.target == second
        assert driver.tick(600) == 0
        assert driver.tick(1100) == 0.5
        assert driver.is_animating

        driver.tick(1600)
        assert driver.state == IDLE
        assert driver.resting == second

    def test_resting_unchanged_until_commit(self, driver):
        driver.request(scaling_matrix(3, 3), now_ms=0)
        driver.tick(999)
        assert driver.resting == identity_matrix()

    def test_custom_duration(self):
        d = AnimationDriver(duration_ms=200)
        d.request(scaling_matrix(2, 2), now_ms=0)
        assert d.tick(100) == 0.5
        assert d.tick(200) == 1
