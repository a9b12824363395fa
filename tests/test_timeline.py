import pytest

from timeline import (FAST_OUT_SLOW_IN, REVERSE, Constant, CubicBezier,
                      InfiniteRepeatable, linear)


class TestInfiniteRepeatable:
    def test_linear_ramp(self):
        driver = InfiniteRepeatable(0.0, 1.0, 2000)
        assert driver.value_at(0) == 0
        assert driver.value_at(500) == 0.25
        assert driver.value_at(1000) == 0.5

    def test_restarts_each_period(self):
        driver = InfiniteRepeatable(0.0, 1.0, 2000)
        assert driver.value_at(2000) == 0
        assert driver.value_at(3000) == 0.5
        assert driver.value_at(1999) < 1

    def test_rotation_range(self):
        driver = InfiniteRepeatable(0.0, 360.0, 3000)
        assert driver.value_at(1500) == pytest.approx(180)
        assert driver.value_at(4500) == pytest.approx(180)

    def test_delay_holds_initial_value(self):
        driver = InfiniteRepeatable(0.0, 2.0, 700, delay=500)
        assert driver.period == 1200
        assert driver.value_at(0) == 0
        assert driver.value_at(250) == 0
        assert driver.value_at(500) == 0
        assert driver.value_at(675) == 0.5
        assert driver.value_at(850) == 1.0
        assert driver.value_at(1199) == pytest.approx(2 * 699 / 700)
        assert driver.value_at(1200) == 0
        assert driver.value_at(1200 + 850) == 1.0

    def test_fraction_at(self):
        driver = InfiniteRepeatable(0.0, 2.0, 700, delay=500)
        assert driver.fraction_at(100) == (0, 0.0)
        assert driver.fraction_at(1200 + 675) == (1, 0.25)

    def test_reverse(self):
        driver = InfiniteRepeatable(0.0, 1.0, 1000, repeat_mode=REVERSE)
        assert driver.value_at(250) == 0.25
        assert driver.value_at(1250) == 0.75
        assert driver.value_at(2250) == 0.25

    def test_reverse_plays_delay_last(self):
        driver = InfiniteRepeatable(
            0.0, 1.0, 100, delay=50, repeat_mode=REVERSE)
        assert driver.value_at(10) == 0
        assert driver.value_at(149) == pytest.approx(0.99)
        # The backward leg starts moving at once...
        assert driver.value_at(150) == 1
        assert driver.value_at(160) == pytest.approx(0.9)
        assert driver.value_at(240) == pytest.approx(0.1)
        # ...and holds the initial value through the delay.
        assert driver.value_at(270) == 0
        assert driver.value_at(299) == 0
        assert driver.value_at(310) == 0

    def test_easing_is_applied(self):
        driver = InfiniteRepeatable(
            0.0, 1.0, 1000, easing=lambda fraction: fraction ** 2)
        assert driver.value_at(500) == 0.25

    def test_invalid_duration(self):
        with pytest.raises(ValueError):
            InfiniteRepeatable(0.0, 1.0, 0)

    def test_invalid_delay(self):
        with pytest.raises(ValueError):
            InfiniteRepeatable(0.0, 1.0, 100, delay=-1)

    def test_invalid_repeat_mode(self):
        with pytest.raises(ValueError):
            InfiniteRepeatable(0.0, 1.0, 100, repeat_mode="bounce")

    def test_negative_elapsed(self):
        driver = InfiniteRepeatable(0.0, 1.0, 100)
        with pytest.raises(ValueError):
            driver.value_at(-1)


class TestEasing:
    def test_linear(self):
        assert linear(0.3) == 0.3

    def test_end_points(self):
        assert FAST_OUT_SLOW_IN(0) == 0
        assert FAST_OUT_SLOW_IN(1) == 1
        assert FAST_OUT_SLOW_IN(-0.5) == 0
        assert FAST_OUT_SLOW_IN(1.5) == 1

    def test_fast_out_slow_in_leads_linear(self):
        assert 0.5 < FAST_OUT_SLOW_IN(0.5) < 1

    def test_monotonic(self):
        values = [FAST_OUT_SLOW_IN(i / 50) for i in range(51)]
        assert values == sorted(values)

    def test_straight_curve_is_identity(self):
        straight = CubicBezier(1 / 3, 1 / 3, 2 / 3, 2 / 3)
        for x in (0.1, 0.25, 0.5, 0.9):
            assert straight(x) == pytest.approx(x, abs=1e-5)

    def test_control_points_out_of_range(self):
        with pytest.raises(ValueError):
            CubicBezier(1.5, 0, 0.2, 1)


class TestConstant:
    def test_ignores_time(self):
        driver = Constant(0.75)
        assert driver.value_at(0) == 0.75
        assert driver.value_at(123456) == 0.75
