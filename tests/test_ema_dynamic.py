# tests/test_ema_dynamic.py
import math
import pytest

from emwa import Smoothing, ModeMismatchError, StaleDataError, EMWAError

def test_first_point_seeds_value_and_time(dynamic_factory):
    e = dynamic_factory(0.5)
    assert e.add_with_time(1.0, 0.0) == 1.0
    assert e.time == 0.0
    assert e.datapoints == 1

def test_first_point_may_predate_zero(dynamic_factory):
    e = dynamic_factory()
    assert e.add_with_time(3.0, -50.0) == 3.0
    assert e.time == -50.0

def test_second_point_uses_decayed_weight(dynamic_factory):
    e = dynamic_factory(0.5)
    e.add_with_time(1.0, 0.0)
    w = math.exp(-0.5)
    v = e.add_with_time(2.0, 1.0)
    assert v == pytest.approx(w * 2.0 + (1 - w) * 1.0)
    assert v == pytest.approx(1.6065, abs=1e-4)
    assert e.time == 1.0
    assert e.datapoints == 2

def test_weight_ignores_alpha(dynamic_factory):
    a, b = dynamic_factory(0.1), dynamic_factory(0.9)
    for e in (a, b):
        e.add_with_time(1.0, 0.0)
        e.add_with_time(5.0, 2.0)
    assert a.value() == b.value()

def test_equal_timestamp_replaces_value(dynamic_factory):
    e = dynamic_factory()
    e.add_with_time(1.0, 10.0)
    e.add_with_time(2.0, 11.0)
    assert e.add_with_time(8.0, 11.0) == 8.0
    assert e.datapoints == 3

def test_increasing_timestamps_all_succeed(dynamic_factory):
    e = dynamic_factory()
    clock = 100000.0
    for i in range(1, 100):
        e.add_with_time(float(i), clock)
        clock += 1.0
    assert e.datapoints == 99
    assert e.time == 100098.0
    assert 1.0 < e.value() < 99.0

def test_stale_timestamp_is_rejected_atomically(dynamic_factory):
    e = dynamic_factory()
    e.add_with_time(1.0, 5.0)
    e.add_with_time(3.0, 7.0)
    before = (e.value(), e.datapoints, e.time)
    with pytest.raises(StaleDataError) as ei:
        e.add_with_time(100.0, 6.5)
    assert isinstance(ei.value, EMWAError)
    assert ei.value.time == 6.5 and ei.value.last_time == 7.0
    assert (e.value(), e.datapoints, e.time) == before
    # recovers on the next in-order point
    e.add_with_time(4.0, 8.0)
    assert e.datapoints == 3

def test_fixed_ingest_refused_without_mutation(dynamic_factory):
    e = dynamic_factory()
    e.add_with_time(2.0, 1.0)
    with pytest.raises(ModeMismatchError) as ei:
        e.add(9.0)
    assert ei.value.expected is Smoothing.STATIC
    assert (e.value(), e.datapoints, e.time) == (2.0, 1, 1.0)

def test_compute_alpha_is_pure(dynamic_factory):
    e = dynamic_factory()
    e.add_with_time(1.0, 0.0)
    assert e.compute_alpha(0.0) == 1.0
    assert e.compute_alpha(4.0) == pytest.approx(math.exp(-2.0))
    with pytest.raises(StaleDataError):
        e.compute_alpha(-1.0)
    assert e.datapoints == 1 and e.time == 0.0

@pytest.mark.parametrize("gap", [0.0, 0.5, 3.0, 1e6])
def test_single_step_stays_between_old_and_new(dynamic_factory, gap):
    e = dynamic_factory()
    e.add_with_time(-4.0, 0.0)
    w = e.compute_alpha(gap)
    assert 0.0 <= w <= 1.0
    v = e.add_with_time(12.0, gap)
    assert -4.0 <= v <= 12.0
