import pytest

from superheroes.utils.spring import spring_progress, spring_settle_time


@pytest.mark.parametrize("damping,stiffness", [(1.0, 50.0), (0.75, 1500.0)])
def test_spring_starts_at_rest_and_reaches_target(damping, stiffness):
    assert spring_progress(0.0, damping, stiffness) == 0.0
    assert spring_progress(-1.0, damping, stiffness) == 0.0
    assert spring_progress(10.0, damping, stiffness) == pytest.approx(1.0, abs=1e-6)


def test_critically_damped_spring_never_overshoots():
    samples = [spring_progress(i / 100, 1.0, 50.0) for i in range(300)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))
    assert max(samples) <= 1.0


def test_underdamped_spring_overshoots():
    samples = [spring_progress(i / 1000, 0.75, 1500.0) for i in range(500)]
    assert max(samples) > 1.0


@pytest.mark.parametrize("damping,stiffness", [(1.0, 50.0), (0.75, 1500.0), (0.5, 200.0)])
def test_spring_stays_within_threshold_after_settle_time(damping, stiffness):
    threshold = 0.001
    settle = spring_settle_time(damping, stiffness, threshold)
    assert settle > 0.0
    for step in range(200):
        t = settle + step / 100
        assert abs(1.0 - spring_progress(t, damping, stiffness)) <= threshold * 1.0001


def test_softer_spring_takes_longer_to_settle():
    assert spring_settle_time(1.0, 50.0, 0.001) > spring_settle_time(1.0, 1500.0, 0.001)
