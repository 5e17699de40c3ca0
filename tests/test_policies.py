# tests/test_policies.py
import pytest
from core.policies import DecayingLearningRate, FixedLearningRate, OptimisticExploration


def test_fixed_learning_rate_ignores_count():
    lr = FixedLearningRate(0.3)
    assert lr(1) == 0.3
    assert lr(1000) == 0.3


@pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5])
def test_fixed_learning_rate_rejects_out_of_range(alpha):
    with pytest.raises(ValueError):
        FixedLearningRate(alpha)


def test_decaying_learning_rate_schedule():
    lr = DecayingLearningRate()
    assert lr(1) == pytest.approx(1.0)
    assert lr(2) == pytest.approx(60.0 / 61.0)
    rates = [lr(n) for n in range(1, 200)]
    assert all(a > b for a, b in zip(rates, rates[1:]))
    assert all(0.0 < r <= 1.0 for r in rates)
    with pytest.raises(ValueError):
        DecayingLearningRate(0.5)


def test_optimistic_exploration():
    f = OptimisticExploration(ne=2, r_plus=10.0)
    assert f(None, 5) == 10.0       # unknown value
    assert f(-3.0, 1) == 10.0       # under-visited
    assert f(-3.0, 2) == -3.0
    assert f(0.0, 2) == 0.0
    with pytest.raises(ValueError):
        OptimisticExploration(ne=-1)


def test_zero_threshold_still_rewards_unknown_values():
    f = OptimisticExploration(ne=0, r_plus=1.0)
    assert f(None, 0) == 1.0
    assert f(0.25, 0) == 0.25
