import dataclasses

import pytest

torch = pytest.importorskip("torch")

from hopfield_network import ConfigurationError, NetworkDomain, StateGenerator, StateGeneratorConfig


def test_states_are_domain_valid() -> None:
    binary = StateGenerator(StateGeneratorConfig(dimension=20, domain=NetworkDomain.BINARY, seed=4))
    bipolar = StateGenerator(StateGeneratorConfig(dimension=20, domain=NetworkDomain.BIPOLAR, seed=4))
    for state in binary.create_state_collection(5):
        assert state.shape == (20,)
        assert set(state.tolist()) <= {0.0, 1.0}
    for state in bipolar.create_state_collection(5):
        assert set(state.tolist()) <= {-1.0, 1.0}


def test_continuous_states_stay_within_bounds() -> None:
    config = StateGeneratorConfig(
        dimension=50, domain=NetworkDomain.CONTINUOUS, lower_bound=2.0, upper_bound=3.0, seed=9
    )
    state = StateGenerator(config).next_state()
    assert state.dtype == torch.float64
    assert bool(((state >= 2.0) & (state < 3.0)).all())


def test_same_seed_replays_same_sequence() -> None:
    config = StateGeneratorConfig(dimension=8, domain=NetworkDomain.CONTINUOUS, seed=1234)
    first = StateGenerator(config).create_state_collection(3)
    second = StateGenerator(config).create_state_collection(3)
    for a, b in zip(first, second):
        assert torch.equal(a, b)
    assert not torch.equal(first[0], first[1])


def test_zero_seed_picks_and_reports_a_seed() -> None:
    config = StateGeneratorConfig(dimension=8, domain=NetworkDomain.CONTINUOUS)
    generator = StateGenerator(config)
    assert isinstance(generator.seed, int)
    expected = generator.create_state_collection(2)
    replay = StateGenerator(dataclasses.replace(config, seed=generator.seed))
    for a, b in zip(expected, replay.create_state_collection(2)):
        assert torch.equal(a, b)


def test_create_state_collection_size() -> None:
    generator = StateGenerator(StateGeneratorConfig(dimension=3, domain=NetworkDomain.BINARY, seed=2))
    assert len(generator.create_state_collection(7)) == 7
    assert generator.create_state_collection(0) == []
    assert generator.dimension == 3
    assert generator.domain is NetworkDomain.BINARY
    assert "seed=2" in repr(generator)


@pytest.mark.parametrize(
    "overrides",
    [
        {"lower_bound": 1.0, "upper_bound": 1.0},
        {"lower_bound": 2.0, "upper_bound": -2.0},
        {"lower_bound": -1e308, "upper_bound": 1e308},
        {"lower_bound": float("-inf"), "upper_bound": 0.0},
        {"dimension": 0},
        {"dimension": 2.5},
        {"dimension": True},
        {"domain": NetworkDomain.UNSPECIFIED},
        {"seed": -1},
        {"seed": 2**64},
    ],
)
def test_invalid_config_raises(overrides) -> None:
    params = {"dimension": 4, "domain": NetworkDomain.BIPOLAR}
    params.update(overrides)
    with pytest.raises(ConfigurationError):
        StateGeneratorConfig(**params)


def test_largest_seed_is_accepted() -> None:
    config = StateGeneratorConfig(dimension=4, domain=NetworkDomain.CONTINUOUS, seed=2**64 - 1)
    generator = StateGenerator(config)
    assert generator.seed == 2**64 - 1
    assert bool(torch.isfinite(generator.next_state()).all())
