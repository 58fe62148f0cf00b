import pytest

torch = pytest.importorskip("torch")

from hopfield_network.core import all_unit_energies, count_unstable_units, state_energy, unit_energy


def _random_problem(dimension: int, seed: int):
    generator = torch.Generator().manual_seed(seed)
    matrix = torch.randn(dimension, dimension, generator=generator, dtype=torch.float64)
    state = torch.randn(dimension, generator=generator, dtype=torch.float64)
    return matrix, state


def test_zero_matrix_has_zero_energy() -> None:
    matrix = torch.zeros(5, 5, dtype=torch.float64)
    for values in ([1.0, -1.0, 1.0, 1.0, -1.0], [0.0, 1.0, 0.0, 1.0, 1.0], [0.3, -2.0, 5.0, 0.1, 0.0]):
        state = torch.tensor(values, dtype=torch.float64)
        assert state_energy(matrix, state) == 0.0
        assert torch.equal(all_unit_energies(matrix, state), torch.zeros(5, dtype=torch.float64))


def test_state_energy_matches_double_sum_without_half_factor() -> None:
    matrix, state = _random_problem(6, seed=1)
    expected = 0.0
    for i in range(6):
        for j in range(6):
            expected -= float(matrix[i, j] * state[i] * state[j])
    assert state_energy(matrix, state) == pytest.approx(expected)


def test_all_unit_energies_match_unit_energy() -> None:
    for seed in range(4):
        matrix, state = _random_problem(7, seed=seed)
        energies = all_unit_energies(matrix, state)
        for index in range(7):
            assert float(energies[index]) == pytest.approx(unit_energy(matrix, state, index))
        assert float(energies.sum()) == pytest.approx(state_energy(matrix, state))


def test_count_unstable_units_uses_strictly_positive_energy() -> None:
    matrix = torch.tensor([[0.0, -1.0], [-1.0, 0.0]], dtype=torch.float64)
    assert count_unstable_units(matrix, torch.tensor([1.0, 1.0], dtype=torch.float64)) == 2
    assert count_unstable_units(matrix, torch.tensor([1.0, -1.0], dtype=torch.float64)) == 0
    # Zero energy counts as stable.
    assert count_unstable_units(matrix, torch.tensor([0.0, 0.0], dtype=torch.float64)) == 0
