"""Tests for the division-free addition variants."""

import pytest

from prime_field.fast_add import add_fast, add_winterfell
from prime_field.constants import P64
from prime_field.field import add
from prime_field.sampling import operand_pairs

ADD_VARIANTS = [add, add_fast, add_winterfell]

BOUNDARY_PAIRS = [
    (0, 0),
    (0, 1),
    (1, 0),
    (0, P64 - 1),
    (P64 - 1, 0),
    (P64 - 1, 1),
    (1, P64 - 1),
    (P64 - 1, 2),
    (P64 - 1, P64 - 1),
    (2**32, P64 - 2**32),
    (2**63, 2**63 - 2**32 + 1),
    (2**63, 2**63),
    ((P64 + 1) // 2, (P64 - 1) // 2),
]


class TestAddEquivalence:
    """All addition variants agree with the reference."""

    def test_random_operands(self, operands: list) -> None:
        for x, y in operand_pairs(operands):
            expected = add(x, y)
            assert add_fast(x, y) == expected
            assert add_winterfell(x, y) == expected

    @pytest.mark.parametrize("x,y", BOUNDARY_PAIRS)
    def test_boundary_operands(self, x: int, y: int) -> None:
        expected = (x + y) % P64
        for variant in ADD_VARIANTS:
            assert variant(x, y) == expected, variant.__name__


class TestAddBoundaries:
    """Edge cases named by each variant's contract."""

    @pytest.mark.parametrize("variant", ADD_VARIANTS)
    def test_wraps_to_zero(self, variant) -> None:
        assert variant(P64 - 1, 1) == 0

    @pytest.mark.parametrize("variant", ADD_VARIANTS)
    def test_zero_plus_zero(self, variant) -> None:
        assert variant(0, 0) == 0

    @pytest.mark.parametrize("variant", ADD_VARIANTS)
    def test_p_minus_one_plus_two(self, variant) -> None:
        assert variant(P64 - 1, 2) == 1

    def test_fast_sum_of_exactly_p_is_zero(self) -> None:
        """A sum equal to p reduces to 0, never to p."""
        for x in [1, 2**32, 2**63, P64 - 1]:
            assert add_fast(x, P64 - x) == 0

    def test_winterfell_zero_operand(self) -> None:
        """y = 0 makes p - y = p, which always borrows."""
        for x in [0, 1, P64 - 1]:
            assert add_winterfell(x, 0) == x

    @pytest.mark.parametrize("variant", ADD_VARIANTS)
    def test_results_canonical(self, variant, operands: list) -> None:
        for x, y in operand_pairs(operands):
            assert 0 <= variant(x, y) < P64
