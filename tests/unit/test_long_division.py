"""
Тесты для Long Division (Knuth, Algorithm D)

Проверяемые инварианты:
1. Деление на ноль → DivisionByZeroError во всех путях
2. Short-circuit для делимого меньшей длины / меньшего старшего limb
3. Нормализация делителя с малым старшим limb
4. Коррекция оценки цифры частного
5. a == b * q + r, 0 <= r < b (частное не переоценивается)
6. Аргументы не мутируются
"""

import random

import pytest

from src.core.math.errors import DivisionByZeroError
from src.core.math.limb_arithmetic import (
    HALF_OF_RADIX,
    RADIX,
    compare_limbs,
    is_canonical,
    limbs_from_int,
    limbs_to_int,
)
from src.core.math.long_division import (
    divmod_limbs,
    estimate_quotient_digit,
    normalization_factor,
)

TOP = RADIX - 1


def _divmod_int(a: int, b: int) -> tuple[int, int]:
    quotient, remainder = divmod_limbs(limbs_from_int(a), limbs_from_int(b))
    assert is_canonical(quotient)
    assert is_canonical(remainder)
    return limbs_to_int(quotient), limbs_to_int(remainder)


# =============================================================================
# НОРМАЛИЗАЦИЯ И ОЦЕНКА
# =============================================================================


class TestNormalizationFactor:
    """Тесты normalization_factor"""

    def test_large_top_limb_not_scaled(self) -> None:
        """Старший limb >= RADIX / 2 → множитель 1"""
        assert normalization_factor(HALF_OF_RADIX) == 1
        assert normalization_factor(TOP) == 1

    def test_small_top_limb_scaled(self) -> None:
        """Старший limb < RADIX / 2 → RADIX // (top + 1)"""
        assert normalization_factor(1) == RADIX // 2
        assert normalization_factor(HALF_OF_RADIX - 1) == 2

    @pytest.mark.parametrize("top", [1, 2, 3, 999, 123456, 249999999, HALF_OF_RADIX - 1])
    def test_normalized_top_reaches_half(self, top: int) -> None:
        """После нормализации старший limb делителя >= RADIX / 2 и < RADIX"""
        scaled = top * normalization_factor(top)
        assert HALF_OF_RADIX <= scaled < RADIX
        # Делитель не удлиняется: (top + 1) * d <= RADIX
        assert (top + 1) * normalization_factor(top) <= RADIX


class TestEstimateQuotientDigit:
    """Тесты estimate_quotient_digit"""

    def test_exact_estimate(self) -> None:
        """Оценка без коррекции"""
        assert estimate_quotient_digit(250000000, 0, 0, HALF_OF_RADIX, 0) == HALF_OF_RADIX

    def test_estimate_capped_below_radix(self) -> None:
        """q_hat = RADIX корректируется до RADIX - 1"""
        assert estimate_quotient_digit(HALF_OF_RADIX, 0, 0, HALF_OF_RADIX, 0) == TOP

    def test_estimate_corrected_by_second_limb(self) -> None:
        """Второй limb делителя уменьшает завышенную оценку"""
        # окно R^2, делитель (R/2) * R + TOP: первая оценка 2, истинная цифра 1
        assert estimate_quotient_digit(1, 0, 0, HALF_OF_RADIX, TOP) == 1

    def test_estimate_never_below_true_digit(self) -> None:
        """Оценка не меньше истинной цифры частного"""
        rng = random.Random(7)
        for _ in range(200):
            v_top = rng.randint(HALF_OF_RADIX, TOP)
            v_next = rng.randint(0, TOP)
            v = v_top * RADIX + v_next
            window = rng.randrange(v * RADIX)
            u_top, rest = divmod(window, RADIX * RADIX)
            u_next, u_third = divmod(rest, RADIX)
            q_hat = estimate_quotient_digit(u_top, u_next, u_third, v_top, v_next)
            true_digit = window // v
            assert true_digit <= q_hat <= true_digit + 1
            assert q_hat < RADIX


# =============================================================================
# DIVISION BY ZERO И SHORT-CIRCUIT
# =============================================================================


class TestDivisionGuards:
    """Тесты проверок до основной работы"""

    @pytest.mark.parametrize("dividend", [[], [1], [0, 1], [1, 2, 3]])
    def test_zero_divisor(self, dividend) -> None:
        """Деление на ноль для любого делимого, включая 0"""
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            divmod_limbs(dividend, [])

    def test_fewer_limbs_short_circuit(self) -> None:
        """Делимое короче делителя → частное 0, остаток = делимое"""
        assert divmod_limbs([5], [0, 1]) == ([], [5])

    def test_smaller_top_limb_short_circuit(self) -> None:
        """Равная длина и меньший старший limb → частное 0"""
        assert divmod_limbs([5, 1], [0, 2]) == ([], [5, 1])

    def test_equal_values(self) -> None:
        """a / a = 1, остаток 0"""
        assert divmod_limbs([5, 7, 9], [5, 7, 9]) == ([1], [])

    def test_same_top_limb_but_smaller(self) -> None:
        """Равный старший limb, но делимое меньше → частное 0"""
        assert divmod_limbs([4, 7], [5, 7]) == ([], [4, 7])

    def test_single_limb_divisor_delegates(self) -> None:
        """Однолимбовый делитель: остаток как последовательность limbs"""
        assert divmod_limbs([0, 0, 1000], [TOP]) == ([1000, 1000], [1000])
        assert divmod_limbs([0, 1], [2]) == ([500000000], [])

    def test_inputs_not_mutated(self) -> None:
        """Делимое и делитель не меняются (в т.ч. при нормализации)"""
        dividend = [1, 2, 3, 4]
        divisor = [5, 1]
        divmod_limbs(dividend, divisor)
        assert dividend == [1, 2, 3, 4]
        assert divisor == [5, 1]


# =============================================================================
# ALGORITHM D: ИЗВЕСТНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestAlgorithmD:
    """Многолимбовое деление на известных значениях"""

    def test_ten_pow_36_by_ten_pow_18_plus_one(self) -> None:
        """10^36 = (10^18 + 1)(10^18 - 1) + 1; делитель требует нормализации"""
        quotient, remainder = divmod_limbs(limbs_from_int(10**36), [1, 0, 1])
        assert quotient == [TOP, TOP]
        assert remainder == [1]

    def test_reference_value_two_limb_divisor(self) -> None:
        """Делитель из двух limbs без нормализации"""
        a = 123456789012345678901234567890
        b = 987654321987654321
        assert _divmod_int(a, b) == divmod(a, b)

    def test_reference_value_normalized_divisor(self) -> None:
        """Делитель со старшим limb 12 (нормализация на RADIX // 13)"""
        a = 123456789012345678901234567890
        b = 12345678901234567890
        assert _divmod_int(a, b) == divmod(a, b)

    @pytest.mark.parametrize(
        "quotient, remainder, divisor",
        [
            (1, 0, RADIX**2 + 1),
            (TOP, TOP, RADIX),
            (RADIX**3 - 1, RADIX**2, RADIX**2 + 1),
            (10**40 + 7, 12345, 10**20 + 3),
            (2**200, 2**63, 2**128 - 1),
            (HALF_OF_RADIX, 0, HALF_OF_RADIX * RADIX + TOP),
            (TOP * RADIX + TOP, RADIX - 2, HALF_OF_RADIX * RADIX),
            (7, 10**27, 10**27 + 1),
            (RADIX**5 - 1, RADIX**4 - 1, RADIX**4),
        ],
    )
    def test_constructed_cases(self, quotient: int, remainder: int, divisor: int) -> None:
        """a = b * q + r восстанавливается точно"""
        assert remainder < divisor
        dividend = divisor * quotient + remainder
        assert _divmod_int(dividend, divisor) == (quotient, remainder)

    def test_add_back_prone_values(self) -> None:
        """Значения, при которых оценка цифры бывает завышена на 1"""
        cases = [
            (RADIX**4 - 1, RADIX**2 + RADIX - 1),
            (RADIX**3 * HALF_OF_RADIX, HALF_OF_RADIX * RADIX + 1),
            (RADIX**4 + RADIX**3 - 1, RADIX**2 - RADIX + 1),
            (TOP * RADIX**3 + TOP * RADIX, HALF_OF_RADIX * RADIX**2 + RADIX - 1),
        ]
        for a, b in cases:
            assert _divmod_int(a, b) == divmod(a, b)


# =============================================================================
# СВОЙСТВА НА СЛУЧАЙНЫХ ЗНАЧЕНИЯХ
# =============================================================================


class TestDivisionProperties:
    """Свойства деления на случайных значениях"""

    def test_matches_builtin_divmod(self) -> None:
        """Частное и остаток совпадают с divmod для int"""
        rng = random.Random(424242)
        for _ in range(500):
            a = rng.randrange(10 ** rng.randint(1, 80))
            b = rng.randrange(1, 10 ** rng.randint(1, 40) + 1)
            assert _divmod_int(a, b) == divmod(a, b)

    def test_quotient_never_overestimates(self) -> None:
        """b * q <= a < b * (q + 1)"""
        rng = random.Random(99)
        for _ in range(300):
            b = rng.randrange(RADIX, RADIX**4)
            a = rng.randrange(RADIX**6)
            quotient, remainder = divmod_limbs(limbs_from_int(a), limbs_from_int(b))
            q = limbs_to_int(quotient)
            assert b * q <= a < b * (q + 1)
            assert compare_limbs(remainder, limbs_from_int(b)) < 0

    def test_structured_divisors(self) -> None:
        """Делители вида RADIX^k ± малое, с малым и большим старшим limb"""
        rng = random.Random(2024)
        divisors = []
        for k in range(1, 5):
            for delta in (-1, 1, 12345):
                divisors.append(RADIX**k + delta)
            divisors.append(HALF_OF_RADIX * RADIX**k - 1)
            divisors.append(HALF_OF_RADIX * RADIX**k)
            divisors.append(TOP * RADIX**k + TOP)
        for b in divisors:
            for _ in range(20):
                a = rng.randrange(b * RADIX**3)
                assert _divmod_int(a, b) == divmod(a, b)
