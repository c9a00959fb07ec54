"""
Long Division — многолимбовое деление (Knuth, Algorithm D)

Деление делимого u (m + n limbs) на делитель v (n >= 2 limbs) по основанию
RADIX с частным и остатком.

Шаги:
1. Short-circuit: частное равно нулю, если у делимого меньше limbs или
   при равной длине его старший limb меньше
2. Нормализация: при v[n-1] < RADIX / 2 оба операнда умножаются на
   d = RADIX // (v[n-1] + 1), после чего v[n-1] >= RADIX / 2
3. Оценка цифры частного по трём старшим limbs окна остатка и двум
   старшим limbs делителя
4. Коррекция оценки (не более чем на 2 вниз)
5. Умножение и вычитание, при необходимости ещё одна коррекция
6. Сборка частного, денормализация остатка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка делителя на ноль выполняется до любой работы
2. Окно остатка никогда не становится отрицательным
3. Частное усекается к нулю: v * q <= u < v * (q + 1)
"""

import logging

from src.core.math.errors import DivisionByZeroError
from src.core.math.limb_arithmetic import (
    HALF_OF_RADIX,
    RADIX,
    Limbs,
    compare_limbs,
    divmod_small,
    mul_small,
    sub_limbs,
    trim,
)

logger = logging.getLogger(__name__)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalization_factor(divisor_top: int) -> int:
    """
    Множитель нормализации для старшего limb делителя.

    Returns:
        1 если divisor_top >= HALF_OF_RADIX, иначе RADIX // (divisor_top + 1)

    Examples:
        >>> normalization_factor(987654321)
        1
        >>> normalization_factor(1)
        500000000
    """
    if divisor_top >= HALF_OF_RADIX:
        return 1
    return RADIX // (divisor_top + 1)


# =============================================================================
# ОЦЕНКА ЦИФРЫ ЧАСТНОГО
# =============================================================================


def estimate_quotient_digit(u_top: int, u_next: int, u_third: int, v_top: int, v_next: int) -> int:
    """
    Оценка очередной цифры частного с коррекцией.

    q_hat, r_hat = divmod(u_top * RADIX + u_next, v_top), затем пока
    r_hat < RADIX и (q_hat >= RADIX или q_hat * v_next > RADIX * r_hat + u_third):
    q_hat уменьшается на 1, r_hat увеличивается на v_top.

    При нормализованном делителе результат превышает истинную цифру
    не более чем на 1.

    Args:
        u_top: Старший limb окна остатка
        u_next: Следующий limb окна
        u_third: Третий limb окна
        v_top: Старший limb нормализованного делителя
        v_next: Второй limb нормализованного делителя

    Returns:
        q_hat в [0, RADIX)
    """
    q_hat, r_hat = divmod(u_top * RADIX + u_next, v_top)
    while r_hat < RADIX and (q_hat >= RADIX or q_hat * v_next > RADIX * r_hat + u_third):
        q_hat -= 1
        r_hat += v_top
    return q_hat


# =============================================================================
# ALGORITHM D
# =============================================================================


def divmod_limbs(dividend: Limbs, divisor: Limbs) -> tuple[Limbs, Limbs]:
    """
    Деление двух канонических последовательностей limbs с остатком.

    Однолимбовый делитель обрабатывается через divmod_small, многолимбовый
    через Algorithm D. Аргументы не мутируются.

    Args:
        dividend: Делимое u
        divisor: Делитель v

    Returns:
        (quotient, remainder) в каноническом виде

    Raises:
        DivisionByZeroError: Если divisor пуст (ноль)
    """
    if not divisor:
        raise DivisionByZeroError("Division by zero")

    if len(dividend) < len(divisor) or (
        len(dividend) == len(divisor) and dividend[-1] < divisor[-1]
    ):
        return [], list(dividend)

    if len(divisor) == 1:
        quotient, remainder = divmod_small(dividend, divisor[0])
        return quotient, ([remainder] if remainder else [])

    n = len(divisor)
    m = len(dividend) - n

    scale = normalization_factor(divisor[-1])
    if scale > 1:
        u = mul_small(dividend, scale)
        v = mul_small(divisor, scale)
    else:
        u = list(dividend)
        v = list(divisor)
    if len(u) == len(dividend):
        u.append(0)

    logger.debug(
        "Algorithm D: dividend %d limbs, divisor %d limbs, normalization factor %d",
        len(dividend),
        n,
        scale,
    )

    v_top = v[-1]
    v_next = v[-2]
    quotient = [0] * (m + 1)

    for j in range(m, -1, -1):
        q_hat = estimate_quotient_digit(u[j + n], u[j + n - 1], u[j + n - 2], v_top, v_next)

        window = trim(u[j : j + n + 1])
        trial = mul_small(v, q_hat)
        if compare_limbs(window, trial) < 0:
            q_hat -= 1
            trial = sub_limbs(trial, v)

        rest = sub_limbs(window, trial)
        u[j : j + n + 1] = rest + [0] * (n + 1 - len(rest))
        quotient[j] = q_hat

    remainder = trim(u[:n])
    if scale > 1:
        remainder, _ = divmod_small(remainder, scale)

    return trim(quotient), remainder
