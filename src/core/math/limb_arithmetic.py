"""
Limb Arithmetic — примитивы над последовательностями limbs

Беззнаковое целое хранится как list[int] limbs по основанию RADIX = 10^9,
младший limb первым. Пустой список обозначает ноль.

Модуль содержит школьные алгоритмы:
- сравнение (сначала по длине, затем со старшего limb)
- сложение / вычитание с переносом и заёмом
- умножение свёрткой
- деление на один limb с остатком

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Канонический вид: старший limb непустого списка не равен нулю
2. Каждый limb лежит в [0, RADIX)
3. Функции не мутируют аргументы, результат всегда новый список
4. Промежуточные значения не превышают RADIX * RADIX + RADIX
"""

from typing import Final, Sequence

from src.core.math.errors import (
    DivisionByZeroError,
    LimbRangeError,
    NegativeDifferenceError,
    NegativeValueError,
)

# =============================================================================
# RADIX-ПАРАМЕТРЫ
# =============================================================================

TEN: Final[int] = 10

# Количество десятичных цифр в одном limb
DIGITS_PER_LIMB: Final[int] = 9

# Основание представления: 10^9
RADIX: Final[int] = TEN**DIGITS_PER_LIMB

# Порог нормализации делителя в алгоритме D
HALF_OF_RADIX: Final[int] = RADIX // 2

Limbs = list[int]


# =============================================================================
# КАНОНИЧЕСКИЙ ВИД
# =============================================================================


def trim(limbs: Limbs) -> Limbs:
    """
    Удаление старших нулевых limbs (на месте).

    Returns:
        Тот же список, приведённый к каноническому виду
    """
    while limbs and not limbs[-1]:
        limbs.pop()
    return limbs


def is_canonical(limbs: Sequence[int]) -> bool:
    """Проверка канонического вида и диапазона каждого limb."""
    if limbs and not limbs[-1]:
        return False
    return all(isinstance(limb, int) and 0 <= limb < RADIX for limb in limbs)


def validate_limbs(limbs: Sequence[int]) -> Limbs:
    """
    Валидация внешней последовательности limbs.

    Args:
        limbs: Последовательность limbs, младший первым

    Returns:
        Копия последовательности как list

    Raises:
        LimbRangeError: Если limb вне [0, RADIX) или старший limb равен нулю
    """
    result = list(limbs)
    for position, limb in enumerate(result):
        if isinstance(limb, bool) or not isinstance(limb, int):
            raise LimbRangeError(f"Limb at position {position} must be int, got {limb!r}")
        if not 0 <= limb < RADIX:
            raise LimbRangeError(
                f"Limb at position {position} must be in [0, {RADIX}), got {limb}"
            )
    if result and not result[-1]:
        raise LimbRangeError("Most significant limb must be non-zero (canonical form)")
    return result


# =============================================================================
# КОНВЕРСИЯ С НАТИВНЫМ int
# =============================================================================


def limbs_from_int(value: int) -> Limbs:
    """
    Разложение неотрицательного int на limbs.

    Args:
        value: Неотрицательное целое

    Returns:
        Каноническая последовательность limbs

    Raises:
        NegativeValueError: Если value < 0

    Examples:
        >>> limbs_from_int(0)
        []
        >>> limbs_from_int(1_000_000_001)
        [1, 1]
    """
    if value < 0:
        raise NegativeValueError(f"Cannot represent negative value {value} as unsigned")

    limbs: Limbs = []
    while value:
        value, limb = divmod(value, RADIX)
        limbs.append(limb)
    return limbs


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Схема Горнера со старшего limb."""
    value = 0
    for limb in reversed(limbs):
        value = value * RADIX + limb
    return value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_limbs(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение двух канонических последовательностей.

    Меньшая длина строго меньше (канонический вид запрещает старшие нули).
    При равной длине решает первая различающаяся пара со старшего конца.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_small(a: Sequence[int], value: int) -> Limbs:
    """
    Сложение с одним limb, value в [0, RADIX).

    Перенос распространяется только пока он не обнулится.
    """
    result = list(a)
    carry = value
    i = 0
    while carry:
        if i == len(result):
            result.append(carry)
            break
        total = result[i] + carry
        if total >= RADIX:
            result[i] = total - RADIX
            carry = 1
        else:
            result[i] = total
            carry = 0
        i += 1
    return result


def add_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Сложение двух последовательностей с переносом.

    Перенос не превышает 1. Когда короткий операнд и перенос исчерпаны,
    оставшиеся limbs длинного операнда копируются без изменений.
    Итоговый перенос добавляет новый старший limb, равный 1.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return list(a)
    if len(b) == 1:
        return add_small(a, b[0])

    result: Limbs = []
    carry = 0
    for i, limb in enumerate(b):
        total = a[i] + limb + carry
        if total >= RADIX:
            total -= RADIX
            carry = 1
        else:
            carry = 0
        result.append(total)

    for i in range(len(b), len(a)):
        if not carry:
            result.extend(a[i:])
            break
        total = a[i] + carry
        if total >= RADIX:
            result.append(total - RADIX)
        else:
            result.append(total)
            carry = 0

    if carry:
        result.append(1)
    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub_small(a: Sequence[int], value: int) -> Limbs:
    """
    Вычитание одного limb, value в [0, RADIX).

    Raises:
        NegativeDifferenceError: Если a < value
    """
    if not value:
        return list(a)
    if not a or (len(a) == 1 and a[0] < value):
        raise NegativeDifferenceError("Unsigned subtraction yielding a negative value")

    result = list(a)
    borrow = value
    i = 0
    while borrow:
        diff = result[i] - borrow
        if diff < 0:
            result[i] = diff + RADIX
            borrow = 1
        else:
            result[i] = diff
            borrow = 0
        i += 1
    return trim(result)


def sub_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Вычитание a - b с заёмом.

    Проверка a >= b выполняется до прохода по limbs. Незакрытый заём
    после прохода также означает отрицательный результат.

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        Разность в каноническом виде (нули после сокращения удалены)

    Raises:
        NegativeDifferenceError: Если a < b
    """
    if not b:
        return list(a)
    if compare_limbs(a, b) < 0:
        raise NegativeDifferenceError("Unsigned subtraction yielding a negative value")
    if len(b) == 1:
        return sub_small(a, b[0])

    result = list(a)
    borrow = 0
    for i in range(len(result)):
        if i >= len(b) and not borrow:
            break
        diff = result[i] - (b[i] if i < len(b) else 0) - borrow
        if diff < 0:
            result[i] = diff + RADIX
            borrow = 1
        else:
            result[i] = diff
            borrow = 0

    if borrow:
        raise NegativeDifferenceError("Unsigned subtraction yielding a negative value")
    return trim(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_small(a: Sequence[int], factor: int) -> Limbs:
    """Умножение на один limb, factor в [0, RADIX)."""
    if not a or not factor:
        return []

    result: Limbs = []
    carry = 0
    for limb in a:
        carry, low = divmod(limb * factor + carry, RADIX)
        result.append(low)
    if carry:
        result.append(carry)
    return result


def mul_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Школьное умножение свёрткой.

    Для каждого ненулевого b[j] проходит все a[i], накапливая
    a[i] * b[j] + carry в result[i + j]. Остаток переноса сбрасывается
    в result[j + len(a)]. Длина результата не превышает len(a) + len(b).

    Examples:
        >>> mul_limbs([0, 1], [0, 1])
        [0, 0, 1]
    """
    if not a or not b:
        return []
    if len(b) == 1:
        return mul_small(a, b[0])
    if len(a) == 1:
        return mul_small(b, a[0])

    result = [0] * (len(a) + len(b))
    for j, b_limb in enumerate(b):
        if not b_limb:
            continue
        carry = 0
        for i, a_limb in enumerate(a):
            carry, result[i + j] = divmod(result[i + j] + a_limb * b_limb + carry, RADIX)
        result[j + len(a)] += carry
    return trim(result)


# =============================================================================
# ДЕЛЕНИЕ НА ОДИН LIMB
# =============================================================================


def divmod_small(a: Sequence[int], divisor: int) -> tuple[Limbs, int]:
    """
    Деление на один limb с остатком.

    Проход со старшего limb: remainder = remainder * RADIX + limb,
    затем частное и остаток от деления на divisor.

    Args:
        a: Делимое
        divisor: Делитель в [0, RADIX)

    Returns:
        (quotient, remainder)

    Raises:
        DivisionByZeroError: Если divisor == 0
    """
    if not divisor:
        raise DivisionByZeroError("Division by zero")
    if not a or divisor == 1:
        return list(a), 0
    if len(a) == 1:
        quotient, remainder = divmod(a[0], divisor)
        return ([quotient] if quotient else []), remainder

    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * RADIX + a[i], divisor)
    return trim(quotient), remainder
