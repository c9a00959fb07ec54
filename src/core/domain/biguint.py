"""
BigUInt — беззнаковое целое произвольной точности

Значение хранится как последовательность limbs по основанию 10^9
(младший limb первым, пустая последовательность = 0). Вся арифметика
делегируется src.core.math, класс отвечает за семантику значений:
- не-составные операторы возвращают новый BigUInt, операнды не меняются
- составные операторы (+=, -=, *=, //=, /=, %=, **=), increment/decrement
  и power_eq мутируют только получателя
- ошибка в любой операции оставляет все операнды в исходном состоянии

Так как значение мутабельно, BigUInt не хешируется (как list).

Операнды смешанного типа: неотрицательный int приводится к BigUInt,
отрицательный int в арифметике даёт NegativeValueError.
"""

import logging
from typing import Any, Optional, Sequence, TextIO, Union

from src.core.domain.snapshot import BigUIntSnapshot
from src.core.math.decimal_codec import (
    DEFAULT_PARSE_CONFIG,
    ParseConfig,
    format_decimal,
    parse_decimal,
    read_token,
)
from src.core.math.errors import ZeroToZeroPowerError
from src.core.math.limb_arithmetic import (
    Limbs,
    add_limbs,
    add_small,
    compare_limbs,
    limbs_from_int,
    limbs_to_int,
    mul_limbs,
    sub_limbs,
    sub_small,
    validate_limbs,
)
from src.core.math.long_division import divmod_limbs

logger = logging.getLogger(__name__)

Operand = Union["BigUInt", int]


class BigUInt:
    """
    Беззнаковое целое произвольной точности.

    Examples:
        >>> BigUInt("1000000000000000000000") // 999999999
        BigUInt('1000000001000')
        >>> str(BigUInt(2) ** 100)
        '1267650600228229401496703205376'
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union["BigUInt", int, str] = 0) -> None:
        """
        Args:
            value: Другой BigUInt (копируется), неотрицательный int или
                десятичная строка

        Raises:
            NegativeValueError: Если value - отрицательный int
            DecimalParseError: Если строка не является десятичным литералом
            TypeError: Для остальных типов (float, bytes, ...)
        """
        if isinstance(value, BigUInt):
            self._limbs: Limbs = list(value._limbs)
        elif isinstance(value, str):
            self._limbs = parse_decimal(value)
        elif isinstance(value, int):
            self._limbs = limbs_from_int(value)
        else:
            raise TypeError(f"Cannot construct BigUInt from {type(value).__name__}")

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _wrap(cls, limbs: Limbs) -> "BigUInt":
        result = cls.__new__(cls)
        result._limbs = limbs
        return result

    @classmethod
    def from_limbs(cls, limbs: Sequence[int]) -> "BigUInt":
        """
        Построение из явной последовательности limbs (младший первым).

        Raises:
            LimbRangeError: Если последовательность не каноническая
        """
        return cls._wrap(validate_limbs(limbs))

    @classmethod
    def parse(cls, text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> "BigUInt":
        """Разбор десятичного токена с заданной конфигурацией."""
        return cls._wrap(parse_decimal(text, config))

    @classmethod
    def read(cls, stream: TextIO, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> "BigUInt":
        """
        Чтение одного десятичного токена из текстового потока.

        Raises:
            EOFError: Если в потоке не осталось токенов
            DecimalParseError: Если токен не является десятичным литералом
        """
        token = read_token(stream)
        if token is None:
            raise EOFError("No decimal token left in stream")
        return cls.parse(token, config)

    @classmethod
    def from_snapshot(cls, snapshot: BigUIntSnapshot) -> "BigUInt":
        return cls._wrap(list(snapshot.limbs))

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    @property
    def limbs(self) -> tuple[int, ...]:
        """Копия limbs, младший первым."""
        return tuple(self._limbs)

    @property
    def limb_count(self) -> int:
        return len(self._limbs)

    def write(self, stream: TextIO) -> None:
        """Запись десятичного представления в текстовый поток."""
        stream.write(format_decimal(self._limbs))

    def to_snapshot(self) -> BigUIntSnapshot:
        return BigUIntSnapshot(limbs=list(self._limbs), decimal=format_decimal(self._limbs))

    def __str__(self) -> str:
        return format_decimal(self._limbs)

    def __repr__(self) -> str:
        return f"BigUInt('{format_decimal(self._limbs)}')"

    def __format__(self, format_spec: str) -> str:
        """
        Пустая спецификация и тип "s" форматируют десятичную строку,
        остальные ("d", ",", "x", ">10", ...) передаются int.

        Числовые спецификации подчиняются sys.get_int_max_str_digits()
        для десятичного вывода.
        """
        if not format_spec or format_spec.endswith("s"):
            return format(format_decimal(self._limbs), format_spec)
        return format(int(self), format_spec)

    def __int__(self) -> int:
        return limbs_to_int(self._limbs)

    __index__ = __int__

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __copy__(self) -> "BigUInt":
        return BigUInt(self)

    def __deepcopy__(self, memo: dict) -> "BigUInt":
        return BigUInt(self)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def _compare(self, other: Any) -> Optional[int]:
        if isinstance(other, BigUInt):
            return compare_limbs(self._limbs, other._limbs)
        if isinstance(other, int):
            # Отрицательный int меньше любого BigUInt
            if other < 0:
                return 1
            return compare_limbs(self._limbs, limbs_from_int(other))
        return None

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result != 0

    def __lt__(self, other: Operand) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: Operand) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: Operand) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: Operand) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    # =========================================================================
    # ИНКРЕМЕНТ / ДЕКРЕМЕНТ
    # =========================================================================

    def increment(self) -> "BigUInt":
        """Префиксный ++: прибавляет 1 на месте и возвращает self."""
        self._limbs = add_small(self._limbs, 1)
        return self

    def decrement(self) -> "BigUInt":
        """
        Префиксный --: вычитает 1 на месте и возвращает self.

        Raises:
            NegativeDifferenceError: Если значение равно нулю
        """
        self._limbs = sub_small(self._limbs, 1)
        return self

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _operand_limbs(other: Any) -> Optional[Limbs]:
        if isinstance(other, BigUInt):
            return other._limbs
        if isinstance(other, int):
            return limbs_from_int(other)
        return None

    def __add__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(add_limbs(self._limbs, limbs))

    __radd__ = __add__

    def __iadd__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        self._limbs = add_limbs(self._limbs, limbs)
        return self

    def __sub__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(sub_limbs(self._limbs, limbs))

    def __rsub__(self, other: int) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(sub_limbs(limbs, self._limbs))

    def __isub__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        self._limbs = sub_limbs(self._limbs, limbs)
        return self

    def __mul__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(mul_limbs(self._limbs, limbs))

    __rmul__ = __mul__

    def __imul__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        self._limbs = mul_limbs(self._limbs, limbs)
        return self

    # =========================================================================
    # ДЕЛЕНИЕ
    # =========================================================================
    # "/" и "//" совпадают: частное усекается к нулю, дробной части нет.

    def __divmod__(self, other: Operand) -> tuple["BigUInt", "BigUInt"]:
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        quotient, remainder = divmod_limbs(self._limbs, limbs)
        return BigUInt._wrap(quotient), BigUInt._wrap(remainder)

    def __rdivmod__(self, other: int) -> tuple["BigUInt", "BigUInt"]:
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        quotient, remainder = divmod_limbs(limbs, self._limbs)
        return BigUInt._wrap(quotient), BigUInt._wrap(remainder)

    def __floordiv__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(divmod_limbs(self._limbs, limbs)[0])

    def __rfloordiv__(self, other: int) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(divmod_limbs(limbs, self._limbs)[0])

    def __ifloordiv__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        self._limbs = divmod_limbs(self._limbs, limbs)[0]
        return self

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__
    __itruediv__ = __ifloordiv__

    def __mod__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(divmod_limbs(self._limbs, limbs)[1])

    def __rmod__(self, other: int) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(divmod_limbs(limbs, self._limbs)[1])

    def __imod__(self, other: Operand) -> "BigUInt":
        limbs = self._operand_limbs(other)
        if limbs is None:
            return NotImplemented
        self._limbs = divmod_limbs(self._limbs, limbs)[1]
        return self

    # =========================================================================
    # СТЕПЕНЬ
    # =========================================================================

    def __pow__(self, exponent: Operand, modulo: None = None) -> "BigUInt":
        if modulo is not None:
            raise TypeError("BigUInt does not support three-argument pow()")
        if not isinstance(exponent, (BigUInt, int)):
            return NotImplemented
        return power(self, exponent)

    def __rpow__(self, base: int) -> "BigUInt":
        if not isinstance(base, int):
            return NotImplemented
        return power_eq(BigUInt(base), self)

    def __ipow__(self, exponent: Operand) -> "BigUInt":
        if not isinstance(exponent, (BigUInt, int)):
            return NotImplemented
        return power_eq(self, exponent)


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def power_eq(base: BigUInt, exponent: Operand) -> BigUInt:
    """
    Возведение в степень на месте (square-and-multiply).

    Граничные случаи:
    - 0 ** 0 → ZeroToZeroPowerError
    - 0 ** n (n > 0) → 0
    - x ** 0 → 1
    - 1 ** n → 1
    - x ** 1 → x

    Иначе, пока показатель больше 1: если младший limb показателя нечётный,
    аккумулятор умножается на base и показатель уменьшается на 1; иначе base
    возводится в квадрат, а показатель делится на 2. В конце аккумулятор
    вливается в base.

    Args:
        base: Основание (мутируется)
        exponent: Показатель, BigUInt или неотрицательный int

    Returns:
        base

    Raises:
        ZeroToZeroPowerError: Если base == 0 и exponent == 0
        NegativeValueError: Если exponent - отрицательный int
    """
    residue = BigUInt(exponent)

    if not base:
        if not residue:
            raise ZeroToZeroPowerError("Zero raised to the zero power is undefined")
        return base
    if base == 1:
        return base
    if not residue:
        base._limbs = [1]
        return base
    if residue == 1:
        return base

    logger.debug("Square-and-multiply: exponent has %d limbs", residue.limb_count)

    accumulator = BigUInt(1)
    while residue > 1:
        if residue._limbs[0] & 1:
            accumulator *= base
            residue.decrement()
        else:
            base *= base
            residue //= 2
    base *= accumulator
    return base


def power(base: Operand, exponent: Operand) -> BigUInt:
    """Возведение в степень, base не меняется."""
    return power_eq(BigUInt(base), exponent)
