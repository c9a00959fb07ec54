"""
BigUInt Errors — таксономия ошибок беззнаковой арифметики

Два вида ошибок арифметики остаются различимыми:
- RangeError-вид (BigUIntRangeError): отрицательный результат или аргумент
- OverflowError-вид (BigUIntOverflowError): деление на ноль, 0 ** 0

Каждый класс наследует и от встроенного исключения Python, поэтому
вызывающий код может ловить как ValueError / OverflowError / ZeroDivisionError,
так и конкретный класс из этого модуля.
"""


class BigUIntError(ArithmeticError):
    """Базовое исключение для всех ошибок BigUInt."""

    pass


# =============================================================================
# RANGE ERRORS
# =============================================================================


class BigUIntRangeError(BigUIntError, ValueError):
    """Значение вне области определения беззнакового целого."""

    pass


class NegativeValueError(BigUIntRangeError):
    """Попытка построить BigUInt из отрицательного числа."""

    pass


class NegativeDifferenceError(BigUIntRangeError):
    """
    Беззнаковое вычитание с отрицательным результатом.

    Поднимается до любой мутации операнда: a - b при a < b,
    а также декремент нуля.
    """

    pass


class LimbRangeError(BigUIntRangeError):
    """Последовательность limbs не в каноническом виде или limb вне [0, RADIX)."""

    pass


# =============================================================================
# OVERFLOW ERRORS
# =============================================================================


class BigUIntOverflowError(BigUIntError, OverflowError):
    """Вырожденная операция, не имеющая конечного результата."""

    pass


class DivisionByZeroError(BigUIntOverflowError, ZeroDivisionError):
    """Деление на ноль (однолимбовый и многолимбовый путь, включая 0 / 0)."""

    pass


class ZeroToZeroPowerError(BigUIntOverflowError):
    """Возведение нуля в нулевую степень."""

    pass


# =============================================================================
# PARSE ERRORS
# =============================================================================


class DecimalParseError(BigUIntError, ValueError):
    """Десятичный токен содержит что-либо кроме ASCII-цифр 0-9."""

    pass
