"""
Decimal Codec — десятичное текстовое представление limbs

Вывод: старший limb без дополнения, остальные limbs дополнены нулями
ровно до DIGITS_PER_LIMB цифр. Limbs не являются десятичными цифрами,
это группы по основанию 10^9, поэтому дополнение внутренних limbs обязательно.

Разбор: обратная операция. Цифры группируются с младшего конца по
DIGITS_PER_LIMB, после чего старшие нулевые limbs удаляются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль выводится как "0", других ведущих нулей в выводе нет
2. Разбор принимает только ASCII-цифры 0-9 (DecimalParseError иначе)
3. Результат разбора всегда в каноническом виде
"""

import logging
import re
from dataclasses import dataclass
from typing import Final, Optional, Sequence, TextIO

from src.core.math.errors import DecimalParseError
from src.core.math.limb_arithmetic import DIGITS_PER_LIMB, Limbs, trim

logger = logging.getLogger(__name__)

_DIGITS_RE: Final = re.compile(r"[0-9]+")
_UNDERSCORED_DIGITS_RE: Final = re.compile(r"[0-9]+(?:_[0-9]+)*")


# =============================================================================
# КОНФИГУРАЦИЯ РАЗБОРА
# =============================================================================


@dataclass(frozen=True)
class ParseConfig:
    """Конфигурация разбора десятичного токена.

    - allow_underscores: принимать разделители в стиле Python ("1_000_000"),
      только одиночные подчёркивания между цифрами
    - max_digits: максимальное число цифр во входе (None = без ограничения)
    """
    allow_underscores: bool = False
    max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits <= 0:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_PARSE_CONFIG: Final[ParseConfig] = ParseConfig()


# =============================================================================
# ВЫВОД
# =============================================================================


def format_decimal(limbs: Sequence[int]) -> str:
    """
    Десятичная запись канонической последовательности limbs.

    Examples:
        >>> format_decimal([])
        '0'
        >>> format_decimal([7, 1])
        '1000000007'
    """
    if not limbs:
        return "0"

    parts = [str(limbs[-1])]
    for i in range(len(limbs) - 2, -1, -1):
        parts.append(f"{limbs[i]:0{DIGITS_PER_LIMB}d}")
    return "".join(parts)


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal(text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> Limbs:
    """
    Разбор десятичного токена в limbs.

    Окружающие пробельные символы отбрасываются, токен целиком должен
    состоять из ASCII-цифр.

    Args:
        text: Десятичный токен
        config: Конфигурация разбора

    Returns:
        Каноническая последовательность limbs

    Raises:
        TypeError: Если text не str
        DecimalParseError: Если токен пуст, содержит не-цифры или длиннее max_digits

    Examples:
        >>> parse_decimal("000123")
        [123]
        >>> parse_decimal("1000000007")
        [7, 1]
    """
    if not isinstance(text, str):
        raise TypeError(f"Decimal text must be str, got {type(text).__name__}")

    token = text.strip()
    pattern = _UNDERSCORED_DIGITS_RE if config.allow_underscores else _DIGITS_RE
    if not pattern.fullmatch(token):
        logger.debug("Rejected decimal token %r", text)
        raise DecimalParseError(f"Invalid unsigned decimal literal: {text!r}")

    if config.allow_underscores:
        token = token.replace("_", "")

    if config.max_digits is not None and len(token) > config.max_digits:
        raise DecimalParseError(
            f"Decimal literal has {len(token)} digits, limit is {config.max_digits}"
        )

    limbs: Limbs = []
    for end in range(len(token), 0, -DIGITS_PER_LIMB):
        limbs.append(int(token[max(0, end - DIGITS_PER_LIMB) : end]))
    return trim(limbs)


# =============================================================================
# ПОТОКОВЫЙ ВВОД
# =============================================================================


def read_token(stream: TextIO) -> Optional[str]:
    """
    Чтение одного токена, разделённого пробельными символами.

    Пробелы перед токеном пропускаются, чтение останавливается на первом
    пробельном символе после токена (он потребляется) или в конце потока.

    Returns:
        Токен или None, если до конца потока токена нет
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        return None

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)
