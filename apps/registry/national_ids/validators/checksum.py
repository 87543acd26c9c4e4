# apps/registry/national_ids/validators/checksum.py
"""
Проверка национального идентификатора (Saudi National ID / Iqama).

Идентификатор: ровно 10 ASCII-цифр. Первая цифра задаёт тип
(1: гражданин, 2: резидент), последняя является контрольной цифрой по
Luhn-подобному алгоритму от первых девяти.

Модуль не зависит от Django: здесь только чистые функции без состояния,
их используют валидаторы полей, сериализаторы и management-команда.
"""

import re
from enum import Enum, IntEnum
from typing import Optional

NATIONAL_ID_LENGTH = 10

# \d в Python совпадает и с не-ASCII цифрами, поэтому только [0-9]
_NATIONAL_ID_RE = re.compile(r"[0-9]{%d}" % NATIONAL_ID_LENGTH)
_PREFIX_RE = re.compile(r"[0-9]{%d}" % (NATIONAL_ID_LENGTH - 1))


class IdentityType(IntEnum):
    """
    Тип идентификатора.

    Значения CITIZEN/RESIDENT совпадают с первой цифрой номера,
    на этом построено IdentityType(type_digit) в classify().
    """
    INVALID = -1
    CITIZEN = 1
    RESIDENT = 2


class RejectionReason(Enum):
    """Причина отклонения, которую возвращает diagnose()."""
    BLANK = "blank"
    MALFORMED = "malformed"
    UNKNOWN_TYPE = "unknown_type"
    CHECKSUM_MISMATCH = "checksum_mismatch"


VALID_TYPE_DIGITS = frozenset(t.value for t in (IdentityType.CITIZEN, IdentityType.RESIDENT))


def _luhn_check_digit(prefix: str) -> int:
    total = 0
    for index, char in enumerate(prefix):
        digit = ord(char) - ord("0")
        # удваиваем цифры на чётных позициях, начиная с первой
        if index % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def compute_check_digit(prefix: str) -> int:
    """
    Контрольная цифра для первых девяти цифр идентификатора.

    Args:
        prefix: строка из 9 ASCII-цифр

    Raises:
        ValueError: если prefix не 9 ASCII-цифр
    """
    if not isinstance(prefix, str) or not _PREFIX_RE.fullmatch(prefix):
        raise ValueError(f"Ожидается {NATIONAL_ID_LENGTH - 1} цифр, получено: {prefix!r}")
    return _luhn_check_digit(prefix)


def _normalize(candidate: Optional[str]) -> Optional[str]:
    if not isinstance(candidate, str):
        return None
    normalized = candidate.strip()
    return normalized or None


def classify(candidate: Optional[str]) -> IdentityType:
    """
    Определяет тип идентификатора или возвращает IdentityType.INVALID.

    Функция тотальна: для любого входа (включая None) исключений нет.
    Пробелы по краям отбрасываются, пробелы внутри строки недопустимы.
    """
    normalized = _normalize(candidate)
    if normalized is None:
        return IdentityType.INVALID

    if not _NATIONAL_ID_RE.fullmatch(normalized):
        return IdentityType.INVALID

    type_digit = int(normalized[0])
    if type_digit not in VALID_TYPE_DIGITS:
        return IdentityType.INVALID

    expected = _luhn_check_digit(normalized[:-1])
    actual = int(normalized[-1])
    return IdentityType(type_digit) if expected == actual else IdentityType.INVALID


def is_valid(candidate: Optional[str]) -> bool:
    return classify(candidate) is not IdentityType.INVALID


def diagnose(candidate: Optional[str]) -> Optional[RejectionReason]:
    """
    Объясняет, почему classify() вернул INVALID.

    Возвращает None для валидного идентификатора. Нужна только для
    сообщений и логов; classify() её не вызывает.
    """
    if candidate is not None and not isinstance(candidate, str):
        return RejectionReason.MALFORMED
    normalized = _normalize(candidate)
    if normalized is None:
        return RejectionReason.BLANK
    if not _NATIONAL_ID_RE.fullmatch(normalized):
        return RejectionReason.MALFORMED
    if int(normalized[0]) not in VALID_TYPE_DIGITS:
        return RejectionReason.UNKNOWN_TYPE
    if _luhn_check_digit(normalized[:-1]) != int(normalized[-1]):
        return RejectionReason.CHECKSUM_MISMATCH
    return None


def mask_national_id(value) -> str:
    """Маскирует идентификатор для логов: видны только последние 4 символа."""
    text = str(value).strip() if value is not None else ""
    if len(text) <= 4:
        return "*" * len(text)
    return "*" * (len(text) - 4) + text[-4:]
