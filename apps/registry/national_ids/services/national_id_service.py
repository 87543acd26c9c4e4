# apps/registry/national_ids/services/national_id_service.py
from typing import Iterable, List, Optional, Tuple, Type

from rest_framework import serializers

from apps.registry.national_ids.validators.checksum import classify, diagnose

"""
Сервисный слой над чистыми функциями из validators/checksum.py: готовит
результаты проверки для сериализаторов и management-команды.
"""


def check_national_id(candidate: Optional[str]) -> dict:
    """
    Результат проверки одного идентификатора.

    Returns:
        dict: id, identity_type (имя IdentityType), is_valid, reason
        (значение RejectionReason или None)
    """
    identity_type = classify(candidate)
    reason = diagnose(candidate)
    return {
        'id': candidate,
        'identity_type': identity_type.name,
        'is_valid': reason is None,
        'reason': reason.value if reason else None,
    }


def check_national_ids(candidates: Iterable[Optional[str]]) -> List[dict]:
    return [check_national_id(candidate) for candidate in candidates]


def validate_with_serializer(
    serializer_class: Type[serializers.Serializer],
    data: dict,
) -> Tuple[bool, List[str]]:
    """
    Прогоняет данные через сериализатор и возвращает (валидно, сообщения).

    Сообщения собираются плоским списком по всем полям в порядке полей.
    """
    serializer = serializer_class(data=data)
    if serializer.is_valid():
        return True, []

    messages: List[str] = []
    for field_errors in serializer.errors.values():
        messages.extend(str(error) for error in field_errors)
    return False, messages
