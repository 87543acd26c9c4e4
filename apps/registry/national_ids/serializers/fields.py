# apps/registry/national_ids/serializers/fields.py
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from rest_framework.fields import empty

from apps.registry.national_ids.validators.field_validators import (
    DEFAULT_FIELD_NAME,
    NationalIdValidator,
)


class NationalIdField(serializers.CharField):
    """
    Поле DRF для национального идентификатора.

    Пустые значения и обязательность обрабатывает сам CharField
    (required, allow_blank, trim_whitespace). Непустое значение проверяется
    NationalIdValidator, в сообщение подставляется label поля.
    """

    def __init__(self, *, citizen_only=False, resident_only=False, message=None, **kwargs):
        super().__init__(**kwargs)
        self.national_id_validator = NationalIdValidator(
            message=message,
            citizen_only=citizen_only,
            resident_only=resident_only,
        )

    def run_validation(self, data=empty):
        value = super().run_validation(data)
        if value in (None, ''):
            return value

        field_name = self.label or self.field_name or DEFAULT_FIELD_NAME
        try:
            self.national_id_validator.validate(value, field_name=field_name)
        except DjangoValidationError as exc:
            # Преобразуем ValidationError Django в формат DRF
            raise serializers.ValidationError(exc.messages, code=exc.code)
        return value
