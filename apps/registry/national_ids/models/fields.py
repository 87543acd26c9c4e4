# apps/registry/national_ids/models/fields.py
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.registry.national_ids.validators.checksum import NATIONAL_ID_LENGTH
from apps.registry.national_ids.validators.field_validators import (
    DEFAULT_FIELD_NAME,
    NationalIdValidator,
)


class NationalIdField(models.CharField):
    """
    CharField для национального идентификатора (10 цифр).

    Проверка идёт в validate(), а не через default_validators, чтобы в
    сообщении было verbose_name поля. Пробелы по краям обрезаются в
    to_python(), поэтому full_clean() сохраняет нормализованное значение.
    """
    description = _("Saudi National ID")

    def __init__(self, *args, citizen_only=False, resident_only=False, message=None, **kwargs):
        kwargs["max_length"] = NATIONAL_ID_LENGTH
        self.citizen_only = citizen_only
        self.resident_only = resident_only
        self.message = message
        super().__init__(*args, **kwargs)
        self.national_id_validator = NationalIdValidator(
            message=message,
            citizen_only=citizen_only,
            resident_only=resident_only,
        )

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        # max_length всегда NATIONAL_ID_LENGTH, задаётся в __init__
        kwargs.pop("max_length", None)
        if self.citizen_only:
            kwargs["citizen_only"] = True
        if self.resident_only:
            kwargs["resident_only"] = True
        if self.message is not None:
            kwargs["message"] = self.message
        return name, path, args, kwargs

    def to_python(self, value):
        value = super().to_python(value)
        if isinstance(value, str):
            return value.strip()
        return value

    def validate(self, value, model_instance):
        super().validate(value, model_instance)
        field_name = self.verbose_name or self.name or DEFAULT_FIELD_NAME
        self.national_id_validator.validate(value, field_name=field_name)
