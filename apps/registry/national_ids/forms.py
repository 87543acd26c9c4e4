# apps/registry/national_ids/forms.py
from django import forms

from apps.registry.national_ids.validators.field_validators import (
    DEFAULT_FIELD_NAME,
    NationalIdValidator,
)


class NationalIdFormField(forms.CharField):
    """Поле формы для национального идентификатора, в ошибке указывается label поля."""

    def __init__(self, *, citizen_only=False, resident_only=False, message=None, **kwargs):
        kwargs.setdefault("strip", True)
        super().__init__(**kwargs)
        self.national_id_validator = NationalIdValidator(
            message=message,
            citizen_only=citizen_only,
            resident_only=resident_only,
        )

    def validate(self, value):
        super().validate(value)
        self.national_id_validator.validate(value, field_name=self.label or DEFAULT_FIELD_NAME)
