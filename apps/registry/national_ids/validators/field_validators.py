# apps/registry/national_ids/validators/field_validators.py
import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _

from apps.registry.national_ids.validators.checksum import (
    IdentityType,
    classify,
    diagnose,
    mask_national_id,
)

"""
Валидаторы полей для национального идентификатора. Одна логика на модели,
формы и сериализаторы; сам алгоритм находится в checksum.py.
Пустое значение валидно: обязательность задаётся через blank/required поля.
"""

logger = logging.getLogger(__name__)

DEFAULT_FIELD_NAME = "field"


@deconstructible
class NationalIdValidator:
    """
    Проверка идентификатора с опциональным ограничением по типу.

    citizen_only и resident_only независимы. Если включены оба, любое
    непустое значение будет отклонено: номер не может быть одновременно
    гражданским и резидентским.
    """
    message = _("The %(field)s field is not a valid Saudi National ID.")
    citizen_message = _("The %(field)s field must be a Saudi Citizen ID (starting with 1).")
    resident_message = _("The %(field)s field must be a Resident ID (starting with 2).")
    code = "invalid_national_id"
    citizen_code = "citizen_id_required"
    resident_code = "resident_id_required"

    def __init__(self, message=None, citizen_only=False, resident_only=False, field_name=DEFAULT_FIELD_NAME):
        if message is not None:
            self.message = message
        self.citizen_only = citizen_only
        self.resident_only = resident_only
        self.field_name = field_name
        if citizen_only and resident_only:
            logger.warning(
                "NationalIdValidator для '%s' настроен с citizen_only и resident_only: "
                "любое непустое значение будет отклонено",
                field_name,
            )

    def __call__(self, value) -> None:
        self.validate(value, self.field_name)

    def validate(self, value, field_name=None) -> Optional[IdentityType]:
        """
        Проверяет значение и возвращает его тип.

        Для пустого значения classify() не вызывается, возвращается None.

        Raises:
            ValidationError: с code и params={"field", "value"}
        """
        if value is None or str(value).strip() == "":
            return None

        params = {"field": field_name or self.field_name or DEFAULT_FIELD_NAME, "value": value}
        identity_type = classify(str(value))

        if identity_type is IdentityType.INVALID:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Отклонён идентификатор %s: %s",
                    mask_national_id(value),
                    diagnose(str(value)).value,
                )
            raise ValidationError(self.message, code=self.code, params=params)

        if self.citizen_only and identity_type is not IdentityType.CITIZEN:
            raise ValidationError(self.citizen_message, code=self.citizen_code, params=params)

        if self.resident_only and identity_type is not IdentityType.RESIDENT:
            raise ValidationError(self.resident_message, code=self.resident_code, params=params)

        return identity_type

    def __eq__(self, other):
        return (
            isinstance(other, NationalIdValidator)
            and self.message == other.message
            and self.citizen_only == other.citizen_only
            and self.resident_only == other.resident_only
            and self.field_name == other.field_name
        )

    def __hash__(self):
        return hash((str(self.message), self.citizen_only, self.resident_only, self.field_name))


validate_national_id = NationalIdValidator()
validate_citizen_id = NationalIdValidator(citizen_only=True)
validate_resident_id = NationalIdValidator(resident_only=True)
