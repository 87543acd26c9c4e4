# apps/registry/national_ids/serializers/national_id_serializers.py
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from apps.registry.national_ids.serializers.fields import NationalIdField


class PersonSerializer(serializers.Serializer):
    """Идентификатор обязателен, тип любой."""
    national_id = NationalIdField(message=_("Please provide a valid Saudi National ID"))


class CitizenSerializer(serializers.Serializer):
    """Только гражданский идентификатор (начинается с 1)."""
    citizen_id = NationalIdField(citizen_only=True, required=False, allow_blank=True, allow_null=True)


class ResidentSerializer(serializers.Serializer):
    """Только идентификатор резидента (начинается с 2)."""
    resident_id = NationalIdField(resident_only=True, required=False, allow_blank=True, allow_null=True)


class NationalIdCheckSerializer(serializers.Serializer):
    """
    Только для чтения: представление результата
    services.national_id_service.check_national_id().
    """
    id = serializers.CharField(read_only=True, allow_null=True)
    identity_type = serializers.CharField(read_only=True)
    is_valid = serializers.BooleanField(read_only=True)
    reason = serializers.CharField(read_only=True, allow_null=True)
