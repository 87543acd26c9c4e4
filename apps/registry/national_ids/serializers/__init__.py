from .fields import NationalIdField
from .national_id_serializers import (
    CitizenSerializer,
    NationalIdCheckSerializer,
    PersonSerializer,
    ResidentSerializer,
)

__all__ = [
    "NationalIdField",
    "PersonSerializer",
    "CitizenSerializer",
    "ResidentSerializer",
    "NationalIdCheckSerializer",
]
