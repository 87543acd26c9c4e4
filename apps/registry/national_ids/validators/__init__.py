from .checksum import (
    IdentityType,
    RejectionReason,
    classify,
    compute_check_digit,
    diagnose,
    is_valid,
)
from .field_validators import (
    NationalIdValidator,
    validate_citizen_id,
    validate_national_id,
    validate_resident_id,
)

__all__ = [
    "IdentityType",
    "RejectionReason",
    "classify",
    "compute_check_digit",
    "diagnose",
    "is_valid",
    "NationalIdValidator",
    "validate_citizen_id",
    "validate_national_id",
    "validate_resident_id",
]
