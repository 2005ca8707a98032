from .errors import (
    error_response,
    DomainError,
    InvalidInput,
    ClientNotFound,
    ServiceNotFound,
    ServiceCrossTenant,
    AssessmentNotFound,
)
from .money import round2, to_decimal
from .normalize import normalize_email, normalize_name, phone_digits
