from eventhub.domain.normalizers import generate_slug, normalize_date, normalize_time
from eventhub.domain.validators import normalize_event, validate_booking

__all__ = [
    "generate_slug",
    "normalize_date",
    "normalize_time",
    "normalize_event",
    "validate_booking",
]
