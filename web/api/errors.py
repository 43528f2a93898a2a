"""API errors and validation helpers."""

from app.services.metrics.filters import DATE_RANGES


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_date_range(date_range: str) -> None:
    """Validate date_range is one of the supported windows."""
    if date_range not in DATE_RANGES:
        raise ValidationError(f"Invalid range: {date_range}. Must be one of {', '.join(DATE_RANGES)}")


def validate_sheet_title(sheet_title: str) -> None:
    if not sheet_title.strip():
        raise ValidationError("Sheet title must not be empty")
