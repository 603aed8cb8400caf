"""Domain exceptions."""


class RecordValidationError(ValueError):
    """Raised when entry data breaks a record invariant.

    Attributes:
        errors: Mapping of field name to a user-facing message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {msg}" for field, msg in errors.items())
        super().__init__(f"Invalid record: {details}")


__all__ = ["RecordValidationError"]
