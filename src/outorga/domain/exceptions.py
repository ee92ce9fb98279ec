class OutorgaError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(OutorgaError):
    """Requested resource does not exist."""


class ConflictError(OutorgaError):
    """Operation conflicts with existing state (e.g. reading already finalized)."""


class ValidationError(OutorgaError):
    """One or more fields failed validation; ``errors`` maps field name to message."""

    def __init__(self, errors: dict[str, str], message: str = "Validation failed") -> None:
        self.errors = dict(errors)
        super().__init__(message)


class DuplicateAutomatedRecordError(ValidationError):
    """An automated ND/NE record already exists for the contract and period."""

    def __init__(self, contract_id: int, period: str) -> None:
        super().__init__(
            {"period": "an automated record already exists for this period, use edit"},
            message=(
                f"Automated ND/NE record already exists for contract {contract_id} "
                f"and period {period}; edit it instead"
            ),
        )
        self.contract_id = contract_id
        self.period = period


class StorageError(OutorgaError):
    """The row store failed (connectivity, constraint). Carries the driver message."""
