"""Error kinds raised by the synchronization services.

The HTTP layer maps each kind to a status code (see app.main); services never
translate them into transport responses themselves.
"""


class CRMError(Exception):
    """Base class; ``message`` is shown to the caller as-is."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CRMError):
    """Required field missing or malformed minimal input."""

    status_code = 400


class NotFoundError(CRMError):
    """A referenced Lead/Opportunity/Contact/Account id does not resolve."""

    status_code = 404


class ConversionError(CRMError):
    """Attempt to convert a lead that has already been converted."""

    status_code = 409


class PropagationError(CRMError):
    """A one-hop write to a linked record found no target.

    Writes committed before the failing hop are left in place.
    """

    status_code = 500

    def __init__(self, entity: str, record_id, source: str):
        super().__init__(
            f"{entity} {record_id} linked from {source} no longer exists"
        )
        self.entity = entity
        self.record_id = record_id
        self.source = source
