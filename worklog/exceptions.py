"""Error taxonomy for the work ledger."""


class LedgerError(Exception):
    """Base class for all ledger errors."""


class ValidationError(LedgerError, ValueError):
    """Entry rejected because its start/end are missing or inverted."""


class AlreadyActiveError(LedgerError, ValueError):
    """A session was started while another one is still running."""


class NoActiveSessionError(LedgerError, ValueError):
    """A session was ended while none is running."""


class InvalidBackupError(LedgerError, ValueError):
    """Backup document does not have the expected shape."""


class PersistFailure(LedgerError, RuntimeError):
    """Reading or writing durable state failed."""
