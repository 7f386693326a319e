# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES — Machine-readable constants carried on operation results
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    DUPLICATE_ENTRY        = "DUPLICATE_ENTRY"
    VEHICLE_NOT_AVAILABLE  = "VEHICLE_NOT_AVAILABLE"
    VEHICLE_NOT_RENTED     = "VEHICLE_NOT_RENTED"
    PERSISTENCE_FAILURE    = "PERSISTENCE_FAILURE"
    MALFORMED_RECORD       = "MALFORMED_RECORD"
    UNKNOWN_REFERENCE      = "UNKNOWN_REFERENCE"
    INVALID_AMOUNT         = "INVALID_AMOUNT"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(Exception):
    """
    Base exception for all application-level errors.
    Carries a machine-readable error_code so the directory can turn it
    into an OperationResult without inspecting the message.
    """
    def __init__(self, message: str, error_code: str, field: str | None = None):
        super().__init__(message)
        self.message    = message
        self.error_code = error_code
        self.field      = field


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class DuplicateEntryException(AppException):
    def __init__(self, message: str = "Record already exists", field: str | None = None):
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, field=field)


class VehicleNotAvailableException(AppException):
    def __init__(self, plate: str):
        super().__init__(
            f"Vehicle {plate} is not available for renting",
            ErrorCode.VEHICLE_NOT_AVAILABLE,
            field="status",
        )


class VehicleNotRentedException(AppException):
    def __init__(self, plate: str):
        super().__init__(
            f"Vehicle {plate} is not rented",
            ErrorCode.VEHICLE_NOT_RENTED,
            field="status",
        )


class PersistenceException(AppException):
    def __init__(self, message: str = "Could not access data file"):
        super().__init__(message, ErrorCode.PERSISTENCE_FAILURE)


class MalformedRecordException(AppException):
    def __init__(self, message: str = "Malformed line", error_code: str = ErrorCode.MALFORMED_RECORD):
        super().__init__(message, error_code)


class UnknownReferenceException(AppException):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, ErrorCode.UNKNOWN_REFERENCE, field=field)


class InvalidAmountException(AppException):
    def __init__(self, amount):
        super().__init__(f"Amount {amount} cannot be stored in cents", ErrorCode.INVALID_AMOUNT, field="amount")
