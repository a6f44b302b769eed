class BilliardsError(Exception):
    """Base error."""

class DegenerateGeometryError(BilliardsError, ValueError):
    """Raised when the apex coincides with a base vertex."""

class FieldMismatchError(BilliardsError, TypeError):
    """Raised when exact and floating-point values are mixed."""

class WalkInProgressError(BilliardsError, RuntimeError):
    """Raised when a second walk is started against busy Params."""

class RootNotFoundError(BilliardsError):
    """Raised when no data root can be located."""

class PointSetError(BilliardsError):
    """Base error for the point-set store."""

class PointSetExistsError(PointSetError):
    pass

class PointSetNotFoundError(PointSetError):
    pass

class InvalidPointSetNameError(PointSetError, ValueError):
    pass

class CorruptPointSetError(PointSetError):
    pass
