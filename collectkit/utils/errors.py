# collectkit/utils/errors.py
class CollectKitError(Exception):
    """
    collectkit 所有异常的基类
    """


class InvalidArgumentError(CollectKitError, ValueError):
    """
    Raised when a call violates its precondition
    (non-positive chunk size, empty sequence for a neighbor lookup, ...).
    Raised before any partial mutation happens.
    """
