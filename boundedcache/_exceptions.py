__all__ = ("CacheError", "InvalidCapacityError", "UnknownPolicyError", "CacheInvariantError")


class CacheError(Exception): ...


class InvalidCapacityError(CacheError, ValueError): ...


class UnknownPolicyError(CacheError, ValueError): ...


class CacheInvariantError(CacheError, RuntimeError):
    """
    Raised when the key mapping and the ordering structure of a cache disagree.

    This never happens through the public API; seeing it means the internal
    state was corrupted.
    """
