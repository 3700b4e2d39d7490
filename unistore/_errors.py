__all__ = (
    "InvalidMiddlewareResultError",
    "StoreError",
)


class StoreError(Exception):
    pass


class InvalidMiddlewareResultError(StoreError):
    pass
