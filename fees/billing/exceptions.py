from typing import Any


class UnsupportedIntervalError(Exception):
    def __init__(self, interval):
        super().__init__(f"Proration is not implemented for `{interval}` plans")
        self.interval = interval


class FeeValidationError(Exception):
    def __init__(self, record, errors: list[dict[str, Any]]):
        super().__init__("; ".join(error["message"] for error in errors))
        self.record = record
        self.errors = errors
