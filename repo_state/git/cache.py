"""Write-once caches for memoized git queries."""

import threading
from dataclasses import dataclass
from typing import Any, Optional


class Once:
    """
    A slot that is computed at most once.

    Concurrent callers block on the first computation and then share its
    value. If the computation raises, the slot stays empty and the exception
    propagates; cache failures by returning a ResultOrError instead.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False
        self._value = None

    @property
    def done(self):
        return self._done

    def get(self, compute):
        if self._done:
            return self._value
        with self._lock:
            if not self._done:
                self._value = compute()
                self._done = True
        return self._value


@dataclass(frozen=True)
class ResultOrError:
    """Exactly one of a successful value or the error that prevented it."""

    value: Any = None
    error: Optional[BaseException] = None

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("ResultOrError cannot hold both a value and an error")

    @classmethod
    def ok(cls, value):
        return cls(value=value)

    @classmethod
    def failed(cls, error):
        if error is None:
            raise ValueError("ResultOrError.failed requires an error")
        return cls(error=error)

    @property
    def is_error(self):
        return self.error is not None
