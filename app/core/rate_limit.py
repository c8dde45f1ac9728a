"""
In-memory login lockout keyed by client IP.

After LOGIN_MAX_ATTEMPTS consecutive failures the IP is locked for
LOGIN_LOCKOUT_MINUTES. State is per process and resets on restart.
"""
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from app.core.config import settings


@dataclass
class LoginAttempts:
    count: int = 0
    locked_until: Optional[float] = None


@dataclass
class AttemptResult:
    locked: bool
    remaining_attempts: int
    locked_until: Optional[float] = None


class LoginAttemptTracker:
    def __init__(
        self,
        max_attempts: int = settings.LOGIN_MAX_ATTEMPTS,
        lockout_seconds: int = settings.LOGIN_LOCKOUT_MINUTES * 60,
        clock: Callable[[], float] = time.time,
    ):
        self.max_attempts = max_attempts
        self.lockout_seconds = lockout_seconds
        self.clock = clock
        self._attempts: Dict[str, LoginAttempts] = {}
        self._lock = threading.Lock()

    def check(self, key: str) -> Optional[float]:
        """Return the lock expiry timestamp if `key` is currently locked."""
        with self._lock:
            attempts = self._attempts.get(key)
            if attempts and attempts.locked_until and attempts.locked_until > self.clock():
                return attempts.locked_until
            return None

    def register_failure(self, key: str) -> AttemptResult:
        with self._lock:
            attempts = self._attempts.setdefault(key, LoginAttempts())
            # A previous lock has run out: start counting again.
            if attempts.locked_until and attempts.locked_until <= self.clock():
                attempts.count = 0
                attempts.locked_until = None

            attempts.count += 1
            if attempts.count >= self.max_attempts:
                attempts.locked_until = self.clock() + self.lockout_seconds
                return AttemptResult(True, 0, attempts.locked_until)
            return AttemptResult(False, self.max_attempts - attempts.count)

    def minutes_until(self, locked_until: float) -> int:
        seconds = max(0.0, locked_until - self.clock())
        return max(1, math.ceil(seconds / 60))

    def reset(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._attempts.clear()
            else:
                self._attempts.pop(key, None)


login_tracker = LoginAttemptTracker()
