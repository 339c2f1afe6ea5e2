from typing import Callable, Optional

from redis.backoff import AbstractBackoff

from .constant import MAX_RECONNECT_DELAY_MS, ONE_SECOND_MS


def retry_strategy(times: int) -> int:
    """Delay in milliseconds before reconnect attempt ``times`` (1-based).

    Starts at one second and grows by a second per attempt, capped at five.
    """
    return min(times * ONE_SECOND_MS, MAX_RECONNECT_DELAY_MS)


class RetryStrategyBackoff(AbstractBackoff):
    """redis-py backoff driven by :func:`retry_strategy`.

    redis-py counts failures from 1 and expects seconds, so the policy is
    called with the failure count unchanged and the result converted.

    Args:
        strategy: Maps attempt number to a delay in milliseconds
        on_retry: Called with (attempt, delay_ms) every time a delay is computed
    """

    def __init__(
        self,
        strategy: Callable[[int], int] = retry_strategy,
        on_retry: Optional[Callable[[int, int], None]] = None,
    ):
        self.strategy = strategy
        self.on_retry = on_retry

    def compute(self, failures: int) -> float:
        delay_ms = self.strategy(failures)
        if self.on_retry is not None:
            self.on_retry(failures, delay_ms)
        return delay_ms / ONE_SECOND_MS

    def reset(self) -> None:
        pass

    def __deepcopy__(self, memo):
        # redis-py deep-copies its Retry per connection; keep the callback bound
        # to the owning ManagedConnection instead of cloning it.
        return self


__all__ = [
    "retry_strategy",
    "RetryStrategyBackoff",
]
