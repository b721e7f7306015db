"""Result: outcome of a strict helper call, carrying a value or a typed failure."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from helperkit.utils.errors import HelperKitError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Result of a helper call."""

    value: Optional[T] = None
    error: Optional[HelperKitError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failure_kind(self) -> Optional[str]:
        """Name of the error class when the call failed."""
        return type(self.error).__name__ if self.error is not None else None

    def unwrap_or(self, default: Any) -> Any:
        """Return the value, or ``default`` when the call failed."""
        return self.value if self.ok else default


def attempt(func: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Run a strict helper and capture its HelperKitError in a Result.

    Errors outside the helperkit taxonomy are not expected from strict
    helpers and are propagated.
    """
    try:
        return Result(value=func(*args, **kwargs))
    except HelperKitError as e:
        return Result(error=e)
