"""Tagged result type returned by ``BackendFactory.try_create``."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar, Union

if TYPE_CHECKING:
    from gcs_store._errors import ErrorKind, StoreError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value.

    :param value: The produced value.
    """

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the value."""
        return self.value


@dataclasses.dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error that caused it.

    :param error: The error describing the failure.
    """

    error: StoreError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        """Failure category of the carried error."""
        return self.error.kind

    @property
    def cause(self) -> BaseException | None:
        """The underlying exception, if the error wraps one."""
        return self.error.__cause__

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]
