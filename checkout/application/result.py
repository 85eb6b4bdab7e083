from dataclasses import dataclass
from typing import Any, Callable, Iterable

from checkout.domain.errors import ErrorCode


@dataclass(frozen=True)
class Success:
    value: Any = None

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    code: ErrorCode
    message: str | None = None

    @property
    def success(self) -> bool:
        return False


Result = Success | Error

Rule = Callable[[], Result]


def run_chain(rules: Iterable[Rule]) -> Result:
    """
    Runs the rules in order and stops at the first Error.

    Returns the last Success when every rule passes.
    """
    result: Result = Success()
    for rule in rules:
        result = rule()
        if not result.success:
            return result
    return result
