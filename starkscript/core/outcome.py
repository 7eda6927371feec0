"""Result of one invoke: Success or Failure, never both."""

from __future__ import annotations

from dataclasses import dataclass

from starkscript.core.errors import ScriptCommandError


class OutcomeError(RuntimeError):
    """Raised by unwrap helpers when the outcome holds the other variant."""


@dataclass(frozen=True, slots=True)
class Success:
    transaction_hash: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> int:
        return self.transaction_hash

    def unwrap_err(self) -> ScriptCommandError:
        raise OutcomeError(f"called unwrap_err on Success({hex(self.transaction_hash)})")


@dataclass(frozen=True, slots=True)
class Failure:
    error: ScriptCommandError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> int:
        raise OutcomeError(f"called unwrap on Failure({self.error!r})")

    def unwrap_err(self) -> ScriptCommandError:
        return self.error


InvokeOutcome = Success | Failure
