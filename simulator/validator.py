from dataclasses import dataclass
from typing import Optional

from simulator.transition_table import DIRECTIONS

MISSING_TRANSITION = "missing transition"
MISSING_DATA = "missing transition data"
INVALID_NEXT_STATE = "invalid next state"
INVALID_DIRECTION = "invalid direction"
INVALID_WRITE_SYMBOL = "invalid write symbol"

COMPLETE_MESSAGE = "Transition Table is complete"


@dataclass(frozen=True)
class ValidationResult:
    complete: bool
    message: str = COMPLETE_MESSAGE
    state: Optional[str] = None
    symbol: Optional[str] = None
    reason: Optional[str] = None

    def __bool__(self):
        return self.complete


def _failure(state, symbol, reason, message):
    return ValidationResult(False, message=message, state=state, symbol=symbol, reason=reason)


def validate(table, normal_states, alphabet, all_states):
    """
    Check that every (normal state, symbol) pair has a well-formed rule.
    Pairs are visited in declaration order (blank first in `alphabet`); the first
    failure is reported and the rest are not examined. The table is only read.
    """
    all_states = set(all_states)
    symbols = set(alphabet)

    for state in normal_states:
        for symbol in alphabet:
            rule = table.rule(state, symbol)

            if rule is None:
                return _failure(state, symbol, MISSING_TRANSITION,
                                f"Missing transition for State: {state}, Symbol: {symbol}")

            if not rule.is_filled():
                return _failure(state, symbol, MISSING_DATA,
                                f"Missing transition data for State: {state}, Symbol: {symbol}")

            if rule.next_state not in all_states:
                return _failure(state, symbol, INVALID_NEXT_STATE,
                                f"Invalid next state {rule.next_state} for State: {state}, Symbol: {symbol}")

            if rule.direction not in DIRECTIONS:
                return _failure(state, symbol, INVALID_DIRECTION,
                                f"Invalid direction {rule.direction} for State: {state}, Symbol: {symbol}")

            if rule.write not in symbols:
                return _failure(state, symbol, INVALID_WRITE_SYMBOL,
                                f"Invalid write symbol {rule.write} for State: {state}, Symbol: {symbol}")

    return ValidationResult(True)
