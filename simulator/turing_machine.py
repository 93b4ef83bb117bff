from enum import Enum

from simulator.tape import Tape
from simulator.transition_table import DIRECTIONS

DEFAULT_DELAY_MS = 300
FALLBACK_DELAY_MS = 100


class EngineState(str, Enum):
    IDLE = "IDLE"
    VALIDATED = "VALIDATED"
    RUNNING = "RUNNING"
    HALTED_ACCEPT = "HALT"
    HALTED_REJECT = "REJECT"
    ERRORED = "ERROR"


class HaltReason(str, Enum):
    ACCEPT = "accept"
    DECLARED_REJECT = "declared_reject"
    UNDEFINED_TRANSITION = "undefined_transition"
    MALFORMED_TRANSITION = "malformed_transition"


STEPPABLE = (EngineState.IDLE, EngineState.VALIDATED, EngineState.RUNNING)
TERMINAL = (EngineState.HALTED_ACCEPT, EngineState.HALTED_REJECT, EngineState.ERRORED)


class TuringMachine:
    """
    One run of a MachineDefinition: tape, head, current state and engine status.

    The definition (and its transition table) is referenced, not copied, so
    edits made by the caller are seen by the next step(). Callers should
    invalidate() after editing.
    """

    def __init__(self, definition, input_text="", delay_ms=DEFAULT_DELAY_MS):
        self.definition = definition
        self.delay_ms = delay_ms
        self.prepare(input_text)

    @property
    def delay_ms(self):
        return self._delay_ms

    @delay_ms.setter
    def delay_ms(self, value):
        # Advisory only; the auto-run loop reads it, step() never does.
        try:
            value = int(value)
        except (TypeError, ValueError):
            value = FALLBACK_DELAY_MS
        self._delay_ms = value if value > 0 else FALLBACK_DELAY_MS

    def prepare(self, input_text):
        start = self.definition.start_state
        if start is None:
            raise ValueError("No start state selected.")

        self.input_text = input_text
        self._tape = Tape.from_input(input_text, blank=self.definition.blank)
        self.head = 1
        self.current_state = start
        self.status = EngineState.IDLE
        self.message = None
        self.halt_reason = None
        self.steps = 0

    def reset(self):
        self.prepare(self.input_text)

    def invalidate(self):
        """Called after the definition is edited: drop any validation verdict."""
        self.message = None
        if self.status in (EngineState.VALIDATED, EngineState.ERRORED, EngineState.RUNNING):
            self.status = EngineState.IDLE

    def validate(self):
        result = self.definition.validate()
        if result.complete:
            self.status = EngineState.VALIDATED
            self.message = None
        else:
            self.status = EngineState.ERRORED
            self.message = result.message
        return result

    def start(self):
        """Validate, reload the last input and enter RUNNING. Returns False when validation fails."""
        if not self.validate():
            return False
        self.prepare(self.input_text)
        self.status = EngineState.RUNNING
        return True

    def step(self):
        if self.status not in STEPPABLE:
            return self.status

        symbol = self._tape.read(self.head)
        rule = self.definition.table.rule(self.current_state, symbol)

        if rule is None:
            self.status = EngineState.HALTED_REJECT
            self.halt_reason = HaltReason.UNDEFINED_TRANSITION
            self.message = f"No transition defined for state {self.current_state} and symbol {symbol}"
            return self.status

        # An unvalidated table may hold half-edited rules; they reject without touching the tape.
        if not rule.is_filled() or rule.direction not in DIRECTIONS or rule.write not in self.definition.alphabet:
            self.status = EngineState.HALTED_REJECT
            self.halt_reason = HaltReason.MALFORMED_TRANSITION
            self.message = (f"Malformed transition for state {self.current_state} and symbol {symbol}: "
                            f"{rule.compact()}")
            return self.status

        self._tape.write(self.head, rule.write)
        self.head = self._tape.move_and_grow(self.head, rule.direction)
        self.current_state = rule.next_state
        self.steps += 1

        if rule.next_state == self.definition.accept_state:
            self.status = EngineState.HALTED_ACCEPT
            self.halt_reason = HaltReason.ACCEPT
        elif rule.next_state == self.definition.reject_state:
            self.status = EngineState.HALTED_REJECT
            self.halt_reason = HaltReason.DECLARED_REJECT
        else:
            self.status = EngineState.RUNNING
        return self.status

    @property
    def tape(self):
        return self._tape.cells

    def window(self, radius=10):
        return self._tape.window(self.head, radius)

    @property
    def is_halted(self):
        return self.status in TERMINAL

    def snapshot(self):
        return {
            "tape": self.tape,
            "head": self.head,
            "state": self.current_state,
            "status": self.status.value,
            "halt_reason": self.halt_reason.value if self.halt_reason else None,
            "message": self.message,
            "steps": self.steps,
        }
