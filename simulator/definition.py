from simulator.tape import BLANK_SYMBOL
from simulator.transition_table import TransitionTable
from simulator.validator import validate


class MachineDefinition:
    """
    Everything the editor produces: normal states, alphabet, terminal labels,
    start state and the (possibly incomplete) transition table.

    Malformed construction arguments raise ValueError. The table itself is
    never checked here; call validate() for that.
    """

    def __init__(self, states, symbols, accept_state, reject_state, start_state,
                 table=None, blank=BLANK_SYMBOL):
        if len(blank) != 1:
            raise ValueError(f"Blank symbol must be a single character, got {blank!r}")
        if not accept_state or not reject_state:
            raise ValueError("Accept and reject states must be non-empty labels.")
        if accept_state == reject_state:
            raise ValueError(f"Accept and reject states must differ, both are {accept_state!r}")

        self.blank = blank
        self.accept_state = accept_state
        self.reject_state = reject_state

        # Terminal labels listed alongside the normal states are not normal states.
        normal = [s for s in states if s not in (accept_state, reject_state)]
        if not normal:
            raise ValueError("At least one normal state is required.")
        for state in normal:
            self._check_state_label(state)
        if len(set(normal)) != len(normal):
            raise ValueError(f"Duplicate state labels in {normal}")
        self.states = list(normal)

        self.symbols = []
        for symbol in symbols:
            self._check_new_symbol(symbol)
            self.symbols.append(symbol)

        if start_state not in self.states:
            raise ValueError(f"Start state {start_state!r} is not one of the normal states {self.states}")
        self.start_state = start_state

        self.table = table if table is not None else TransitionTable()

    # === Derived sets ===
    @property
    def normal_states(self):
        return list(self.states)

    @property
    def alphabet(self):
        return [self.blank] + self.symbols

    @property
    def all_states(self):
        return self.states + [self.accept_state, self.reject_state]

    def is_terminal(self, state):
        return state in (self.accept_state, self.reject_state)

    # === Checks ===
    def _check_state_label(self, state):
        if not isinstance(state, str) or not state:
            raise ValueError(f"State labels must be non-empty strings, got {state!r}")

    def _check_new_state(self, state):
        self._check_state_label(state)
        if state in self.states or self.is_terminal(state):
            raise ValueError(f"State {state!r} already exists.")

    def _check_new_symbol(self, symbol):
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"Symbols must be single characters, got {symbol!r}")
        if symbol == self.blank:
            raise ValueError(f"The blank symbol {self.blank!r} is implicit and cannot be declared.")
        if symbol in self.symbols:
            raise ValueError(f"Symbol {symbol!r} already exists.")

    # === Editing ===
    def add_state(self, state):
        self._check_new_state(state)
        self.states.append(state)

    def remove_state(self, state):
        """
        Remove a normal state. Returns True when it was the start state; the
        start state is then None and the caller has to choose a new one.
        """
        if state not in self.states:
            raise ValueError(f"Unknown state: {state!r}")
        if len(self.states) == 1:
            raise ValueError("Cannot remove the last normal state.")

        self.states.remove(state)
        self.table.discard(state=state)
        if state == self.start_state:
            self.start_state = None
            return True
        return False

    def rename_state(self, old, new):
        if old not in self.states:
            raise ValueError(f"Unknown state: {old!r}")
        if new == old:
            return
        self._check_new_state(new)
        self.states[self.states.index(old)] = new
        self.table.rename_state(old, new)
        if self.start_state == old:
            self.start_state = new

    def set_start_state(self, state):
        if state not in self.states:
            raise ValueError(f"Start state must be a normal state, got {state!r}")
        self.start_state = state

    def add_symbol(self, symbol):
        self._check_new_symbol(symbol)
        self.symbols.append(symbol)

    def remove_symbol(self, symbol):
        if symbol == self.blank:
            raise ValueError(f"The blank symbol {self.blank!r} cannot be removed.")
        if symbol not in self.symbols:
            raise ValueError(f"Unknown symbol: {symbol!r}")
        self.symbols.remove(symbol)
        self.table.discard(symbol=symbol)

    def rename_symbol(self, old, new):
        if old == self.blank:
            raise ValueError(f"The blank symbol {self.blank!r} cannot be renamed.")
        if old not in self.symbols:
            raise ValueError(f"Unknown symbol: {old!r}")
        if new == old:
            return
        self._check_new_symbol(new)
        self.symbols[self.symbols.index(old)] = new
        self.table.rename_symbol(old, new)

    def set_rule(self, state, symbol, **fields):
        return self.table.set(state, symbol, **fields)

    def validate(self):
        return validate(self.table, self.normal_states, self.alphabet, self.all_states)
