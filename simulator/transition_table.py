from dataclasses import dataclass

LEFT = "L"
RIGHT = "R"
STAY = "S"
DIRECTIONS = (LEFT, RIGHT, STAY)

RULE_FIELDS = ("write", "next_state", "direction")


@dataclass
class Rule:
    write: str = ""
    next_state: str = ""
    direction: str = RIGHT

    def is_filled(self):
        return bool(self.write and self.next_state and self.direction)

    def compact(self):
        """Busy Beaver style cell text, e.g. '1Rq0'."""
        return f"{self.write or '?'}{self.direction or '?'}{self.next_state or '?'}"


class TransitionTable:
    """
    (state, symbol) -> Rule mapping edited one field at a time.
    Missing or half-filled entries are allowed; completeness is the validator's job.
    """

    def __init__(self, rules=None):
        self.transitions = {}
        for (state, symbol), rule in (rules or {}).items():
            if isinstance(rule, Rule):
                self.transitions[(state, symbol)] = Rule(rule.write, rule.next_state, rule.direction)
            else:
                write, next_state, direction = rule
                self.transitions[(state, symbol)] = Rule(write, next_state, direction)

    def rule(self, state, symbol):
        return self.transitions.get((state, symbol))

    def set(self, state, symbol, **fields):
        """Merge the supplied fields into the rule at (state, symbol), creating it if needed."""
        unknown = set(fields) - set(RULE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown rule field(s): {', '.join(sorted(unknown))}")

        key = (state, symbol)
        rule = self.transitions.get(key)
        if rule is None:
            rule = Rule()
            self.transitions[key] = rule
        for name, value in fields.items():
            if value is not None:
                setattr(rule, name, value)
        return rule

    def discard(self, state=None, symbol=None):
        """Drop every entry matching the given state and/or symbol."""
        for key in list(self.transitions):
            if (state is None or key[0] == state) and (symbol is None or key[1] == symbol):
                del self.transitions[key]

    def rename_state(self, old, new):
        renamed = {}
        for (state, symbol), rule in self.transitions.items():
            if rule.next_state == old:
                rule.next_state = new
            renamed[(new if state == old else state, symbol)] = rule
        self.transitions = renamed

    def rename_symbol(self, old, new):
        renamed = {}
        for (state, symbol), rule in self.transitions.items():
            if rule.write == old:
                rule.write = new
            renamed[(state, new if symbol == old else symbol)] = rule
        self.transitions = renamed

    def rows(self, states, symbols):
        """Grid of rules (None where missing), one row per state in the given order."""
        return [[self.rule(state, symbol) for symbol in symbols] for state in states]

    def copy(self):
        return TransitionTable(self.transitions)

    def __contains__(self, key):
        return key in self.transitions

    def __len__(self):
        return len(self.transitions)

    def __iter__(self):
        return iter(self.transitions.items())


def upsert_rule(table, state, symbol, **fields):
    table.set(state, symbol, **fields)
    return table
