from simulator.definition import MachineDefinition
from simulator.tape import BLANK_SYMBOL
from simulator.transition_table import LEFT, RIGHT, STAY, TransitionTable

ACCEPT = "halt"
REJECT = "reject"


def x_marker(blank=BLANK_SYMBOL, accept=ACCEPT, reject=REJECT):
    """Overwrite every 1 with X, accept at the first blank."""
    table = TransitionTable({
        ("q0", "1"): ("X", "q0", RIGHT),
        ("q0", "X"): ("X", reject, RIGHT),
        ("q0", blank): (blank, accept, RIGHT),
    })
    return MachineDefinition(["q0", accept, reject], ["1", "X"], accept, reject, "q0", table, blank=blank)


def flip_first(blank=BLANK_SYMBOL, accept=ACCEPT, reject=REJECT):
    """Accept when a 0 is found (flipping 1s to 0 on the way), reject at the end of input."""
    table = TransitionTable({
        ("q0", "0"): ("1", accept, RIGHT),
        ("q0", "1"): ("0", "q0", RIGHT),
        ("q0", blank): (blank, reject, RIGHT),
    })
    return MachineDefinition(["q0"], ["0", "1"], accept, reject, "q0", table, blank=blank)


def binary_increment(blank=BLANK_SYMBOL, accept=ACCEPT, reject=REJECT):
    """Add one to a binary number: run to the right end, then carry leftwards."""
    table = TransitionTable({
        ("q0", blank): (blank, "q1", LEFT),
        ("q0", "0"): ("0", "q0", RIGHT),
        ("q0", "1"): ("1", "q0", RIGHT),
        ("q1", blank): ("1", accept, STAY),
        ("q1", "0"): ("1", accept, STAY),
        ("q1", "1"): ("0", "q1", LEFT),
    })
    return MachineDefinition(["q0", "q1"], ["0", "1"], accept, reject, "q0", table, blank=blank)


EXAMPLES = {
    "x_marker": x_marker,
    "flip_first": flip_first,
    "binary_increment": binary_increment,
}


def get_example(name, blank=BLANK_SYMBOL, accept=ACCEPT, reject=REJECT):
    if name not in EXAMPLES:
        raise KeyError(f"Unknown example machine: {name}. Available: {', '.join(EXAMPLES)}")
    return EXAMPLES[name](blank=blank, accept=accept, reject=reject)
