import argparse

from simulator.examples import EXAMPLES, get_example

MISSING = "----"


def cell_text(rule):
    if rule is None:
        return MISSING
    return rule.compact()


def format_table(definition):
    """Rows of a state x symbol grid; the first row is the header."""
    header = ["State"] + list(definition.alphabet)
    rows = [header]
    grid = definition.table.rows(definition.normal_states, definition.alphabet)
    for state, rules in zip(definition.normal_states, grid):
        marker = "*" if state == definition.start_state else ""
        rows.append([f"{marker}{state}"] + [cell_text(rule) for rule in rules])
    return rows


def format_latex(definition):
    lines = [r"\begin{array}{c|" + "c" * len(definition.alphabet) + "}"]
    lines.append("State/Symbol & " + " & ".join([f"\\text{{{s}}}" for s in definition.alphabet]) + r" \\ \hline")
    grid = definition.table.rows(definition.normal_states, definition.alphabet)
    for state, rules in zip(definition.normal_states, grid):
        lines.append(" & ".join([state] + [cell_text(rule) for rule in rules]) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def pretty_print_definition(definition):
    """Print the transition table as a terminal grid followed by a LaTeX array."""
    print("\n=== Transition Table ===")
    for row in format_table(definition):
        print("\t".join(row))

    print(f"\nAccept: {definition.accept_state}  Reject: {definition.reject_state}  Blank: {definition.blank}")

    result = definition.validate()
    print(f"Validation: {result.message}")

    print("\n=== LaTeX Table ===")
    print(format_latex(definition))


def main():
    parser = argparse.ArgumentParser(description="Turing machine transition table inspector")
    parser.add_argument("--example", required=True, choices=sorted(EXAMPLES), help="Built-in machine to inspect")
    args = parser.parse_args()

    pretty_print_definition(get_example(args.example))


if __name__ == "__main__":
    main()
