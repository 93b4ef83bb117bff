# app.py

import argparse
import re
import sys

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.table import Table
from rich.text import Text

from config.config_loader import load_config, save_config
from logger.logger import JSONLogger
from simulator.definition import MachineDefinition
from simulator.examples import EXAMPLES, get_example
from simulator.transition_table import DIRECTIONS
from simulator.turing_machine import EngineState, TuringMachine
from tools.run_machine import run_with_progress

console = Console()

CONFIG_PATH = "config/runtime_config.json"

STATUS_COLORS = {
    EngineState.HALTED_ACCEPT: "green",
    EngineState.RUNNING: "yellow",
    EngineState.HALTED_REJECT: "red",
    EngineState.VALIDATED: "cyan",
    EngineState.IDLE: "white",
    EngineState.ERRORED: "bold red",
}


# === Utilities ===
def sanitize_state_label(label, max_length=8):
    """Keep letters and digits only, truncated to max_length. May return ''."""
    return re.sub(r"[^a-zA-Z0-9]", "", label)[:max_length]


def sanitize_symbol(text):
    return text.strip().upper()[:1]


def new_definition(config):
    return MachineDefinition(
        ["q0"], ["0", "1"],
        config["accept_state"], config["reject_state"], "q0",
        blank=config["blank_symbol"],
    )


def load_example(config, name):
    return get_example(
        name,
        blank=config["blank_symbol"],
        accept=config["accept_state"],
        reject=config["reject_state"],
    )


def render_tape(machine):
    text = Text()
    for index, symbol in enumerate(machine.tape):
        if index == machine.head:
            text.append(f"[{symbol}]", style="bold white on blue")
        else:
            text.append(f" {symbol} ", style="cyan")
    return text


def render_status(machine):
    color = STATUS_COLORS.get(machine.status, "white")
    line = f"[{color}]STATUS: {machine.status.value}[/{color}] (Q: {machine.current_state}, steps: {machine.steps})"
    if machine.halt_reason is not None:
        line += f" [dim]{machine.halt_reason.value}[/dim]"
    return line


def render_table(definition):
    table = Table(title="Transition Table δ(q, a)", show_header=True, header_style="bold magenta")
    table.add_column("State / Symbol", justify="center")
    for state in definition.normal_states:
        label = f"{state} (start)" if state == definition.start_state else state
        table.add_column(label, justify="center")

    for symbol in definition.alphabet:
        row_label = f"BLANK ({symbol})" if symbol == definition.blank else symbol
        cells = []
        for state in definition.normal_states:
            rule = definition.table.rule(state, symbol)
            cells.append("[dim]----[/dim]" if rule is None else rule.compact())
        table.add_row(row_label, *cells)
    return table


def show_machine(machine):
    console.print()
    console.print(render_status(machine))
    console.print(render_tape(machine))
    if machine.message and machine.status in (EngineState.ERRORED, EngineState.HALTED_REJECT):
        console.print(f"[white on red] {machine.message} [/white on red]")
    console.print(render_table(machine.definition))


def show_main_menu():
    console.print("\n[bold cyan]Turing Machine Workbench[/bold cyan]")
    console.print("[1] Show Machine")
    console.print("[2] Edit States")
    console.print("[3] Edit Symbols")
    console.print("[4] Edit Transition")
    console.print("[5] Validate Machine")
    console.print("[6] Run Simulation")
    console.print("[7] Step")
    console.print("[8] Reset")
    console.print("[9] Set Input / Speed")
    console.print("[10] Load Example")
    console.print("[11] Exit")


# === Editing Handlers ===
def pick_start_state(machine):
    definition = machine.definition
    if definition.start_state is None:
        definition.set_start_state(definition.normal_states[0])
        console.print(f"[yellow]Start state removed; now using {definition.start_state}.[/yellow]")


def handle_edit_states(machine, config):
    definition = machine.definition
    console.print(f"\nNormal states: {', '.join(definition.normal_states)} (start: {definition.start_state})")
    action = Prompt.ask("Action", choices=["add", "remove", "rename", "start", "back"], default="back")

    try:
        if action == "add":
            label = sanitize_state_label(Prompt.ask("New state label"), config["max_state_label"])
            definition.add_state(label or f"q{len(definition.normal_states)}")
        elif action == "remove":
            state = Prompt.ask("State to remove", choices=definition.normal_states)
            if definition.remove_state(state):
                pick_start_state(machine)
        elif action == "rename":
            old = Prompt.ask("State to rename", choices=definition.normal_states)
            new = sanitize_state_label(Prompt.ask("New label"), config["max_state_label"])
            if not new:
                return
            definition.rename_state(old, new)
        elif action == "start":
            definition.set_start_state(Prompt.ask("Start state", choices=definition.normal_states))
        else:
            return
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return

    machine.invalidate()
    machine.reset()


def handle_edit_symbols(machine, config):
    definition = machine.definition
    console.print(f"\nSymbols (excluding blank {definition.blank}): {', '.join(definition.symbols) or '-'}")
    action = Prompt.ask("Action", choices=["add", "remove", "rename", "back"], default="back")

    try:
        if action == "add":
            if len(definition.symbols) >= config["max_symbols"]:
                console.print(f"[red]At most {config['max_symbols']} symbols are allowed.[/red]")
                return
            definition.add_symbol(sanitize_symbol(Prompt.ask("New symbol")))
        elif action == "remove":
            definition.remove_symbol(Prompt.ask("Symbol to remove", choices=definition.symbols))
        elif action == "rename":
            old = Prompt.ask("Symbol to rename", choices=definition.symbols)
            definition.rename_symbol(old, sanitize_symbol(Prompt.ask("New symbol")))
        else:
            return
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return

    machine.invalidate()


def handle_edit_transition(machine):
    definition = machine.definition
    state = Prompt.ask("State", choices=definition.normal_states)
    symbol = Prompt.ask("Symbol", choices=definition.alphabet)
    current = definition.table.rule(state, symbol)
    if current is not None:
        console.print(f"Current rule: {current.compact()}")

    # Empty answers leave the field untouched
    write = sanitize_symbol(Prompt.ask("Write symbol", default="")) or None
    if write == definition.blank.upper():
        write = definition.blank
    next_state = Prompt.ask("Next state", choices=definition.all_states + [""], default="") or None
    direction = Prompt.ask("Direction", choices=list(DIRECTIONS) + [""], default="") or None

    definition.set_rule(state, symbol, write=write, next_state=next_state, direction=direction)
    machine.invalidate()


# === Run Handlers ===
def handle_validate(machine, logger=None):
    if machine.status in (EngineState.HALTED_ACCEPT, EngineState.HALTED_REJECT):
        machine.reset()
    result = machine.validate()
    if logger is not None:
        logger.log_validation(result)
    if result.complete:
        console.print(f"[green]{result.message}[/green]")
    else:
        console.print(f"[red]{result.message}[/red]")
    return result


def handle_run(machine, config, logger=None):
    summary = run_with_progress(machine, delay_ms=machine.delay_ms, max_steps=config["max_steps"], logger=logger)
    show_machine(machine)
    if summary.hit_step_limit:
        console.print(f"[red]Stopped after {config['max_steps']:,} steps without halting.[/red]")
    return summary


def handle_step(machine):
    if machine.is_halted:
        console.print(f"[yellow]Machine is {machine.status.value}; reset to run again.[/yellow]")
        return machine.status
    status = machine.step()
    show_machine(machine)
    return status


def handle_set_input(machine, config, config_path=CONFIG_PATH):
    machine.input_text = Prompt.ask("Initial input tape", default=machine.input_text)
    speed = IntPrompt.ask("Execution speed (ms)", default=machine.delay_ms)
    machine.delay_ms = min(max(speed, config["min_speed_ms"]), config["max_speed_ms"])
    machine.reset()

    if Confirm.ask("Save as default input and speed?", default=False):
        config.update({"initial_input": machine.input_text, "speed_ms": machine.delay_ms})
        save_config(config, config_path)
        console.print("[green]Configuration updated successfully.[/green]")


def handle_load_example(machine, config):
    name = Prompt.ask("Example", choices=sorted(EXAMPLES), default=config["default_example"])
    return TuringMachine(load_example(config, name), machine.input_text, delay_ms=machine.delay_ms)


def make_logger(config):
    if not config["trace_enabled"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])


def interactive_main(config, machine, config_path=CONFIG_PATH):
    logger = make_logger(config)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=[str(i) for i in range(1, 12)], default="1")

        if choice == "1":
            show_machine(machine)
        elif choice == "2":
            handle_edit_states(machine, config)
        elif choice == "3":
            handle_edit_symbols(machine, config)
        elif choice == "4":
            handle_edit_transition(machine)
        elif choice == "5":
            handle_validate(machine, logger)
        elif choice == "6":
            handle_run(machine, config, logger)
        elif choice == "7":
            handle_step(machine)
        elif choice == "8":
            machine.reset()
            show_machine(machine)
        elif choice == "9":
            handle_set_input(machine, config, config_path)
        elif choice == "10":
            machine = handle_load_example(machine, config)
            show_machine(machine)
        elif choice == "11":
            console.print("[bold green]Goodbye![/bold green]")
            break


# === CLI Mode for Automation ===
def cli_main(args, config, machine):
    logger = make_logger(config)

    if args.validate:
        result = handle_validate(machine, logger)
        if not result.complete:
            return 1
    if args.run:
        summary = handle_run(machine, config, logger)
        return 0 if summary.status == EngineState.HALTED_ACCEPT.value else 2
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Workbench")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to runtime_config.json")
    parser.add_argument("--example", default=None, choices=sorted(EXAMPLES), help="Built-in machine to load")
    parser.add_argument("--empty", action="store_true", help="Start from an empty one-state machine")
    parser.add_argument("--input", default=None, help="Initial tape contents")
    parser.add_argument("--validate", action="store_true", help="Validate the machine and exit")
    parser.add_argument("--run", action="store_true", help="Run the machine to completion and exit")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, verbose=False)
    except (FileNotFoundError, TypeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if args.empty:
        definition = new_definition(config)
    else:
        definition = load_example(config, args.example or config["default_example"])
    input_text = config["initial_input"] if args.input is None else args.input
    machine = TuringMachine(definition, input_text, delay_ms=config["speed_ms"])

    if args.validate or args.run:
        return cli_main(args, config, machine)

    interactive_main(config, machine, args.config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
