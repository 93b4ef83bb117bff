# tools/run_machine.py

import argparse
import time
from dataclasses import asdict, dataclass
from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger
from simulator.examples import EXAMPLES, get_example
from simulator.turing_machine import EngineState, TuringMachine

console = Console()

TRACE_FLUSH_EVERY = 500


@dataclass
class RunSummary:
    input_text: str
    status: str
    halt_reason: Optional[str]
    steps: int
    final_state: str
    tape: str
    head: int
    message: Optional[str]
    hit_step_limit: bool

    def as_entry(self):
        return asdict(self)


def console_message(msg):
    console.print(f"[bold cyan]\\[tm][/bold cyan] {msg}")


def summarize(machine, hit_step_limit=False):
    return RunSummary(
        input_text=machine.input_text,
        status=machine.status.value,
        halt_reason=machine.halt_reason.value if machine.halt_reason else None,
        steps=machine.steps,
        final_state=machine.current_state,
        tape="".join(machine.tape),
        head=machine.head,
        message=machine.message,
        hit_step_limit=hit_step_limit,
    )


# === Timed Auto-Run Loop ===
def run_machine(machine, delay_ms=None, max_steps=10_000, logger=None, on_step=None, sleep=time.sleep,
                flush_every=TRACE_FLUSH_EVERY):
    """
    Drive machine.step() at a fixed cadence until it leaves RUNNING.

    A machine that is not already RUNNING is started first (validate + reload
    input); if validation fails the ERRORED machine is summarized untouched.
    max_steps bounds machines that never halt. Step snapshots go to the
    logger in batches of flush_every.
    """
    delay_ms = machine.delay_ms if delay_ms is None else delay_ms

    if machine.status != EngineState.RUNNING and not machine.start():
        summary = summarize(machine)
        if logger is not None:
            logger.log_summary([summary.as_entry()])
        return summary

    trace = []
    while machine.status == EngineState.RUNNING and machine.steps < max_steps:
        machine.step()
        if logger is not None:
            trace.append(machine.snapshot())
            if len(trace) >= flush_every:
                logger.log_trace(trace)
                trace.clear()
        if on_step is not None:
            on_step(machine)
        if machine.status == EngineState.RUNNING and delay_ms > 0:
            sleep(delay_ms / 1000)

    summary = summarize(machine, hit_step_limit=machine.status == EngineState.RUNNING)

    if logger is not None:
        if trace:
            logger.log_trace(trace)
        logger.log_summary([summary.as_entry()])
        if machine.status == EngineState.HALTED_ACCEPT:
            logger.log_accepted([summary.as_entry()])
        elif machine.status == EngineState.HALTED_REJECT:
            logger.log_rejected([summary.as_entry()])

    return summary


def run_with_progress(machine, delay_ms=None, max_steps=10_000, logger=None):
    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Steps"),
            TimeElapsedColumn(),
            console=console
    ) as progress:
        task = progress.add_task("[cyan]Running...", total=max_steps)
        summary = run_machine(
            machine,
            delay_ms=delay_ms,
            max_steps=max_steps,
            logger=logger,
            on_step=lambda m: progress.update(task, completed=m.steps),
        )
    return summary


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run a built-in Turing machine to completion.")
    parser.add_argument("--example", default="flip_first", choices=sorted(EXAMPLES), help="Built-in machine to run")
    parser.add_argument("--input", default="", help="Initial tape contents")
    parser.add_argument("--delay", type=int, default=0, help="Delay between steps in ms (default: 0)")
    parser.add_argument("--max_steps", type=int, default=10_000, help="Step limit for non-halting machines")
    parser.add_argument("--log_dir", default=None, help="Write JSONL run logs to this directory")
    args = parser.parse_args()

    machine = TuringMachine(get_example(args.example), args.input)
    logger = JSONLogger(output_directory=args.log_dir) if args.log_dir else None

    summary = run_with_progress(machine, delay_ms=args.delay, max_steps=args.max_steps, logger=logger)

    console_message(f"Status: {summary.status} after {summary.steps:,} steps (state {summary.final_state})")
    console_message(f"Tape: {summary.tape}")
    if summary.message:
        console_message(f"[yellow]{summary.message}[/yellow]")
    if summary.hit_step_limit:
        console_message(f"[red]Step limit {args.max_steps:,} reached without halting.[/red]")


if __name__ == "__main__":
    main()
