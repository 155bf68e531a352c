# app.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from config.config_loader import load_config
from logger.logger import JSONLogger
from simulator.errors import TuringMachineError
from simulator.parser import load_model
from simulator.turing_machine import TuringMachine

console = Console()

OUTCOME_STYLE = {
    "accepted": "green",
    "rejected": "red",
    "undecided": "yellow"
}

# === Utilities ===
def format_identifier(identifier):
    start, end = identifier.tape.range
    return "\n".join([
        f"State: {identifier.current_state}",
        f"Tape: {identifier.tape.text}",
        f"Head: {identifier.tape.position}",
        f"Range ({start}..{end})",
        f"Steps: {identifier.step_count}"
    ])

def read_input(args):
    if args.input is not None:
        return args.input
    return sys.stdin.readline().rstrip("\r\n")

def exit_code(result):
    return 0 if result.accepted else 1

# === Runner ===
def run_machine(model, text, verbose=False, step_limit=None):
    """Run `model` on `text`; returns (RunResult, step records or [])."""
    machine = TuringMachine(model)
    machine.input(text)

    records = []
    if verbose:
        console.print(escape(machine.identifier().tape.visualize()))
        for record in machine.trace(step_limit):
            console.print(escape(str(record)))
            records.append(record)

    return machine.run(step_limit), records

def main(argv=None):
    parser = argparse.ArgumentParser(description="Single-tape Turing machine simulator")
    parser.add_argument("--file", "-f", required=True, help="The path of the machine definition file")
    parser.add_argument("--ext", "-e", help="Model format [json, yaml, toml]; inferred from the file path if omitted")
    parser.add_argument("--input", "-i", help="Input string; read from stdin if omitted")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print every step")
    parser.add_argument("--step-limit", "-n", type=int, help="Stop after this many steps")
    parser.add_argument("--config", "-c", help="Path to a runtime_config.json")
    parser.add_argument("--log", action="store_true", help="Append the run to the JSON-lines logs")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        model = load_model(args.file, args.ext)
    except (TuringMachineError, ValueError, TypeError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 2

    step_limit = args.step_limit if args.step_limit is not None else config["step_limit"]
    if step_limit is not None and step_limit < 0:
        console.print("[red]Error: step limit must be >= 0[/red]")
        return 2
    verbose = args.verbose or config["verbose"]

    text = read_input(args)
    result, records = run_machine(model, text, verbose=verbose, step_limit=step_limit)

    console.print(escape(format_identifier(result.identifier)))
    outcome = result.status.outcome
    style = OUTCOME_STYLE[outcome]
    console.print(f"[{style}]{outcome.capitalize()}[/{style}] ({result.status.value} after {result.steps} steps)")

    if args.log or config["log_runs"]:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        logger.log_run(model.name, text, result)
        if records:
            logger.log_trace(records)

    return exit_code(result)

if __name__ == "__main__":
    sys.exit(main())
