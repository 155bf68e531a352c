# tools/simulate_inputs.py

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from config.config_loader import load_config
from simulator.evaluator import evaluate_batch, summarize
from simulator.parser import load_model
from simulator.records import MachineStatus

console = Console()

# === Promotion for Long-Runners ===
def promote_long_runner(text, pool_file):
    Path(pool_file).parent.mkdir(parents=True, exist_ok=True)
    with open(pool_file, "a", encoding="utf-8") as f:
        f.write(text + "\n")

# === Utility Loaders ===
def load_inputs(inputs_file):
    """One input string per line; blank lines are kept as empty inputs."""
    with open(inputs_file, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f]

def load_checkpoint(checkpoint_path):
    if checkpoint_path.exists():
        with open(checkpoint_path, "r", encoding="utf-8") as f:
            checkpoint = json.load(f)
        return checkpoint.get("completed", [])
    return []

def save_checkpoint(completed, checkpoint_path):
    with open(checkpoint_path, "w", encoding="utf-8") as f:
        json.dump({"completed": completed}, f, indent=4)

# === Main Simulation Runner ===
def simulate_inputs(model_file, inputs_file, output_name="results", results_root="results",
                    batch_size=1024, step_limit=None, fmt=None, show_progress=True):
    model = load_model(model_file, fmt)

    results_folder = Path(results_root) / Path(inputs_file).stem
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / f"{output_name}.jsonl"
    checkpoint_file = results_folder / f"{output_name}_checkpoint.json"
    long_runners_file = results_folder / "long_runners.txt"

    all_inputs = load_inputs(inputs_file)
    completed = load_checkpoint(checkpoint_file)
    done = set(completed)

    # checkpoint tracks line numbers, so duplicate inputs stay distinct
    pending = [(line_no, text) for line_no, text in enumerate(all_inputs) if line_no not in done]
    console.print(f"Loaded {len(all_inputs):,} inputs for model {model.name}. {len(pending):,} pending.")

    all_results = []
    with open(results_file, "a", encoding="utf-8") as results_fh:
        for batch_start in range(0, len(pending), batch_size):
            batch = pending[batch_start:batch_start + batch_size]

            with Progress(
                    SpinnerColumn(),
                    BarColumn(),
                    "[progress.percentage]{task.percentage:>3.0f}%",
                    TextColumn("{task.completed}/{task.total} Inputs"),
                    TimeElapsedColumn(),
                    console=console,
                    disable=not show_progress
            ) as progress:

                task = progress.add_task("[cyan]Simulating...", total=len(batch))

                batch_results = []
                for line_no, text in batch:
                    entry = evaluate_batch(model, [text], step_limit=step_limit)[0]
                    entry["line"] = line_no
                    batch_results.append(entry)

                    # === Auto-Promote Long Runners ===
                    if entry["status"] == MachineStatus.HALTED_STEP_LIMIT.value:
                        promote_long_runner(text, long_runners_file)

                    progress.update(task, advance=1)

            # === BULK WRITE once per batch ===
            for entry in batch_results:
                results_fh.write(json.dumps(entry) + "\n")
            results_fh.flush()

            completed.extend(entry["line"] for entry in batch_results)
            save_checkpoint(completed, checkpoint_file)
            all_results.extend(batch_results)
            console.print(f"Batch {batch_start // batch_size + 1} completed. Checkpoint saved.")

    summary = summarize(all_results)
    console.print(f"[green]Done.[/green] {summary['accepted']:,} accepted, {summary['rejected']:,} rejected, "
                  f"{summary['undecided']:,} undecided. Results saved to {results_file}")
    return summary

# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a Turing machine model over a file of inputs with checkpointing.")
    parser.add_argument("--file", "-f", required=True, help="Path to the model file (json, yaml or toml)")
    parser.add_argument("--ext", "-e", help="Model format, inferred from the file name if omitted")
    parser.add_argument("--inputs", required=True, help="Path to the inputs file (one input per line)")
    parser.add_argument("--output", default="results", help="Output result file name (default: results)")
    parser.add_argument("--results_dir", help="Root folder for results (default: results_directory from config)")
    parser.add_argument("--batch_size", type=int, help="Inputs per checkpoint (default: batch_size from config)")
    parser.add_argument("--step_limit", type=int, help="Maximum steps per input (default: step_limit from config)")
    parser.add_argument("--config", "-c", help="Path to a runtime_config.json")
    args = parser.parse_args(argv)

    config = load_config(args.config)

    simulate_inputs(
        args.file,
        args.inputs,
        args.output,
        results_root=args.results_dir or config["results_directory"],
        batch_size=args.batch_size or config["batch_size"],
        step_limit=args.step_limit if args.step_limit is not None else config["step_limit"],
        fmt=args.ext
    )

if __name__ == "__main__":
    main()
