import numpy as np

from simulator.records import MachineStatus
from simulator.turing_machine import TuringMachine


def evaluate_batch(model, inputs, step_limit=None):
    """
    Run `model` once per input string.
    Every input gets its own TuringMachine, so results never share a tape.
    """
    results = []
    for text in inputs:
        machine = TuringMachine(model)
        machine.input(text)
        result = machine.run(step_limit=step_limit)
        results.append({
            "input": text,
            "status": result.status.value,
            "steps": result.steps,
            "state": result.identifier.current_state,
            "tape": result.identifier.tape.text,
        })
    return results


def summarize(results):
    """Totals over evaluate_batch() output."""
    statuses = np.array([r["status"] for r in results], dtype=object)
    steps = np.array([r["steps"] for r in results], dtype=np.int64)

    return {
        "count": int(len(results)),
        "accepted": int(np.count_nonzero(statuses == MachineStatus.HALTED_FINAL.value)),
        "rejected": int(np.count_nonzero(statuses == MachineStatus.HALTED_STUCK.value)),
        "undecided": int(np.count_nonzero(statuses == MachineStatus.HALTED_STEP_LIMIT.value)),
        "mean_steps": float(steps.mean()) if steps.size else 0.0,
        "max_steps": int(steps.max()) if steps.size else 0,
    }
