import json

from logger.logger import JSONLogger
from simulator.turing_machine import TuringMachine


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_log_and_log_batch_append(tmp_path):
    logger = JSONLogger(str(tmp_path), "test_")
    logger.log({"a": 1})
    logger.log_batch([{"b": 2}, {"c": 3}])

    entries = read_lines(logger.current_log)
    assert [{k: v for k, v in e.items() if k != "timestamp"} for e in entries] == [{"a": 1}, {"b": 2}, {"c": 3}]
    assert all("timestamp" in e for e in entries)
    assert logger.current_log.endswith(f"test_{logger.today}.jsonl")


def test_log_run_and_trace(tmp_path, example_model):
    machine = TuringMachine(example_model)
    machine.input("b")
    records = list(machine.trace())
    result = machine.run()

    logger = JSONLogger(str(tmp_path))
    logger.log_run("example", "b", result)
    logger.log_trace(records)

    (run_entry,) = read_lines(logger.current_log)
    assert run_entry["model"] == "example"
    assert run_entry["input"] == "b"
    assert run_entry["status"] == "halted_stuck"
    assert run_entry["steps"] == 1
    assert run_entry["state"] == "B"

    (trace_entry,) = read_lines(tmp_path / f"trace_{logger.today}.jsonl")
    assert trace_entry["state"] == "A"
    assert trace_entry["move"] == "L"
    assert trace_entry["head"] == -1


def test_log_outcomes_splits_by_status(tmp_path):
    logger = JSONLogger(str(tmp_path))
    logger.log_outcomes([
        {"input": "x", "status": "halted_final"},
        {"input": "b", "status": "halted_stuck"},
        {"input": "y", "status": "halted_final"},
        {"input": "z", "status": "halted_step_limit"},
    ])

    accepted = read_lines(tmp_path / f"accepted_{logger.today}.jsonl")
    assert [e["input"] for e in accepted] == ["x", "y"]
    assert len(read_lines(tmp_path / f"rejected_{logger.today}.jsonl")) == 1
    assert len(read_lines(tmp_path / f"undecided_{logger.today}.jsonl")) == 1


def test_rotate_keeps_prefix(tmp_path):
    logger = JSONLogger(str(tmp_path), "rot_")
    logger.rotate()
    assert logger.current_log.endswith(f"rot_{logger.today}.jsonl")
