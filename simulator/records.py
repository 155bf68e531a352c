from enum import Enum
from typing import NamedTuple, Optional

from simulator.tape import Move, TapeSnapshot


class MachineStatus(Enum):
    IDLE = "idle"
    READY = "ready"
    RUNNING = "running"
    HALTED_FINAL = "halted_final"
    HALTED_STUCK = "halted_stuck"
    HALTED_STEP_LIMIT = "halted_step_limit"

    @property
    def is_terminal(self):
        return self in (MachineStatus.HALTED_FINAL, MachineStatus.HALTED_STUCK, MachineStatus.HALTED_STEP_LIMIT)

    @property
    def outcome(self):
        """accepted / rejected / undecided, or None while not halted."""
        return {
            MachineStatus.HALTED_FINAL: "accepted",
            MachineStatus.HALTED_STUCK: "rejected",
            MachineStatus.HALTED_STEP_LIMIT: "undecided",
        }.get(self)


class StepRecord(NamedTuple):
    """One executed transition, for verbose traces."""
    step: int
    state: str
    consumed: str
    produced: str
    move: Move
    next_state: str
    head: int   # head position after the move

    def to_dict(self):
        return {
            "step": self.step,
            "state": self.state,
            "consumed": self.consumed,
            "produced": self.produced,
            "move": self.move.value,
            "next_state": self.next_state,
            "head": self.head,
        }

    def __str__(self):
        return (f"Step {self.step}: State={self.state}, Read={self.consumed!r} -> "
                f"Write={self.produced!r}, Move={self.move.value}, Next={self.next_state}")


class Identifier(NamedTuple):
    """Read-only configuration of a machine."""
    current_state: str
    tape: TapeSnapshot
    step_count: int
    status: MachineStatus

    def to_dict(self):
        start, end = self.tape.range
        return {
            "current_state": self.current_state,
            "tape": self.tape.text,
            "head": self.tape.position,
            "range": [start, end],
            "step_count": self.step_count,
            "status": self.status.value,
        }


class RunResult(NamedTuple):
    status: MachineStatus
    steps: int
    identifier: Optional[Identifier] = None

    @property
    def accepted(self):
        return self.status is MachineStatus.HALTED_FINAL

    def to_dict(self):
        entry = {"status": self.status.value, "steps": self.steps}
        if self.identifier is not None:
            entry["state"] = self.identifier.current_state
            entry["tape"] = self.identifier.tape.text
        return entry
