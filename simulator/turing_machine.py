from simulator.records import Identifier, MachineStatus, RunResult, StepRecord
from simulator.tape import Tape
from simulator.transition import find_transition


class TuringMachine:
    """
    Single-tape machine over a validated Model.

    Halting is lazy: a machine stops only when no transition applies to the
    current (state, symbol) pair. Whether that stop is an accept or a reject
    depends on the final flag of the state it stopped in. Entering a final
    state that still has applicable transitions keeps the machine running.
    """

    def __init__(self, model):
        self.model = model
        self.reset()

    def reset(self):
        self.tape = Tape(blank=self.model.blank)
        self.current_state = self.model.start_state
        self.step_count = 0
        self.status = MachineStatus.IDLE

    def input(self, text):
        self.tape = Tape(text, blank=self.model.blank)
        self.current_state = self.model.start_state
        self.step_count = 0
        self.status = MachineStatus.READY

    def is_final(self):
        return self.current_state in self.model.final_states

    @property
    def halted(self):
        return self.status.is_terminal

    def step(self):
        """
        Execute one transition.
        Returns the StepRecord, or None when the machine halts instead (or had
        already halted, in which case nothing changes).
        """
        if self.halted:
            return None

        state = self.model.state(self.current_state)
        symbol = self.tape.read()
        transition = find_transition(state, symbol, self.model.wildcard)
        if transition is None:
            self.status = MachineStatus.HALTED_FINAL if state.is_final else MachineStatus.HALTED_STUCK
            return None

        # produced symbol is written literally, wildcard included
        self.tape.write(transition.produced)
        self.tape.move_head(transition.move)
        self.current_state = transition.next_state
        self.step_count += 1
        self.status = MachineStatus.RUNNING
        return StepRecord(
            step=self.step_count,
            state=state.name,
            consumed=symbol,
            produced=transition.produced,
            move=transition.move,
            next_state=transition.next_state,
            head=self.tape.head,
        )

    def trace(self, step_limit=None):
        """Like run(), but yields every executed StepRecord."""
        if step_limit is not None and step_limit < 0:
            raise ValueError(f"step_limit must be >= 0, got {step_limit}")
        while not self.halted:
            if step_limit is not None and self.step_count >= step_limit:
                # a halting lookup executes no transition, so it is not cut off by the limit
                state = self.model.state(self.current_state)
                if find_transition(state, self.tape.read(), self.model.wildcard) is None:
                    self.step()
                else:
                    self.status = MachineStatus.HALTED_STEP_LIMIT
                break
            record = self.step()
            if record is not None:
                yield record

    def run(self, step_limit=None):
        for _ in self.trace(step_limit):
            pass
        return RunResult(self.status, self.step_count, self.identifier())

    def identifier(self):
        return Identifier(
            current_state=self.current_state,
            tape=self.tape.snapshot(),
            step_count=self.step_count,
            status=self.status,
        )

    def visualize(self):
        """Small text view of the tape and head, plus the current state."""
        return f"{self.tape.snapshot().visualize()}\nState: {self.current_state}, Status: {self.status.value}"
