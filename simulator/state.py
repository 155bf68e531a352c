from simulator.transition import Transition


class State:
    __slots__ = ("_name", "_is_start", "_is_final", "_transitions")

    def __init__(self, name, is_start=False, is_final=False, transitions=()):
        self._name = name
        self._is_start = is_start
        self._is_final = is_final
        self._transitions = tuple(transitions)

    @property
    def name(self):
        return self._name

    @property
    def is_start(self):
        return self._is_start

    @property
    def is_final(self):
        return self._is_final

    @property
    def transitions(self):
        return self._transitions

    def add_transition(self, consumed, produced, move, next_state):
        """Return a copy of this state with one more transition appended."""
        transition = Transition(consumed, produced, move, next_state)
        return State(self.name, self.is_start, self.is_final, self.transitions + (transition,))

    def to_dict(self):
        entry = {"name": self.name}
        if self.is_start:
            entry["start"] = True
        if self.is_final:
            entry["final"] = True
        entry["transitions"] = [t.to_dict() for t in self.transitions]
        return entry

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return (self.name, self.is_start, self.is_final, self.transitions) == (
            other.name, other.is_start, other.is_final, other.transitions)

    def __hash__(self):
        return hash((self.name, self.is_start, self.is_final, self.transitions))

    def __repr__(self):
        return f"State({self.name!r}, start={self.is_start}, final={self.is_final}, transitions={len(self.transitions)})"
