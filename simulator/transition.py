from typing import NamedTuple

from simulator.tape import Move

WILDCARD = "*"


class Transition(NamedTuple):
    consumed: str
    produced: str
    move: Move
    next_state: str

    def to_dict(self):
        return {
            "cons": self.consumed,
            "prod": self.produced,
            "move": self.move.value,
            "next": self.next_state,
        }


def find_transition(state, symbol, wildcard=WILDCARD):
    """
    Pick the transition of `state` that handles `symbol`.
    Exact matches win over the wildcard; ties go to declaration order.
    Returns None when nothing applies.
    """
    for transition in state.transitions:
        if transition.consumed == symbol:
            return transition
    for transition in state.transitions:
        if transition.consumed == wildcard:
            return transition
    return None
