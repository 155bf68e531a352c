from simulator.errors import ParseError, ValidationError
from simulator.state import State
from simulator.tape import BLANK, Move
from simulator.transition import WILDCARD, Transition

# Accepted spellings in model documents -> canonical key
STATE_LIST_KEYS = ("states", "state")
STATE_KEYS = {
    "name": ("name",),
    "start": ("start", "is_start"),
    "final": ("final", "is_final"),
    "transitions": ("transitions", "trans"),
}
TRANSITION_KEYS = {
    "cons": ("cons", "consume"),
    "prod": ("prod", "produce"),
    "move": ("move",),
    "next": ("next",),
}
CONFIG_KEYS = {
    "blank": ("blank", "empty"),
    "wildcard": ("wildcard", "some"),
}


def _pick(entry, aliases, default=None, required=False, where="entry"):
    for alias in aliases:
        if alias in entry:
            return entry[alias]
    if required:
        raise ParseError("MissingField", f"{where} has no '{aliases[0]}' field")
    return default


def _text(value):
    # YAML and JSON hand back bare digits as ints
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _flag(entry, aliases, where):
    value = _pick(entry, aliases, default=False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ParseError("BadShape", f"{where}: '{aliases[0]}' must be true or false, got {value!r}")
    return value


def _check_symbol(symbol, where):
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValidationError("BadSymbol", f"{where}: symbol {symbol!r} must be a single character")


class Model:
    """
    Validated, read-only set of states.
    Construction fails with ValidationError unless there is exactly one start
    state, names are unique, and every transition targets a known state.
    Machines share one instance, so every attribute is read-only.
    """

    __slots__ = ("_states", "_blank", "_wildcard", "_name", "_by_name", "_start_state", "_final_states")

    def __init__(self, states, blank=BLANK, wildcard=WILDCARD, name=None):
        self._states = tuple(states)
        self._blank = blank
        self._wildcard = wildcard
        self._name = name
        self._by_name = self.validate()
        self._start_state = next(s.name for s in self._states if s.is_start)
        self._final_states = frozenset(s.name for s in self._states if s.is_final)

    @property
    def states(self):
        return self._states

    @property
    def blank(self):
        return self._blank

    @property
    def wildcard(self):
        return self._wildcard

    @property
    def name(self):
        return self._name

    @property
    def start_state(self):
        return self._start_state

    @property
    def final_states(self):
        return self._final_states

    def validate(self):
        _check_symbol(self.blank, "config.blank")
        _check_symbol(self.wildcard, "config.wildcard")
        if self.blank == self.wildcard:
            raise ValidationError("BadSymbol", f"blank and wildcard are both {self.blank!r}")

        by_name = {}
        for state in self.states:
            if not isinstance(state.name, str) or not state.name:
                raise ValidationError("BadStateName", f"state name {state.name!r} is not a non-empty string")
            if state.name in by_name:
                raise ValidationError("DuplicateState", f"state '{state.name}' is defined more than once")
            by_name[state.name] = state

        starts = [s.name for s in self.states if s.is_start]
        if len(starts) != 1:
            raise ValidationError("StartStateError", f"expected exactly one start state, found {starts}")

        for state in self.states:
            for transition in state.transitions:
                where = f"state '{state.name}'"
                _check_symbol(transition.consumed, where)
                _check_symbol(transition.produced, where)
                if not isinstance(transition.move, Move):
                    raise ValidationError("BadMove", f"{where}: move {transition.move!r} is not L, R or S")
                if transition.next_state not in by_name:
                    raise ValidationError(
                        "NextStateNotFound",
                        f"{where}: transition on {transition.consumed!r} targets unknown state '{transition.next_state}'",
                    )
        return by_name

    def state(self, name):
        return self._by_name[name]

    def __contains__(self, name):
        return name in self._by_name

    def __len__(self):
        return len(self.states)

    def __iter__(self):
        return iter(self.states)

    def symbols(self):
        """Every concrete symbol consumed or produced, in first-seen order."""
        seen = {}
        for state in self.states:
            for t in state.transitions:
                for symbol in (t.consumed, t.produced):
                    if symbol != self.wildcard:
                        seen.setdefault(symbol, None)
        return list(seen)

    # === Serialized form ===
    @classmethod
    def from_dict(cls, data, name=None):
        if not isinstance(data, dict):
            raise ParseError("BadShape", f"model must be a mapping, got {type(data).__name__}")

        raw_states = _pick(data, STATE_LIST_KEYS, default=[])
        if not isinstance(raw_states, list):
            raise ParseError("BadShape", "'states' must be a list")

        config = data.get("config") or {}
        if not isinstance(config, dict):
            raise ParseError("BadShape", "'config' must be a mapping")
        blank = _text(_pick(config, CONFIG_KEYS["blank"], default=BLANK))
        wildcard = _text(_pick(config, CONFIG_KEYS["wildcard"], default=WILDCARD))

        states = [cls._state_from_dict(entry, idx) for idx, entry in enumerate(raw_states)]
        return cls(states, blank=blank, wildcard=wildcard, name=name)

    @staticmethod
    def _state_from_dict(entry, idx):
        if not isinstance(entry, dict):
            raise ParseError("BadShape", f"state #{idx} must be a mapping")
        state_name = _text(_pick(entry, STATE_KEYS["name"], required=True, where=f"state #{idx}"))
        where = f"state '{state_name}'"

        raw_transitions = _pick(entry, STATE_KEYS["transitions"], default=[]) or []
        if not isinstance(raw_transitions, list):
            raise ParseError("BadShape", f"{where}: transitions must be a list")

        transitions = []
        for t_idx, raw in enumerate(raw_transitions):
            t_where = f"{where} transition #{t_idx}"
            if not isinstance(raw, dict):
                raise ParseError("BadShape", f"{t_where} must be a mapping")
            move_text = _pick(raw, TRANSITION_KEYS["move"], required=True, where=t_where)
            try:
                move = Move.parse(move_text)
            except ValueError:
                raise ValidationError("BadMove", f"{t_where}: move {move_text!r} is not L, R or S") from None
            transitions.append(Transition(
                consumed=_text(_pick(raw, TRANSITION_KEYS["cons"], required=True, where=t_where)),
                produced=_text(_pick(raw, TRANSITION_KEYS["prod"], required=True, where=t_where)),
                move=move,
                next_state=_text(_pick(raw, TRANSITION_KEYS["next"], required=True, where=t_where)),
            ))

        return State(
            state_name,
            is_start=_flag(entry, STATE_KEYS["start"], where),
            is_final=_flag(entry, STATE_KEYS["final"], where),
            transitions=transitions,
        )

    def to_dict(self):
        data = {"states": [s.to_dict() for s in self.states]}
        if self.blank != BLANK or self.wildcard != WILDCARD:
            data["config"] = {"blank": self.blank, "wildcard": self.wildcard}
        return data

    def __repr__(self):
        return f"Model({self.name or 'unnamed'!r}, states={[s.name for s in self.states]})"
