class TuringMachineError(Exception):
    """Base class for every error raised by the simulator."""

    def __init__(self, reason, message):
        super().__init__(message)
        self.reason = reason
        self.message = message

    def __str__(self):
        return f"{self.reason}: {self.message}"


class ValidationError(TuringMachineError, ValueError):
    """The model breaks an integrity rule (start state, names, targets, symbols)."""


class ParseError(TuringMachineError, ValueError):
    """The model text could not be turned into a model."""
