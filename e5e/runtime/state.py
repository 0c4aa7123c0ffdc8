from enum import Enum, auto


class InvocationState(Enum):
    """
    Authoritative single-pass invocation state machine.
    """

    START = auto()             # Process started, nothing validated
    ARGS_OK = auto()           # Exactly four process arguments
    METHOD_RESOLVED = auto()   # Entrypoint found by name
    SHAPE_OK = auto()          # Two parameters, two return slots
    PAYLOADS_DECODED = auto()  # Event and context decoded
    INVOKED = auto()           # Entrypoint running inside the capture window
    ERROR_PATH = auto()        # Entrypoint reported an error
    SUCCESS_PATH = auto()      # Entrypoint returned a result
    TERMINATED = auto()        # Envelope written

    FAILED = auto()            # Raised to the bootstrap, no envelope


class ExitCode(int, Enum):
    SUCCESS = 0
    USER_ERROR = -1
    FAILURE = -255
