from .envelope import Envelope
from .types import Context, Event, Return
from .validator import EnvelopeValidator, ProtocolError, SchemaName

__all__ = [
    "Context",
    "Envelope",
    "EnvelopeValidator",
    "Event",
    "ProtocolError",
    "Return",
    "SchemaName",
]
