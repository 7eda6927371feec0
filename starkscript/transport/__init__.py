"""JSON-RPC transports."""

from .contracts import Transport, TransportFailure
from .http import HttpTransport
from .mock import ScriptedTransport

__all__ = ["HttpTransport", "ScriptedTransport", "Transport", "TransportFailure"]
