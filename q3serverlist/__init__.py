"""
q3serverlist - Quake III Arena master server lister
"""

from .errors import (
    DecodeError,
    InfoStringError,
    Q3ServerListError,
    ResolutionError,
    TransportError,
    UsageError,
)
from .master import Endpoint
from .session import QueryRequest, QuerySession, ServerEntry, SessionContext, SessionState

__version__ = "0.1.0"

__all__ = [
    'DecodeError',
    'Endpoint',
    'InfoStringError',
    'Q3ServerListError',
    'QueryRequest',
    'QuerySession',
    'ResolutionError',
    'ServerEntry',
    'SessionContext',
    'SessionState',
    'TransportError',
    'UsageError',
]
