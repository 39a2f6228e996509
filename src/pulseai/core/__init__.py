from .config import settings, get_settings, Settings
from .constants import *  # noqa: F401,F403
from .models import (
    Capture,
    FormatGuess,
    ChannelProfile,
    ProtocolGuess,
    AnalysisOutcome,
    AnalysisRecord,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "Capture",
    "FormatGuess",
    "ChannelProfile",
    "ProtocolGuess",
    "AnalysisOutcome",
    "AnalysisRecord",
] + [name for name in globals().keys() if name.isupper()]
