from .format_sniffer import sniff_format, FORMAT_RULES, UNKNOWN_FORMAT
from .channel_profiler import profile_channels, count_transitions
from .protocol_classifier import classify_protocol, digital_channels, PROTOCOL_RULES

__all__ = [
    "sniff_format",
    "FORMAT_RULES",
    "UNKNOWN_FORMAT",
    "profile_channels",
    "count_transitions",
    "classify_protocol",
    "digital_channels",
    "PROTOCOL_RULES",
]
