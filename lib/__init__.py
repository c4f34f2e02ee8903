# =============================================================================
# lib/ - Settings Parsers
# =============================================================================
# Small parsers with no framework imports:
# - utils.py: Size-limit and remote image pattern parsing
# =============================================================================

from lib.utils import RemotePattern, parse_remote_pattern, parse_size_limit

__all__ = [
    "RemotePattern",
    "parse_remote_pattern",
    "parse_size_limit",
]
