# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Parsers for the static framework settings:
# - Remote image patterns ("https://**.amazonaws.com/**")
# - Human-readable size limits ("2mb")
# =============================================================================

import re
from dataclasses import dataclass, field
from urllib.parse import urlsplit


# =============================================================================
# Size Limits
# =============================================================================

_SIZE_UNITS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024 ** 2,
    "gb": 1024 ** 3,
}

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(b|kb|mb|gb)?\s*$", re.IGNORECASE)


def parse_size_limit(value: str | int) -> int:
    """
    Convert a size string to a number of bytes.

    Units are binary (1kb = 1024 bytes). A bare number is taken as bytes.

    Args:
        value: Size such as "2mb", "500kb", "1024" or an int

    Returns:
        Size in bytes

    Raises:
        ValueError: If the string is not a recognised size

    Example:
        parse_size_limit("2mb")  # 2097152
    """
    if isinstance(value, int):
        return value

    match = _SIZE_RE.match(value)
    if not match:
        raise ValueError(f"Invalid size limit: {value!r} (expected e.g. '2mb' or '500kb')")

    number, unit = match.groups()
    return int(float(number) * _SIZE_UNITS[(unit or "b").lower()])


# =============================================================================
# Remote Image Patterns
# =============================================================================

def _glob_to_regex(glob: str, separator: str) -> re.Pattern:
    """
    Translate a hostname or pathname glob to a compiled regex.

    `*` matches within one segment, `**` spans any number of segments.
    The result is unanchored; callers use fullmatch.
    """
    parts = []
    i = 0
    while i < len(glob):
        if glob.startswith("**", i):
            parts.append(".*" if separator == "/" else ".+")
            i += 2
        elif glob[i] == "*":
            parts.append(f"[^{re.escape(separator)}]+")
            i += 1
        else:
            parts.append(re.escape(glob[i]))
            i += 1
    return re.compile("".join(parts), re.IGNORECASE if separator == "." else 0)


@dataclass(frozen=True)
class RemotePattern:
    """
    One entry of the remote image allowlist.

    Attributes:
        protocol: "http" or "https"
        hostname: Hostname glob, e.g. "**.amazonaws.com"
        pathname: Pathname glob, e.g. "/**"
        port: Required port, or "" to accept any
    """
    protocol: str
    hostname: str
    pathname: str = "/**"
    port: str = ""
    _host_re: re.Pattern = field(init=False, repr=False, compare=False)
    _path_re: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_host_re", _glob_to_regex(self.hostname, "."))
        object.__setattr__(self, "_path_re", _glob_to_regex(self.pathname, "/"))

    def matches(self, url: str) -> bool:
        """Return True if `url` is served from a source this pattern allows."""
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError:
            return False

        if parts.scheme.lower() != self.protocol.lower():
            return False
        if not parts.hostname or not self._host_re.fullmatch(parts.hostname):
            return False
        if self.port and str(port or "") != self.port:
            return False
        return bool(self._path_re.fullmatch(parts.path or "/"))


def parse_remote_pattern(value: str) -> RemotePattern:
    """
    Parse a URL-shaped glob into a RemotePattern.

    Args:
        value: Pattern such as "https://**.amazonaws.com/**"

    Returns:
        RemotePattern with protocol, hostname, pathname and port

    Raises:
        ValueError: If the pattern has no protocol or hostname
    """
    value = value.strip()
    protocol, sep, rest = value.partition("://")
    if not sep or not protocol:
        raise ValueError(f"Invalid remote pattern: {value!r} (expected e.g. 'https://**.example.com/**')")

    netloc, slash, path = rest.partition("/")
    hostname, _, port = netloc.partition(":")
    if not hostname:
        raise ValueError(f"Invalid remote pattern: {value!r} (missing hostname)")

    return RemotePattern(
        protocol=protocol.lower(),
        hostname=hostname,
        pathname=f"/{path}" if slash else "/**",
        port=port,
    )
