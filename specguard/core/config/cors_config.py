"""
CORS settings for the HTTP API.
"""

from dataclasses import dataclass, field


@dataclass
class CORSConfig:
    """Origins and headers browsers may use against the API."""

    origins: list[str]
    headers: list[str] = field(default_factory=lambda: ["*"])
    methods: list[str] = field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE"])
    allow_credentials: bool = True
