"""Client for the Perspective comment-analysis API."""

from __future__ import annotations

from .client import PerspectiveClient
from .payload import build_request, parse_response

__all__ = ["PerspectiveClient", "build_request", "parse_response"]
