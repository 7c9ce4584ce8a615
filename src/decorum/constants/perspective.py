"""Constants for the Perspective comment-analysis API."""

from __future__ import annotations

PERSPECTIVE_ANALYZE_URL: str = "https://commentanalyzer.googleapis.com/v1alpha1/comments:analyze"
PERSPECTIVE_TIMEOUT_SECONDS: float = 10.0
PERSPECTIVE_DO_NOT_STORE: bool = True
