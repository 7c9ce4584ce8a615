"""Config file validation for the moderation relay."""

from __future__ import annotations

import difflib
import math
from pathlib import Path
from typing import Any

import yaml

from decorum.constants.config import ATTRIBUTES_KEY, MARKER_FIELDS, MARKERS_KEY, THRESHOLD_KEY
from decorum.constants.validation import (
    ALLOWED_ATTRIBUTE_KEYS,
    ALLOWED_CONFIG_KEYS,
    ALLOWED_MARKER_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from decorum.exceptions.validation import ValidationError, sort_errors


def validate_config_file(path: Path) -> list[ValidationError]:
    """Validate a relay config file and return all validation errors.

    This is the collect-all entry point used by both ``decorum validate-config``
    and ``decorum run`` preflight.  It never raises; all problems are returned
    as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    path = path.resolve()
    path_str = str(path)

    if not path.exists():
        errors.append(
            ValidationError(
                code=CFG001,
                path=path_str,
                field="",
                message=f"config file not found: {path}",
            )
        )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid config syntax: {exc}",
            )
        )
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(map(str, raw.keys())):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    _validate_markers_block(raw, path_str, errors)
    _validate_attributes_block(raw, path_str, errors)

    return sort_errors(errors)


def _validate_markers_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``emotes`` nested mapping."""
    if MARKERS_KEY not in raw:
        errors.append(_missing(path_str, MARKERS_KEY))
        return
    markers = raw[MARKERS_KEY]
    if not isinstance(markers, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=MARKERS_KEY,
                message=f"`{MARKERS_KEY}` must be a mapping",
            )
        )
        return

    for key in sorted(map(str, markers.keys())):
        if key not in ALLOWED_MARKER_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"{MARKERS_KEY}.{key}",
                    message=f"unknown key `{key}` in `{MARKERS_KEY}`",
                    hint=_suggest_key(key, ALLOWED_MARKER_KEYS),
                )
            )

    for field_name in MARKER_FIELDS:
        dotted = f"{MARKERS_KEY}.{field_name}"
        if field_name not in markers:
            errors.append(_missing(path_str, dotted))
        elif not isinstance(markers[field_name], str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=dotted,
                    message=f"invalid type for `{dotted}`",
                    hint="expected a string",
                )
            )


def _validate_attributes_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``attributes`` nested mapping."""
    if ATTRIBUTES_KEY not in raw:
        errors.append(_missing(path_str, ATTRIBUTES_KEY))
        return
    attributes = raw[ATTRIBUTES_KEY]
    if not isinstance(attributes, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=ATTRIBUTES_KEY,
                message=f"`{ATTRIBUTES_KEY}` must be a mapping",
            )
        )
        return
    if not attributes:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=ATTRIBUTES_KEY,
                message=f"`{ATTRIBUTES_KEY}` must name at least one attribute",
            )
        )
        return

    for name in sorted(attributes, key=str):
        options = attributes[name]
        dotted = f"{ATTRIBUTES_KEY}.{name}"
        if not isinstance(options, dict):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=dotted,
                    message=f"`{dotted}` must be a mapping",
                    hint=f"expected {{\"{THRESHOLD_KEY}\": <number>}}",
                )
            )
            continue

        for key in sorted(map(str, options.keys())):
            if key not in ALLOWED_ATTRIBUTE_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{dotted}.{key}",
                        message=f"unknown key `{key}` in `{dotted}`",
                        hint=_suggest_key(key, ALLOWED_ATTRIBUTE_KEYS),
                    )
                )

        if THRESHOLD_KEY not in options:
            errors.append(_missing(path_str, f"{dotted}.{THRESHOLD_KEY}"))
            continue
        threshold = options[THRESHOLD_KEY]
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{dotted}.{THRESHOLD_KEY}",
                    message=f"invalid type for `{dotted}.{THRESHOLD_KEY}`",
                    hint="expected a number",
                )
            )
        elif not math.isfinite(threshold):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{dotted}.{THRESHOLD_KEY}",
                    message=f"invalid value for `{dotted}.{THRESHOLD_KEY}`: {threshold!r}",
                    hint="expected a finite number",
                )
            )


def _missing(path_str: str, dotted: str) -> ValidationError:
    return ValidationError(
        code=CFG006,
        path=path_str,
        field=dotted,
        message=f"missing required key `{dotted}`",
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
