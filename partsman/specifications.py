"""Helpers for handling item specifications."""

import json
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def parse_specifications(specifications: Any) -> dict[str, str]:
    """
    Normalize stored specifications into a `{key: value}` dict of strings.

    Accepts a JSON string or a mapping. Anything else (including malformed
    JSON or a JSON value that is not an object) yields an empty dict.
    """
    if not specifications:
        return {}

    if isinstance(specifications, str):
        try:
            parsed = json.loads(specifications)
        except ValueError:
            logger.warning("Ignoring malformed specifications JSON: %.80s", specifications)
            return {}
        if not isinstance(parsed, dict):
            return {}
        specifications = parsed

    if isinstance(specifications, Mapping):
        return {
            str(key): "" if value is None else str(value)
            for key, value in specifications.items()
        }

    return {}
