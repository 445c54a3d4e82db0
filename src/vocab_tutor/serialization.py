"""JSON encoding of evaluation results."""
from __future__ import annotations

import json
import logging

from .models import EvaluationResult

LOGGER = logging.getLogger(__name__)

ERROR_PAYLOAD = '{ "error": "Failed to encode response" }'


def result_to_json(result: EvaluationResult, compact: bool = False) -> str:
    """Encode with sorted keys; never raises, returning :data:`ERROR_PAYLOAD` instead."""

    try:
        return json.dumps(result.to_dict(), indent=None if compact else 2, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        LOGGER.error("Failed to encode response: %s", exc)
        return ERROR_PAYLOAD
