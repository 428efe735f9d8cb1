"""
Record Payload Loader.

Turns backend responses (a JSON array of objects) into typed records.
Validation of the raw payload happens here, at the boundary, so the
filter pipeline only ever sees well-typed records.

Design Notes:
    - Invalid items are skipped and reported (don't fail the whole list)
    - strict=True raises on the first invalid item instead
    - Extra JSON keys are ignored by the record models
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from hr_record_filter.domain.entities import RECORD_MODELS, RecordType

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, Path, List[Dict[str, Any]]]


class PayloadError(Exception):
    """Raised when a payload cannot be turned into records."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.index = index


@dataclass
class LoadResult:
    """Records parsed from a payload plus what was skipped."""

    records: List[Any] = field(default_factory=list)
    errors: Dict[int, str] = field(default_factory=dict)

    @property
    def skipped_count(self) -> int:
        return len(self.errors)

    @property
    def is_complete(self) -> bool:
        return not self.errors


class RecordPayloadLoader:
    """Parses backend payloads into record models."""

    def __init__(self, strict: bool = False) -> None:
        """
        Args:
            strict: Raise PayloadError on the first invalid item
        """
        self.strict = strict

    def load(self, payload: Payload, record_type: RecordType) -> LoadResult:
        """
        Parse a payload into records of the given type.

        Args:
            payload: List of dicts, JSON text/bytes, or path to a JSON file
            record_type: Type of the records in the payload

        Returns:
            LoadResult with records in payload order

        Raises:
            PayloadError: Payload is not a JSON array, or strict and an item is invalid
        """
        items = self._decode(payload)
        model = RECORD_MODELS[record_type]
        result = LoadResult()

        for index, item in enumerate(items):
            try:
                result.records.append(model.model_validate(item))
            except PydanticValidationError as e:
                message = f"{record_type.value}[{index}]: {e.error_count()} invalid field(s)"
                if self.strict:
                    raise PayloadError(message, index=index) from e
                result.errors[index] = str(e)
                logger.warning(f"Skipping {message}")

        logger.debug(
            f"Loaded {len(result.records)} {record_type.value} records "
            f"({result.skipped_count} skipped)"
        )
        return result

    def _decode(self, payload: Payload) -> List[Any]:
        if isinstance(payload, Path):
            payload = payload.read_text(encoding="utf-8")
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except json.JSONDecodeError as e:
                raise PayloadError(f"Payload is not valid JSON: {e}") from e
        if not isinstance(payload, list):
            raise PayloadError(
                f"Expected a JSON array of records, got {type(payload).__name__}"
            )
        return payload
