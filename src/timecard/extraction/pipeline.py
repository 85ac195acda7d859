"""Model text -> recovered object -> sanitized hours -> confidence."""
from __future__ import annotations
import logging
from timecard.domain.exceptions import ExtractionFailedError
from timecard.extraction.confidence import score
from timecard.extraction.models import ExtractionResult, RecoveryFailure
from timecard.extraction.recover import recover
from timecard.extraction.sanitize import sanitize

logger = logging.getLogger(__name__)


def extract_and_sanitize(raw_model_text: str) -> ExtractionResult:
    """Turn raw model output into cleaned hours.

    Raises:
        ExtractionFailedError if no JSON object can be recovered. Hours are
        never guessed in that case.
    """
    text = raw_model_text.strip()
    recovered = recover(text)

    if isinstance(recovered, RecoveryFailure):
        logger.warning("Extraction recovery failed (%s): %s", recovered.reason, recovered.detail)
        raise ExtractionFailedError(recovered.reason, recovered.detail, text)
    if not isinstance(recovered, dict):
        logger.warning("Extraction recovered a %s, not an object", type(recovered).__name__)
        raise ExtractionFailedError(
            "not-an-object", f"expected a JSON object, got {type(recovered).__name__}", text,
        )

    cleaned = sanitize(recovered)
    raw_text = recovered.get("rawText")
    return ExtractionResult(
        hours=cleaned.hours,
        warnings=cleaned.warnings,
        confidence=score(len(cleaned.hours)),
        raw_text=raw_text if isinstance(raw_text, str) else None,
    )
