"""
Envelope parser.

Turns a raw push request body into a ``PubSubEnvelope`` or raises
``MalformedEnvelope``. Pure; no partial envelope is ever returned.
"""

from pydantic import ValidationError

from pipeline.errors import MalformedEnvelope, summarize_validation_error
from schemas.pubsub import PubSubEnvelope

STAGE = "envelope"


def parse_envelope(body: bytes | str) -> PubSubEnvelope:
    """
    Parse and validate a push request body.

    Args:
        body: Raw request body, UTF-8 JSON text

    Returns:
        PubSubEnvelope: The validated envelope

    Raises:
        MalformedEnvelope: If the body is not JSON, not an object, or any
            required field is missing or not a string
    """
    try:
        return PubSubEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise MalformedEnvelope(STAGE, summarize_validation_error(e), cause=e) from e
