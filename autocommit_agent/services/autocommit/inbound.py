"""Inbound event handling: signature check, payload parsing and dispatch."""

import json
import logging
from typing import Any, List, Optional

from fastapi import HTTPException

from autocommit_agent.core.security import verify_signature
from autocommit_agent.services.autocommit.runner import AgentRunner

logger = logging.getLogger(__name__)


def parse_inbound_events(raw_body: bytes) -> List[dict]:
    """
    Parse an inbound request body into a list of event payloads.

    Accepts a single JSON object or a JSON array of objects.

    Raises:
        HTTPException: 400 when the body is not JSON objects.
    """
    try:
        payload = json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=400, detail="Invalid JSON body") from e

    events = payload if isinstance(payload, list) else [payload]
    if not all(isinstance(event, dict) for event in events):
        raise HTTPException(status_code=400, detail="Events must be JSON objects")
    return events


async def handle_inbound_events(
    runner: AgentRunner,
    raw_body: bytes,
    signature_header: Optional[str],
    secret: Optional[str],
) -> dict:
    """
    Verify, parse and process inbound events.

    - Verifies the HMAC SHA-256 signature when a secret is configured.
    - Runs the agent once per event, in order.

    Returns:
        A dict to be returned as the JSON response.
    """
    if secret and not verify_signature(raw_body, secret, signature_header or ""):
        raise HTTPException(status_code=403, detail="Invalid signature")

    events = parse_inbound_events(raw_body)
    logger.info("Processing %d inbound event(s)", len(events))

    try:
        emitted: List[Any] = await runner.run_receive(events)
    except Exception as e:
        logger.error("Inbound event processing failed: %s", str(e), exc_info=True)
        # Error already stored as an agent log by the runner
        raise HTTPException(
            status_code=500, detail=f"Inbound event processing failed: {str(e)}"
        ) from e

    return {"message": "Events processed", "received": len(events), "events": emitted}
