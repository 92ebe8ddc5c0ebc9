"""AWS Lambda handler for editing a creative's classification fields."""

import asyncio

from .. import app, config
from ..api.serializers import parse_patch
from .http import error_response, json_response, parse_body


def handler(event, context):
    """
    AWS Lambda handler - partial update of one Creative row.

    Input payload:
    {
        "rowIndex": 12,
        "id": 7,
        "mainTone": "dark"
    }

    Only the fields present are changed; the link tag is rebuilt.
    """
    config_errors = config.validate_config()
    if config_errors:
        return error_response(500, f"Configuration error: {', '.join(config_errors)}")

    try:
        body = parse_body(event)
    except ValueError as e:
        return error_response(400, f"Failed to parse request: {e}")

    row_index = body.get("rowIndex")
    creative_id = body.get("id", body.get("creativeId"))
    if row_index is None or creative_id is None:
        return error_response(400, "'rowIndex' and 'id' are required")
    try:
        row_index = int(row_index)
        creative_id = int(creative_id)
    except (TypeError, ValueError):
        return error_response(400, "'rowIndex' and 'id' must be integers")

    try:
        patch = parse_patch(body)
    except ValueError as e:
        return error_response(400, str(e))

    try:
        updater = app.build_updater()
    except Exception as e:
        return error_response(500, f"Configuration error: {e}")

    try:
        asyncio.run(updater.update_creative(row_index, creative_id, patch))
    except ValueError as e:
        return error_response(400, str(e))
    except Exception as e:
        print(f"Update error: {e}", flush=True)
        return error_response(500, str(e))

    return json_response(200, {"status": "ok"})
