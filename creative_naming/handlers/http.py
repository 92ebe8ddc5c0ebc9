"""Lambda HTTP event helpers."""

import base64
import json


def parse_body(event: dict) -> dict:
    """Decode the JSON body of an API Gateway / function URL event."""
    body = event.get("body") or "{}"
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def json_response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def error_response(status_code: int, message: str) -> dict:
    return json_response(status_code, {"status": "error", "error": message})
