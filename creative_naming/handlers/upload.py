"""AWS Lambda handler for creative uploads."""

import asyncio
import base64
import binascii

from .. import app, config
from ..api.serializers import serialize_batch
from ..models import UploadFile
from ..services import UploadValidationError
from .http import error_response, json_response, parse_body


def parse_files(body: dict) -> list[UploadFile]:
    """Decode {"files": [{"name", "mimeType", "data" (base64)}]}."""
    raw_files = body.get("files")
    if not isinstance(raw_files, list):
        raise ValueError("'files' must be a list")

    files = []
    for i, item in enumerate(raw_files, start=1):
        if not isinstance(item, dict) or not item.get("data"):
            raise ValueError(f"File {i} has no data")
        try:
            data = base64.b64decode(item["data"], validate=True)
        except binascii.Error:
            raise ValueError(f"File {i} data is not valid base64")
        files.append(UploadFile(
            name=item.get("name") or f"file_{i}",
            mime_type=item.get("mimeType") or "application/octet-stream",
            data=data,
        ))
    return files


def handler(event, context):
    """
    AWS Lambda handler - HTTP upload of 1-20 creatives.

    Input payload:
    {
        "files": [
            {"name": "banner.png", "mimeType": "image/png", "data": "<base64>"}
        ]
    }

    Output: one Creative row per file (and one Title row, depending on the
    sheet layout), with IDs assigned in input order.
    """
    config_errors = config.validate_config()
    if config_errors:
        print(f"Config errors: {config_errors}", flush=True)
        return error_response(500, f"Configuration error: {', '.join(config_errors)}")

    try:
        files = parse_files(parse_body(event))
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        return error_response(400, f"Failed to parse request: {e}")

    try:
        service = app.build_upload_service()
    except Exception as e:
        return error_response(500, f"Configuration error: {e}")

    try:
        print(f"Processing {len(files)} file(s)", flush=True)
        batch = asyncio.run(service.process(files))
    except UploadValidationError as e:
        return error_response(400, str(e))
    except Exception as e:
        print(f"ERROR: {e}", flush=True)
        return error_response(500, str(e))

    print(f"Written {len(batch.results)}/{len(files)} file(s)", flush=True)
    return json_response(200 if batch.ok else 500, serialize_batch(batch))


# Local testing
if __name__ == "__main__":
    import json
    import mimetypes
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python -m creative_naming.handlers.upload <file> [<file> ...]")
        sys.exit(1)

    payload = {"files": []}
    for path in map(Path, sys.argv[1:]):
        payload["files"].append({
            "name": path.name,
            "mimeType": mimetypes.guess_type(path.name)[0] or "application/octet-stream",
            "data": base64.b64encode(path.read_bytes()).decode("ascii"),
        })

    result = handler({"body": json.dumps(payload)}, None)
    print("\nResult:")
    print(json.dumps(json.loads(result["body"]), indent=2, ensure_ascii=False))
