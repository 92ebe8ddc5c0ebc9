"""AWS Lambda handler serving field options for the editing UI."""

from .. import app
from ..api.serializers import serialize_options
from .http import error_response, json_response


def handler(event, context):
    try:
        revision = app.load_revision()
    except ValueError as e:
        return error_response(500, f"Configuration error: {e}")
    return json_response(200, serialize_options(revision))
