"""JSON shaping for the HTTP handlers (camelCase on the wire)."""

from ..models import BatchResult, Classification, FileResult
from ..models.options import OPTIONS
from ..models.schema import SchemaRevision

# wire name -> logical field name
FIELD_NAMES: dict[str, str] = {
    "type": "type",
    "hypothesisName": "hypothesis_name",
    "aiFlag": "ai_flag",
    "style": "style",
    "mainTone": "main_tone",
    "mainObject": "main_object",
    "headerText": "header_text",
    "uvp": "uvp",
    "product": "product",
    "offer": "offer",
}


def serialize_classification(c: Classification) -> dict:
    fields = c.to_fields()
    return {wire: fields[name] for wire, name in FIELD_NAMES.items()}


def serialize_result(result: FileResult) -> dict:
    creative = result.creative
    data = {
        "name": result.name,
        "id": creative.id,
        "rowIndex": creative.row_index,
        "linkTag": creative.link_tag,
        "previewUrl": creative.preview_url,
        "data": serialize_classification(creative.classification),
    }
    if result.title_id is not None:
        data["titleId"] = result.title_id
    return data


def serialize_batch(batch: BatchResult) -> dict:
    """{"status": "ok", "results", "warnings"?} or {"status": "error", "error"}."""
    if not batch.ok:
        return {"status": "error", "error": batch.error}
    body = {
        "status": "ok",
        "results": [serialize_result(r) for r in batch.results],
    }
    if batch.warnings:
        body["warnings"] = batch.warnings
    return body


# Names sent by the first editing UI
FIELD_ALIASES: dict[str, str] = {
    "nameOfHypothesis": "hypothesisName",
    "mainTon": "mainTone",
}

# Edit request keys that address the row rather than a field
ROW_KEYS = {"rowIndex", "id", "creativeId"}


def parse_patch(body: dict) -> dict[str, str]:
    """Pick the changed classification fields out of an edit request body.

    Raises ValueError naming any key that is neither a field nor a row key.
    """
    unknown = sorted(k for k in body if k not in ROW_KEYS and k not in FIELD_NAMES and k not in FIELD_ALIASES)
    if unknown:
        raise ValueError(f"Unknown fields: {', '.join(unknown)}")

    patch = {}
    for key, value in body.items():
        if key in ROW_KEYS or value is None:
            continue
        patch[FIELD_NAMES[FIELD_ALIASES.get(key, key)]] = str(value)
    return patch


def serialize_options(revision: SchemaRevision) -> dict:
    """Field options for the editing UI, limited to fields the sheet layout has."""
    fields = set(revision.creative.fields)
    editable = [wire for wire, name in FIELD_NAMES.items() if name in fields]
    return {
        "revision": revision.name,
        "fields": editable,
        "options": {k: v for k, v in OPTIONS.items() if k in editable},
        "hasTitleSheet": revision.title is not None,
    }
