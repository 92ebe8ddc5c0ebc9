"""Spreadsheet layout revisions registry."""

from typing import Callable

from ..models.schema import SchemaRevision

# name -> builder(creative_sheet, title_sheet)
_REVISIONS: dict[str, Callable[[str, str], SchemaRevision]] = {}


def register(name: str):
    """Decorator to register a revision builder."""
    def decorator(builder):
        _REVISIONS[name] = builder
        return builder
    return decorator


def get_revision(name: str, creative_sheet: str = "Creative", title_sheet: str = "Title") -> SchemaRevision:
    """Build the column maps of a revision for the given sheet names."""
    if name not in _REVISIONS:
        raise ValueError(f"Unknown schema revision: {name}")
    return _REVISIONS[name](creative_sheet, title_sheet)


def list_revisions() -> list[str]:
    """List all registered revisions."""
    return list(_REVISIONS.keys())


from . import basic, marketing  # noqa: E402,F401  (registers revisions)

__all__ = [
    "get_revision",
    "list_revisions",
    "register",
]
