"""Output rendering for mcbackup."""

from .json_output import catalog_payload, render_catalog_json
from .stdout import format_age, render_backup_report, render_cache_clear, render_catalog

__all__ = [
    "catalog_payload",
    "format_age",
    "render_backup_report",
    "render_cache_clear",
    "render_catalog",
    "render_catalog_json",
]
