"""JSON rendering of catalogs."""

from __future__ import annotations

import json

from mcbackup.constants.reporting import SCHEMA_VERSION
from mcbackup.model import Catalog
from mcbackup.types import JsonObject


def catalog_payload(catalog: Catalog) -> JsonObject:
    """Return the versioned JSON document for a catalog listing."""
    return {"schema_version": SCHEMA_VERSION, **catalog.to_dict()}


def render_catalog_json(catalog: Catalog) -> str:
    return json.dumps(catalog_payload(catalog), indent=2, sort_keys=True)
