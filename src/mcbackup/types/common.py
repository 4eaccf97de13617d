"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

BackupMode: TypeAlias = Literal["folder", "mcworld"]
CacheState: TypeAlias = Literal["fresh", "expired", "missing", "corrupt"]
CatalogSource: TypeAlias = Literal["device", "cache"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
