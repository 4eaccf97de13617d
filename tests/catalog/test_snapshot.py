"""Tests for the snapshot text codec."""

from __future__ import annotations

import pytest

from mcbackup.catalog import parse_snapshot, serialize_snapshot
from mcbackup.exceptions import CacheCorruptError
from mcbackup.model import CatalogEntry


def test_parse_accepts_crlf_and_missing_final_newline() -> None:
    entries = parse_snapshot("2\r\nabc\r\nSurvival\r\ndef\r\ndef")

    assert entries == (
        CatalogEntry(world_id="abc", display_name="Survival"),
        CatalogEntry(world_id="def", display_name="def"),
    )


def test_parse_blank_name_falls_back_to_id() -> None:
    assert parse_snapshot("1\nabc\n\n")[0].display_name == "abc"


def test_parse_rejects_fewer_pairs_than_declared() -> None:
    with pytest.raises(CacheCorruptError, match="declares 3"):
        parse_snapshot("3\na\nA\nb\n")


def test_serialize_flattens_embedded_newlines() -> None:
    text = serialize_snapshot([CatalogEntry(world_id="a", display_name="two\nlines")])

    assert text == "1\na\ntwo lines\n"
    assert parse_snapshot(text)[0].display_name == "two lines"
