"""Row helpers shared by the JSON repositories."""

from __future__ import annotations


def next_string_id(rows: list[dict]) -> str:
    if not rows:
        return "1"
    return str(max(int(row["id"]) for row in rows) + 1)


def upsert(rows: list[dict], record: dict) -> None:
    """Replace the row with the same id, otherwise append."""
    for i, row in enumerate(rows):
        if row["id"] == record["id"]:
            rows[i] = record
            return
    rows.append(record)
