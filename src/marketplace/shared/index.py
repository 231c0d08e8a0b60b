"""Helpers shared by the per-owner secondary indices.

An index record keeps its ids as a JSON array in the ``entries`` field,
oldest first.
"""

import json


def read_ids(record) -> list[int]:
    return json.loads(record.entries) if record.entries else []


def append_id(record, position: int) -> None:
    ids = read_ids(record)
    if position in ids:
        return
    ids.append(position)
    record.entries = json.dumps(ids)
