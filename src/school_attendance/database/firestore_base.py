from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Sequence, TypeVar

from google.cloud.firestore_v1.base_query import FieldFilter

from ..core.constants import MAX_BATCH_WRITES

T = TypeVar("T")


def where_equal(query, **fields: Any):
    """Chain equality filters: ``where_equal(col, role="student", studentClass="10A")``."""
    for field, value in fields.items():
        query = query.where(filter=FieldFilter(field, "==", value))
    return query


def snapshot_data(snapshot) -> Dict[str, Any]:
    data = snapshot.to_dict() if snapshot.exists else None
    return dict(data or {})


def chunked(items: Sequence[T], size: int = MAX_BATCH_WRITES) -> Iterator[Sequence[T]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def delete_documents(client, refs: Iterable) -> int:
    """Delete documents with batched writes.

    Each batch is atomic. Above the Firestore batch limit the deletes are split
    across several batches.
    """

    refs = list(refs)
    for part in chunked(refs):
        batch = client.batch()
        for ref in part:
            batch.delete(ref)
        batch.commit()
    return len(refs)
