from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from tracker.application.use_cases.tasks import SAMPLE_ASSIGNMENTS
from tracker.infrastructure.db import MongoStore
from tracker.scripts import seed
from tracker.shared.errors import StoreError


def test_dry_run_prints_sample_set(capsys: pytest.CaptureFixture[str]) -> None:
    assert seed.main(["--dry-run"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [f"{title} - Course: {course}" for title, course in SAMPLE_ASSIGNMENTS]


def test_seed_database_resets_and_closes() -> None:
    collection = MagicMock()
    collection.count_documents.return_value = 5
    collection.insert_many.return_value.inserted_ids = [ObjectId() for _ in SAMPLE_ASSIGNMENTS]
    collection.find.return_value.sort.return_value = [
        {
            "_id": ObjectId(),
            "title": title,
            "course": course,
            "createdBy": "admin",
            "createdAt": datetime.now(UTC),
        }
        for title, course in SAMPLE_ASSIGNMENTS
    ]
    store = MagicMock(spec=MongoStore)
    store.connect.return_value = True
    store.collection.return_value = collection

    inserted = seed.seed_database(store)

    assert inserted == len(SAMPLE_ASSIGNMENTS)
    collection.delete_many.assert_called_once_with({})
    documents = collection.insert_many.call_args.args[0]
    assert {doc["createdBy"] for doc in documents} == {"admin"}
    store.close.assert_called_once()


def test_seed_database_refuses_unreachable_store() -> None:
    store = MagicMock(spec=MongoStore)
    store.connect.return_value = False

    with pytest.raises(StoreError):
        seed.seed_database(store)
    store.collection.assert_not_called()
