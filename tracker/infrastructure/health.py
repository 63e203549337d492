# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tracker.infrastructure.db import MongoStore


def check_database(store: MongoStore) -> bool:
    store.ping()
    return True


__all__ = ["check_database"]
