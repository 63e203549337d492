# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .client import TASKS_COLLECTION, USERS_COLLECTION, MongoStore, store_errors

__all__ = ["MongoStore", "TASKS_COLLECTION", "USERS_COLLECTION", "store_errors"]
