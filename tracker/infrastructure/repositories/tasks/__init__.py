from .mongo_task_repository import MongoTaskRepository, toggle_pipeline

__all__ = ["MongoTaskRepository", "toggle_pipeline"]
