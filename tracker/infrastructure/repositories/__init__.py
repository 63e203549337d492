from .tasks import MongoTaskRepository
from .users import MongoUserRepository

__all__ = ["MongoTaskRepository", "MongoUserRepository"]
