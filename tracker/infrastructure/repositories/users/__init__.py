from .mongo_user_repository import MongoUserRepository

__all__ = ["MongoUserRepository"]
