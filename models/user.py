# models/user.py
from datetime import datetime, timezone
from database.mongodb import mongo_db


class User:
    def __init__(self, user_data):
        self.user_id = user_data.get('user_id')
        self.name = user_data.get('name')
        self.email = user_data.get('email')
        self.role = user_data.get('role', 'student')
        self.created_at = user_data.get('created_at', datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'created_at': self.created_at
        }

    def to_public_dict(self):
        data = self.to_dict()
        data['created_at'] = self.created_at.isoformat() if self.created_at else None
        return data

    @classmethod
    def create_user(cls, user_data, collection=None):
        """Create new user in database"""
        users_collection = collection if collection is not None else mongo_db.get_users_collection()

        user = cls(user_data)
        users_collection.insert_one(user.to_dict())

        return user

    @classmethod
    def get_user(cls, user_id, collection=None):
        """Get user by user_id"""
        users_collection = collection if collection is not None else mongo_db.get_users_collection()
        user_data = users_collection.find_one({"user_id": user_id})

        if user_data:
            return cls(user_data)
        return None

    @classmethod
    def find_by_email(cls, email, collection=None):
        users_collection = collection if collection is not None else mongo_db.get_users_collection()
        user_data = users_collection.find_one({"email": email})
        return cls(user_data) if user_data else None
