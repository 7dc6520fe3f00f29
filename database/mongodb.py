# mongodb.py
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.server_api import ServerApi
from config import Config
import logging

logger = logging.getLogger(__name__)


class MongoDB:
    _instance = None

    def __init__(self, uri=None, db_name=None):
        if MongoDB._instance is not None:
            raise Exception("This class is a singleton!")
        self.uri = uri or Config.MONGO_URI
        self.db_name = db_name or Config.MONGO_DB_NAME
        self.client = None
        self.db = None
        MongoDB._instance = self

    @staticmethod
    def get_instance():
        if MongoDB._instance is None:
            MongoDB()
        return MongoDB._instance

    def connect(self):
        """Open the client on first use; MongoDB Atlas SRV strings are supported."""
        if self.db is not None:
            return self.db
        if not self.uri:
            raise ValueError("MONGO_URI is not configured")

        self.client = MongoClient(
            self.uri,
            server_api=ServerApi('1'),
            retryWrites=True,
            w='majority'
        )

        # Test the connection
        try:
            self.client.admin.command('ping')
            logger.info("✅ Successfully connected to MongoDB!")
        except Exception as e:
            logger.error(f"❌ Connection failed: {e}")
            raise

        self.db = self.client[self.db_name]
        return self.db

    def get_database(self):
        return self.connect()

    def get_users_collection(self):
        return self.connect().users

    def get_tests_collection(self):
        return self.connect().psychometric_tests

    def init_database(self):
        """Create the indexes the assessment queries rely on"""
        try:
            db = self.connect()
            db.users.create_index("user_id", unique=True)
            db.users.create_index("email", unique=True)

            db.psychometric_tests.create_index("test_id", unique=True)
            db.psychometric_tests.create_index([("user_id", ASCENDING), ("status", ASCENDING)])
            db.psychometric_tests.create_index([("created_at", DESCENDING)])
            db.psychometric_tests.create_index([("completed_at", DESCENDING)])

            logger.info("✅ Database initialized with assessment indexes")

        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            raise


# Global instance (connects lazily)
mongo_db = MongoDB.get_instance()
