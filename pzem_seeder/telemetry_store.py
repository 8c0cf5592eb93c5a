"""
MongoDB store for PZEM telemetry
Insert a generated series or clear the collection
"""
from typing import Iterable, Optional

import certifi
import pandas as pd
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from pzem_seeder import config
from pzem_seeder.exceptions import StorageError
from pzem_seeder.series_generator import TelemetryRecord


class PzemDataStore:
    """PZEM readings collection in MongoDB"""

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None,
                 collection_name: Optional[str] = None):
        """
        Connect to MongoDB and verify the server is reachable

        Args:
            uri: Connection string (defaults to MONGODB_URI)
            db_name: Database name (defaults to PZEM_DB_NAME)
            collection_name: Collection name (defaults to PZEM_COLLECTION)

        Raises:
            StorageError: If the server cannot be reached
        """
        self.uri = uri or config.MONGODB_URI
        self.db_name = db_name or config.DB_NAME
        self.collection_name = collection_name or config.COLLECTION_NAME

        options = {'serverSelectionTimeoutMS': 5000}
        # Atlas clusters need the certifi bundle on some CI runners
        if self.uri.startswith('mongodb+srv://'):
            options['tlsCAFile'] = certifi.where()

        print("🔌 Connecting to MongoDB...")
        self.client = None
        try:
            self.client = MongoClient(self.uri, **options)
            self.client.server_info()
        except PyMongoError as e:
            if self.client is not None:
                self.client.close()
            raise StorageError(f"Failed to connect to MongoDB: {e}") from e

        self.db = self.client[self.db_name]
        self.collection = self.db[self.collection_name]

        print(f"✅ Connected to MongoDB ({self.db_name}.{self.collection_name})")

    def collection_exists(self) -> bool:
        """Whether the readings collection has been created yet"""
        try:
            return self.collection_name in self.db.list_collection_names()
        except PyMongoError as e:
            raise StorageError(f"Failed to list collections: {e}") from e

    def insert_many(self, records: Iterable[TelemetryRecord]) -> int:
        """
        Insert generated readings

        Args:
            records: Readings in date order

        Returns:
            Number of documents inserted
        """
        documents = [record.to_document() for record in records]
        if not documents:
            print("⚠️  No records, nothing to insert")
            return 0

        print(f"📥 Inserting {len(documents)} records into {self.collection_name}...")
        try:
            result = self.collection.insert_many(documents)
        except PyMongoError as e:
            raise StorageError(f"Failed to insert records: {e}") from e

        inserted = len(result.inserted_ids)
        print(f"✅ Successfully inserted {inserted} records into {self.collection_name}")
        return inserted

    def delete_all(self) -> int:
        """
        Delete every reading in the collection

        Returns:
            Number of documents deleted (0 when the collection is empty)
        """
        try:
            if self.collection.count_documents({}) == 0:
                print("ℹ️  No records found to delete.")
                return 0
            result = self.collection.delete_many({})
        except PyMongoError as e:
            raise StorageError(f"Failed to delete records: {e}") from e

        print(f"🗑️  Successfully deleted {result.deleted_count} records from {self.collection_name}")
        return result.deleted_count

    def count(self) -> int:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            raise StorageError(f"Failed to count records: {e}") from e

    def get_records(self, limit: int = 100) -> pd.DataFrame:
        """Latest readings by date, newest first"""
        try:
            data = list(self.collection.find().sort('date', -1).limit(limit))
        except PyMongoError as e:
            raise StorageError(f"Failed to read records: {e}") from e

        if data:
            df = pd.DataFrame(data)
            df = df.drop('_id', axis=1, errors='ignore')
            return df
        return pd.DataFrame()

    def get_stats(self) -> dict:
        """Collection statistics"""
        stats = {'record_count': self.count()}

        try:
            first = self.collection.find_one(sort=[('date', 1)])
            latest = self.collection.find_one(sort=[('date', -1)])
        except PyMongoError as e:
            raise StorageError(f"Failed to read records: {e}") from e

        if first:
            stats['first_date'] = first.get('date')
        if latest:
            stats['latest_date'] = latest.get('date')
            stats['latest_energy'] = latest.get('energy')
            stats['latest_timestamp'] = latest.get('timestamp')

        return stats

    def close(self):
        """Close MongoDB connection"""
        self.client.close()
        print("✅ Disconnected from MongoDB")

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()
