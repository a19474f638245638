from eventhub.stores.interfaces import RecordStore, UniquenessViolation
from eventhub.stores.sqlalchemy_store import SQLAlchemyRecordStore

__all__ = ["RecordStore", "UniquenessViolation", "SQLAlchemyRecordStore"]
