from datetime import datetime
from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError

from string_analyzer.models.string_record import StringRecordRow
from string_analyzer.schemas.string_record import StringProperties, StringRecord

logger = logging.getLogger(__name__)


class StringRecordStore:
    """Records keyed by the SHA-256 of their value, backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def insert_if_absent(
        self,
        string_id: str,
        value: str,
        properties: StringProperties,
        created_at: datetime,
    ) -> bool:
        """Insert a record; False if the id is already stored.

        The primary key makes the check and the insert one atomic step.
        """
        row = StringRecordRow(
            id=string_id,
            value=value,
            properties=properties.model_dump(),
            created_at=created_at,
        )
        self.db.add(row)
        try:
            self.db.commit()
        except (IntegrityError, FlushError):
            self.db.rollback()
            logger.info(f"Duplicate string rejected: {string_id}")
            return False
        logger.info(f"Stored string {string_id}")
        return True

    def get(self, string_id: str) -> Optional[StringRecord]:
        row = self.db.get(StringRecordRow, string_id)
        if row is None:
            return None
        return StringRecord.model_validate(row)

    def delete(self, string_id: str) -> bool:
        row = self.db.get(StringRecordRow, string_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        logger.info(f"Deleted string {string_id}")
        return True

    def scan(self) -> List[StringRecord]:
        """All stored records, in no particular order"""
        return [StringRecord.model_validate(row) for row in self.db.query(StringRecordRow).all()]
