from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from devicehub.services.errors import (
    IntegrityViolation,
    NotFound,
    ReferentialIntegrityViolation,
    UniqueConstraintViolation,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
Payload = Union[BaseModel, Mapping[str, Any]]


class EntityRepository(Generic[ModelT]):
    def __init__(self, model: Type[ModelT], label: Optional[str] = None):
        self.model = model
        self.label = label or model.__name__
        self.table = model.__table__
        self.fields = [column.key for column in self.table.columns if not column.primary_key]

    def list(self, db: Session) -> List[ModelT]:
        return db.query(self.model).order_by(self.model.id).all()

    def list_by(self, db: Session, **criteria) -> List[ModelT]:
        return db.query(self.model).filter_by(**criteria).order_by(self.model.id).all()

    def get(self, db: Session, record_id: int) -> ModelT:
        record = db.query(self.model).filter(self.model.id == record_id).first()
        if record is None:
            raise NotFound(self.label, record_id)
        return record

    def create(self, db: Session, payload: Payload) -> ModelT:
        values = self._values(payload)
        self._check_references(db, values)
        self._check_unique(db, values)

        record = self.model(**values)
        db.add(record)
        self._commit(db, "create")
        db.refresh(record)
        logger.info("Created %s %s", self.label, record.id)
        return record

    def update(self, db: Session, record_id: int, payload: Payload) -> ModelT:
        """Replace every non-key attribute of the record with the payload's."""
        record = self.get(db, record_id)
        values = self._values(payload)
        self._check_references(db, values)
        self._check_unique(db, values, exclude_id=record_id)

        for key, value in values.items():
            setattr(record, key, value)
        self._commit(db, "update")
        db.refresh(record)
        logger.info("Updated %s %s", self.label, record_id)
        return record

    def delete(self, db: Session, record_id: int) -> None:
        record = self.get(db, record_id)
        dependents = self.dependents(db, record_id)
        if dependents:
            logger.warning("Refused to delete %s %s: referenced by %s", self.label, record_id, dependents)
            raise ReferentialIntegrityViolation(self.label, record_id, dependents)

        db.delete(record)
        try:
            db.commit()
        except IntegrityError as exc:
            # a dependent was inserted between the check and the delete
            db.rollback()
            logger.warning("Store refused to delete %s %s: %s", self.label, record_id, exc.orig)
            raise ReferentialIntegrityViolation(self.label, record_id, self.dependents(db, record_id)) from exc
        logger.info("Deleted %s %s", self.label, record_id)

    def dependents(self, db: Session, record_id: int) -> Dict[str, int]:
        """Count rows in other tables whose foreign keys point at this record."""
        counts: Dict[str, int] = {}
        for table in self.table.metadata.sorted_tables:
            for fk in table.foreign_keys:
                if fk.column.table is not self.table:
                    continue
                found = db.execute(
                    select(func.count()).select_from(table).where(fk.parent == record_id)
                ).scalar_one()
                if found:
                    counts[table.name] = counts.get(table.name, 0) + found
        return counts

    def _values(self, payload: Payload) -> Dict[str, Any]:
        raw = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
        return {field: raw.get(field) for field in self.fields}

    def _check_references(self, db: Session, values: Dict[str, Any]) -> None:
        for fk in self.table.foreign_keys:
            value = values.get(fk.parent.key)
            if value is None:
                continue
            exists = db.execute(select(fk.column).where(fk.column == value)).first()
            if exists is None:
                logger.warning("Rejected %s: %s=%s does not exist", self.label, fk.parent.key, value)
                raise ValidationFailure(self.label, fk.parent.key, value)

    def _check_unique(self, db: Session, values: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        for column in self.table.columns:
            if not column.unique or column.primary_key:
                continue
            value = values.get(column.key)
            if value is None:
                continue
            query = db.query(self.model.id).filter(column == value)
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            if query.first() is not None:
                logger.warning("Rejected %s: %s=%s already taken", self.label, column.key, value)
                raise UniqueConstraintViolation(self.label, column.key, value)

    def _commit(self, db: Session, action: str) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("Store rejected %s %s: %s", self.label, action, exc.orig)
            raise IntegrityViolation(
                f"{self.label} {action} rejected by the store",
                {"entity": self.label, "action": action},
            ) from exc
