from typing import List, Type

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from devicehub.db import get_db
from devicehub.models.schemas import MessageOut
from devicehub.services.repository import EntityRepository

ERROR_RESPONSES = {
    404: {"model": MessageOut},
    409: {"model": MessageOut},
    422: {"model": MessageOut},
}


def build_crud_router(
    repository: EntityRepository,
    create_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    prefix: str,
    tag: str,
) -> APIRouter:
    """list / get / create / update / delete for one entity under ``prefix``."""
    router = APIRouter(prefix=prefix, tags=[tag], responses=ERROR_RESPONSES)

    @router.get("", response_model=List[out_schema])
    def list_records(db: Session = Depends(get_db)):
        return repository.list(db)

    @router.get("/{record_id}", response_model=out_schema)
    def get_record(record_id: int, db: Session = Depends(get_db)):
        return repository.get(db, record_id)

    @router.post("", response_model=out_schema, status_code=status.HTTP_201_CREATED)
    def create_record(payload: create_schema, db: Session = Depends(get_db)):
        return repository.create(db, payload)

    @router.put("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def update_record(record_id: int, payload: create_schema, db: Session = Depends(get_db)):
        repository.update(db, record_id, payload)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_record(record_id: int, db: Session = Depends(get_db)):
        repository.delete(db, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
