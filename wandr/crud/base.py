import logging
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from sqlalchemy import func, insert, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wandr.core.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)

# First key of the two-key advisory lock taken per user while awarding badges
AWARD_LOCK_NAMESPACE = 0x5741


def lock_user_awards(db: Session, user_id: int) -> None:
    """
    Serialize badge evaluation for one user until the transaction ends.

    On PostgreSQL this takes a transaction-scoped advisory lock, so a second
    request for the same user waits and then counts the first one's committed
    visit. SQLite already allows a single writer at a time.
    """
    if db.get_bind().dialect.name != "postgresql":
        return
    db.execute(select(func.pg_advisory_xact_lock(AWARD_LOCK_NAMESPACE, user_id)))


def insert_ignoring_conflicts(db: Session, model: Type[Base], values: Dict[str, Any]) -> bool:
    """
    Insert one row unless it collides with a unique constraint.

    The check and the insert are a single statement, so concurrent callers
    racing on the same key end with exactly one row. Returns True when this
    call inserted the row, False when it already existed.
    """
    dialect = db.get_bind().dialect.name

    if dialect == "postgresql":
        stmt = postgresql_insert(model.__table__).values(**values).on_conflict_do_nothing()
    elif dialect == "sqlite":
        stmt = sqlite_insert(model.__table__).values(**values).on_conflict_do_nothing()
    else:
        try:
            with db.begin_nested():
                db.execute(insert(model.__table__).values(**values))
        except IntegrityError:
            logger.debug(f"{model.__name__} already exists for {values}")
            return False
        return True

    result = db.execute(stmt)
    return result.rowcount == 1


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create and Read.

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        obj_in_data = jsonable_encoder(obj_in)
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
