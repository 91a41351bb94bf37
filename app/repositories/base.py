"""
SQLAlchemy-backed CRUD stores.

Every write commits on its own. A service that performs several writes for
one logical operation therefore leaves earlier writes in place when a later
one fails; nothing here opens a transaction spanning more than one call.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """create / get_all / get_by_id / update over a single model."""

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _check_fields(self, fields: Dict[str, Any]) -> None:
        columns = self.model.__table__.columns.keys()
        unknown = [name for name in fields if name not in columns or name == "id"]
        if unknown:
            raise ValueError(
                f"Unknown {self.model.__name__} field(s): {', '.join(sorted(unknown))}"
            )

    def _commit(self) -> None:
        """Commit, rolling back so the session stays usable when it fails."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def create(self, fields: Dict[str, Any]) -> ModelT:
        """Insert a record; id and created_at are assigned here."""
        self._check_fields(fields)
        obj = self.model(**fields)
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    def get_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def get_by_id(self, record_id: Optional[int]) -> Optional[ModelT]:
        if record_id is None:
            return None
        return self.db.get(self.model, record_id)

    def update(self, record_id: Optional[int], fields: Dict[str, Any]) -> Optional[ModelT]:
        """Merge fields onto an existing record. Returns None if the id is unknown."""
        self._check_fields(fields)
        obj = self.get_by_id(record_id)
        if obj is None:
            return None
        for name, value in fields.items():
            setattr(obj, name, value)
        self._commit()
        self.db.refresh(obj)
        return obj
