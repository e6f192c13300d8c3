"""Base repository with common CRUD operations."""
from typing import TypeVar, Generic, Type, Optional, List, Dict, Any, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import desc, asc, func

from studio.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations."""

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create new record.

        Args:
            obj_in: Dictionary with object data

        Returns:
            Created model instance
        """
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def get(self, id: int) -> Optional[ModelType]:
        """
        Get record by ID.

        Args:
            id: Record ID

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_multi(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
        filters: Optional[Dict[str, Any]] = None
    ) -> Tuple[List[ModelType], int]:
        """
        Get multiple records with pagination and filtering.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (None for all)
            order_by: Column name to order by (defaults to 'created_at')
            order_desc: Whether to order descending
            filters: Dictionary of column:value filters

        Returns:
            Tuple of (list of records, total count)
        """
        query = self.db.query(self.model)

        if filters:
            for column, value in filters.items():
                if hasattr(self.model, column):
                    query = query.filter(getattr(self.model, column) == value)

        total = query.count()

        if order_by and hasattr(self.model, order_by):
            order_column = getattr(self.model, order_by)
        elif hasattr(self.model, 'created_at'):
            order_column = self.model.created_at
        else:
            order_column = self.model.id

        # id breaks ties between rows created within the same clock tick
        if order_desc:
            query = query.order_by(desc(order_column), desc(self.model.id))
        else:
            query = query.order_by(asc(order_column), asc(self.model.id))

        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        return query.all(), total

    def update(self, id: int, obj_in: Dict[str, Any]) -> Optional[ModelType]:
        """
        Update record.

        Args:
            id: Record ID
            obj_in: Dictionary with fields to update

        Returns:
            Updated model instance or None if not found
        """
        db_obj = self.get(id)
        if not db_obj:
            return None

        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, id: int) -> bool:
        """
        Delete record.

        Args:
            id: Record ID

        Returns:
            True if successful, False if record not found
        """
        db_obj = self.get(id)
        if not db_obj:
            return False

        self.db.delete(db_obj)
        self.db.commit()
        return True

    def exists(self, id: int) -> bool:
        """
        Check if record exists.

        Args:
            id: Record ID

        Returns:
            True if record exists, False otherwise
        """
        query = self.db.query(self.model.id).filter(self.model.id == id)
        return self.db.query(query.exists()).scalar()

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count records.

        Args:
            filters: Dictionary of column:value filters

        Returns:
            Count of records
        """
        query = self.db.query(func.count(self.model.id))

        if filters:
            for column, value in filters.items():
                if hasattr(self.model, column):
                    query = query.filter(getattr(self.model, column) == value)

        return query.scalar() or 0
