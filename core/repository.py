"""Repository pattern base class for database operations.

`BaseRepository` carries the CRUD contract shared by every entity with an
integer ``id`` primary key. Entity-specific queries live in subclasses in
`database.repositories`.
"""

from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from database.models import Base

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    model: Type[T]

    def __init__(self, session: Session, model: Optional[Type[T]] = None):
        """Initialize repository with a session.

        Args:
            session: Database session.
            model: SQLAlchemy model class. Subclasses set it as a class
                attribute instead.
        """
        if model is not None:
            self.model = model
        self.session = session

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None if absent."""
        return self.session.get(self.model, id)

    def get_all(self) -> List[T]:
        """Retrieve every row in store order."""
        return self.session.query(self.model).all()

    def save(self, obj: T) -> T:
        """Insert a new object or flush changes to a loaded one.

        Adds, commits and refreshes, so the returned object carries any
        store-assigned values such as the generated id.
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete_by_id(self, id: Any) -> bool:
        """Delete an object by its primary key.

        Returns:
            True if a row was deleted, False if none matched.
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.session.delete(obj)
        self.session.commit()
        return True

    def count(self) -> int:
        """Count total number of rows."""
        return self.session.query(self.model).count()
