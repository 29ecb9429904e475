"""Generic CRUD service with activity logging and visibility filtering."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Type, TypeVar

from flask import current_app
from flask_login import current_user
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tuskers.errors import InternalError, NotFound, ValidationError
from tuskers.extensions import db
from tuskers.services.audit import log_admin_action

Model = TypeVar("Model", bound=db.Model)

PROTECTED_FIELDS = ('id', 'created_at', 'updated_at')


class CRUDService(Generic[Model]):
    """Base CRUD service with common operations."""

    def __init__(
        self,
        model: Type[Model],
        visibility_flag: str | None = None,
        ordering: Iterable[Any] = (),
        label: str | None = None,
    ):
        """
        Initialize CRUD service.

        Args:
            model: SQLAlchemy model class
            visibility_flag: Boolean column that gates public reads
            ordering: order_by clauses applied to every list
            label: Human readable name used in error messages
        """
        self.model = model
        self.model_name = model.__tablename__
        self.visibility_flag = visibility_flag
        self.ordering = tuple(ordering)
        self.label = label or self.model_name.replace('_', ' ').rstrip('s').capitalize()

    def _query(self, include_hidden: bool):
        query = db.session.query(self.model)
        if self.visibility_flag and not include_hidden:
            query = query.filter(getattr(self.model, self.visibility_flag).is_(True))
        return query

    def list(self, include_hidden: bool = False, limit: int | None = None) -> list[Model]:
        """
        List records in display order.

        Args:
            include_hidden: Skip the visibility filter (admin reads)
            limit: Truncate the ordered list

        Returns:
            List of model instances
        """
        query = self._query(include_hidden)
        if self.ordering:
            query = query.order_by(*self.ordering)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get(self, object_id: int, include_hidden: bool = True) -> Model:
        """Get record by ID or raise NotFound."""
        instance = self._query(include_hidden).filter(self.model.id == object_id).first()
        if instance is None:
            raise NotFound(f"{self.label} not found")
        return instance

    def create(self, data: dict[str, Any]) -> Model:
        """
        Create a new record.

        Args:
            data: Dictionary of field values, already validated

        Returns:
            The created instance
        """
        instance = self.model(**self._clean(data))
        db.session.add(instance)
        self._commit('create')
        self._log('created', instance.id, data)
        return instance

    def update(self, object_id: int, data: dict[str, Any]) -> Model:
        """
        Update a record in place.

        Args:
            object_id: ID of object to update
            data: Dictionary of fields to update

        Returns:
            The updated instance
        """
        instance = self.get(object_id)
        for key, value in self._clean(data).items():
            setattr(instance, key, value)
        self._commit('update')
        self._log('updated', object_id, data)
        return instance

    def delete(self, object_id: int) -> None:
        """Delete a record or raise NotFound."""
        instance = self.get(object_id)
        db.session.delete(instance)
        self._commit('delete')
        self._log('deleted', object_id)

    def _clean(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            key: value for key, value in data.items()
            if key not in PROTECTED_FIELDS and hasattr(self.model, key)
        }

    def _commit(self, operation: str) -> None:
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ValidationError(self._handle_integrity_error(e)) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to {operation} {self.model_name}: {e}")
            raise InternalError(f"Failed to {operation} {self.label.lower()}") from e

    def _log(self, verb: str, object_id: int | None, data: dict[str, Any] | None = None) -> None:
        metadata = {'data': self._sanitize_log_data(data)} if data else None
        log_admin_action(
            current_user,
            f"{self.model_name}_{verb}",
            self.model_name,
            object_id,
            metadata=metadata,
        )

    def _handle_integrity_error(self, error: IntegrityError) -> str:
        """Convert database integrity errors to user-friendly messages."""
        error_msg = str(error)
        if 'unique' in error_msg.lower():
            return "A record with these values already exists"
        if 'foreign' in error_msg.lower():
            return "Referenced record does not exist"
        return "Database constraint violation"

    def _sanitize_log_data(self, data: dict[str, Any] | None) -> dict[str, Any]:
        """Remove sensitive and bulky fields from log data."""
        sensitive_fields = {'password', 'password_hash', 'secret', 'token', 'content', 'text'}
        return {k: v for k, v in (data or {}).items() if k not in sensitive_fields}


__all__ = ['CRUDService']
