"""
Business layer shared by every entity.

:class:`EntityService` validates identifiers and payloads, runs the
descriptor's field checks and delegates to :class:`Repository`.  It adds
no computed behaviour of its own.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from clinic.exceptions import EntityNotFound, InvalidInput
from clinic.helpers import GenericHelpers
from .repository import Repository

logger = logging.getLogger(__name__)


class EntityService:
    def __init__(self, descriptor, *, repository: Optional[Repository] = None,
                 helpers: Optional[GenericHelpers] = None):
        self.descriptor = descriptor
        self.repository = repository or Repository(descriptor.model, select_related=descriptor.select_related)
        self.helpers = helpers or GenericHelpers()

    @property
    def label(self) -> str:
        return self.descriptor.label

    def _check_id(self, pk: Any) -> int:
        if isinstance(pk, bool) or not isinstance(pk, int) or pk <= 0:
            logger.warning('%s: rejected id %r', self.label, pk)
            raise InvalidInput({'id': f'invalid {self.label} id: {pk}'})
        return pk

    def _run_field_checks(self, data: dict) -> None:
        checks = self.descriptor.field_checks
        if not checks:
            return
        errors = checks(self.helpers, data)
        if errors:
            logger.warning('%s: field checks failed: %s', self.label, errors)
            raise InvalidInput(errors)

    # -- generic CRUD -------------------------------------------------------

    def list(self, *, active: Optional[bool] = None, page: Optional[int] = None,
             page_size: Optional[int] = None) -> tuple[list, int]:
        qs = self.repository.all(active=active)
        total = qs.count()
        if page and page_size:
            start = (page - 1) * page_size
            qs = qs[start:start + page_size]
        return list(qs), total

    def retrieve(self, pk: int):
        return self.repository.get_by_id(self._check_id(pk))

    def create(self, data: dict):
        self._run_field_checks(data)
        obj = self.repository.create(**data)
        logger.info('%s %s created', self.label, obj.pk)
        return obj

    def update(self, pk: int, data: dict):
        self._check_id(pk)
        self._run_field_checks(data)
        obj = self.repository.update(pk, data)
        logger.info('%s %s updated', self.label, pk)
        return obj

    def delete(self, pk: int) -> None:
        self._check_id(pk)
        if not self.repository.delete(pk):
            raise EntityNotFound(self.label, pk)
        logger.info('%s %s deleted', self.label, pk)

    # -- entity specific operations -----------------------------------------

    def update_partial(self, data: Optional[dict]) -> bool:
        """Apply the provided fields to an existing row.

        Returns ``False`` when the id does not exist.
        """
        if not data:
            raise InvalidInput({'id': f'invalid {self.label} id: None'})
        pk = self._check_id(data.get('id'))
        changes = {k: v for k, v in data.items() if k != 'id'}
        self._run_field_checks(changes)
        ok = self.repository.update_partial(pk, changes)
        if ok:
            logger.info('%s %s partially updated (%s)', self.label, pk, ', '.join(sorted(changes)) or '-')
        else:
            logger.warning('%s %s not found for partial update', self.label, pk)
        return ok

    def delete_logic(self, data: Optional[dict]) -> bool:
        """Set the active flag of an existing row.

        A missing row raises :class:`EntityNotFound` before the status write.
        """
        if not data:
            raise InvalidInput({'id': f'invalid {self.label} id: None'})
        pk = self._check_id(data.get('id'))
        status = bool(data.get('status'))
        self.repository.get_by_id(pk)
        ok = self.repository.set_active(pk, status)
        if ok:
            logger.info('%s %s status set to %s', self.label, pk, status)
        return ok
