from __future__ import annotations

from typing import Any, Iterable, Optional

from django.db import transaction

from clinic.exceptions import EntityNotFound

# Columns only the persistence layer may write
AUDIT_FIELDS = frozenset({'id', 'status', 'created_at', 'updated_at'})


class Repository:
    """ORM access for one entity model.

    ``get_by_id`` and ``update`` raise :class:`EntityNotFound` for a missing
    row while ``delete``, ``set_active`` and ``update_partial`` report it by
    returning ``False``.
    """

    def __init__(self, model, *, select_related: Iterable[str] = ()):
        self.model = model
        self.label = model.__name__
        self.select_related = tuple(select_related)

    def _qs(self):
        qs = self.model.objects.all()
        if self.select_related:
            qs = qs.select_related(*self.select_related)
        return qs

    def all(self, active: Optional[bool] = None):
        qs = self._qs()
        if active is not None:
            qs = qs.filter(status=active)
        return qs.order_by('id')

    def find(self, pk: int):
        return self._qs().filter(pk=pk).first()

    def get_by_id(self, pk: int):
        obj = self.find(pk)
        if obj is None:
            raise EntityNotFound(self.label, pk)
        return obj

    def create(self, **fields: Any):
        values = {k: v for k, v in fields.items() if k not in AUDIT_FIELDS}
        with transaction.atomic():
            return self.model.objects.create(status=True, **values)

    def update(self, pk: int, fields: dict[str, Any]):
        with transaction.atomic():
            obj = self.model.objects.filter(pk=pk).first()
            if obj is None:
                raise EntityNotFound(self.label, pk)
            for name, value in fields.items():
                if name not in AUDIT_FIELDS:
                    setattr(obj, name, value)
            obj.save()
        return obj

    def delete(self, pk: int) -> bool:
        with transaction.atomic():
            obj = self.model.objects.filter(pk=pk).first()
            if obj is None:
                return False
            obj.delete()
        return True

    def set_active(self, pk: int, status: bool) -> bool:
        with transaction.atomic():
            obj = self.model.objects.filter(pk=pk).first()
            if obj is None:
                return False
            obj.status = status
            obj.save(update_fields=['status'])
        return True

    def update_partial(self, pk: int, changes: dict[str, Any]) -> bool:
        """Copy the provided fields onto the stored row and save only those.

        An empty ``changes`` still touches ``updated_at``.
        """
        with transaction.atomic():
            obj = self.model.objects.filter(pk=pk).first()
            if obj is None:
                return False
            fields = [name for name in changes if name not in AUDIT_FIELDS]
            for name in fields:
                setattr(obj, name, changes[name])
            obj.save(update_fields=fields)
        return True
