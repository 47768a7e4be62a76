from __future__ import annotations

from typing import ContextManager

from common.ports.unit_of_work import UnitOfWorkPort
from django.db import transaction


class DjangoUnitOfWork(UnitOfWorkPort):
    def __init__(self, *, using: str | None = None):
        self._using = using

    def atomic(self) -> ContextManager[None]:
        return transaction.atomic(using=self._using)
