from __future__ import annotations

from typing import ContextManager, Protocol


class UnitOfWorkPort(Protocol):
    def atomic(self) -> ContextManager[None]:
        """블록 안의 저장소 호출을 하나의 트랜잭션으로 묶습니다. 예외 시 전부 롤백."""
        ...
