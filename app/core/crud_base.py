# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

모든 메서드는 요청 범위의 AsyncSession(영속성 컨텍스트) 위에서 동작하며,
커밋하지 않고 flush만 수행합니다. 트랜잭션 경계(commit/rollback)는
세션을 제공하는 쪽(app.core.database.get_session)이 관리합니다.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.named_queries import get_named_query, query_name_for

ModelType = TypeVar("ModelType", bound=SQLModel)


class CRUDBase(Generic[ModelType]):
    """
    엔티티 타입으로 매개변수화된 범용 DAO 클래스입니다.
    모델 클래스는 '<모델 클래스명>.findAll' 이름 있는 쿼리를 선언해야 합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def create(self, db: AsyncSession, *, obj: ModelType) -> None:
        """
        새로운 레코드를 추가합니다.
        같은 트랜잭션 안의 이후 조회에서 바로 보이도록 flush 합니다.
        (식별자 중복은 여기서 검사하지 않으며, 저장소의 무결성 오류가 그대로 전파됩니다)
        """
        db.add(obj)
        await db.flush()

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다. 없으면 None을 반환합니다.
        """
        return await db.get(self.model, id)

    async def update(self, db: AsyncSession, *, obj: ModelType) -> ModelType:
        """
        변경된 엔티티를 영속성 컨텍스트에 병합(merge)합니다.
        존재 여부는 검사하지 않으므로 호출하는 쪽에서 먼저 확인해야 합니다.
        """
        merged = await db.merge(obj)
        await db.flush()
        return merged

    async def delete(self, db: AsyncSession, *, obj: ModelType) -> None:
        """
        주어진 레코드를 삭제합니다. 엔티티는 현재 세션에 연결(persistent)되어 있어야 합니다.
        """
        await db.delete(obj)
        await db.flush()

    async def read_all(self, db: AsyncSession) -> List[ModelType]:
        """
        '<모델 클래스명>.findAll' 이름 있는 쿼리로 모든 레코드를 조회합니다.
        정렬 순서는 저장소가 반환하는 순서를 따릅니다.
        """
        query = get_named_query(query_name_for(self.model, "findAll"))
        result = await db.exec(query)
        return list(result.all())
