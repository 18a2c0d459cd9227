# app/core/named_queries.py

"""
엔티티 클래스에 미리 선언되는 이름 있는 쿼리(named query) 레지스트리입니다.

쿼리 이름은 '<모델 클래스명>.<쿼리명>' 형식을 따릅니다 (예: "Department.findAll").
CRUDBase.read_all()은 '<모델 클래스명>.findAll' 쿼리가 등록되어 있다고 가정합니다.
"""

from typing import Callable, Dict, Type, TypeVar

from sqlmodel.sql.expression import Select, SelectOfScalar

ModelClass = TypeVar("ModelClass", bound=type)

QueryFactory = Callable[[], "Select | SelectOfScalar"]

_registry: Dict[str, QueryFactory] = {}


class NamedQueryNotFoundError(LookupError):
    """등록되지 않은 이름으로 쿼리를 조회했을 때 발생합니다."""

    def __init__(self, name: str):
        super().__init__(f"No named query registered as '{name}'")
        self.name = name


def register_named_query(name: str, factory: QueryFactory) -> None:
    """
    쿼리 팩토리를 이름으로 등록합니다.
    팩토리는 호출 시점에 select 문을 만들어 반환하므로 모델 클래스 정의 이전에 등록할 수 있습니다.
    """
    _registry[name] = factory


def named_query(name: str, factory: QueryFactory) -> Callable[[ModelClass], ModelClass]:
    """
    모델 클래스에 이름 있는 쿼리를 선언하는 클래스 데코레이터입니다.

    사용 예:
        @named_query("Department.findAll", lambda: select(Department))
        class Department(SQLModel, table=True): ...
    """
    def decorator(cls: ModelClass) -> ModelClass:
        register_named_query(name, factory)
        return cls
    return decorator


def get_named_query(name: str) -> "Select | SelectOfScalar":
    try:
        factory = _registry[name]
    except KeyError:
        raise NamedQueryNotFoundError(name) from None
    return factory()


def query_name_for(model: Type, query: str) -> str:
    return f"{model.__name__}.{query}"
