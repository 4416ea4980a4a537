"""Store Data Provider Protocol - 외부 스토어 데이터 제공자 인터페이스

스크래핑/페이지네이션/요청 제한 처리는 전부 제공자 구현(외부 라이브러리)의 몫이다.
이 서비스는 검증된 파라미터를 넘기고 결과를 그대로 돌려받는다.
"""

from typing import Any, Mapping, Optional, Protocol, Union

Number = Union[int, float]


class StoreDataProvider(Protocol):
    """스토어 데이터 제공자 프로토콜

    조회 작업은 모두 async이며 실패 시 예외를 그대로 전파한다 (재시도 없음).
    어휘(vocabulary) 조회는 동기이며 프로세스 수명 동안 변하지 않는다.
    """

    name: str

    async def search(
        self,
        term: str,
        *,
        num: Optional[Number] = None,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        full_detail: Optional[bool] = None,
        price: Optional[str] = None,
    ) -> Any:
        ...

    async def app(self, app_id: str, *, country: Optional[str] = None, lang: Optional[str] = None) -> Any:
        ...

    async def developer(
        self,
        dev_id: str,
        *,
        num: Optional[Number] = None,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        full_detail: Optional[bool] = None,
    ) -> Any:
        ...

    async def list_apps(
        self,
        *,
        collection: Any,
        category: Any = None,
        num: Optional[Number] = None,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        full_detail: Optional[bool] = None,
    ) -> Any:
        ...

    async def reviews(
        self,
        app_id: str,
        *,
        sort: Any = None,
        num: Optional[Number] = None,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        paginate: Optional[bool] = None,
        next_pagination_token: Optional[str] = None,
    ) -> Any:
        ...

    async def similar(
        self,
        app_id: str,
        *,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        full_detail: Optional[bool] = None,
    ) -> Any:
        ...

    async def permissions(self, app_id: str, *, lang: Optional[str] = None, short: Optional[bool] = None) -> Any:
        ...

    async def data_safety(self, app_id: str, *, lang: Optional[str] = None) -> Any:
        ...

    async def suggest(self, term: str, *, country: Optional[str] = None, lang: Optional[str] = None) -> Any:
        ...

    def collections(self) -> Mapping[str, Any]:
        ...

    def categories(self) -> Mapping[str, Any]:
        ...

    def sort_options(self) -> Mapping[str, Any]:
        ...
