"""
Category Remote Client

Calls the Category endpoints of the provider service.
"""

from typing import Optional

from scaffold.common.errors import RemoteCallError, ValidationError
from scaffold.common.http_client import HttpClient
from scaffold.config import get_settings
from scaffold.domain.category import Category
from scaffold.domain.page import PageBean, PageVO
from scaffold.registry import ServiceRegistryClient
from scaffold.remote.client import RemoteClient


class CategoryClient(RemoteClient):
    """
    Category Remote Client

    Reads fall back to empty results when the provider is unavailable; writes
    have no fallback and raise.
    """

    prefix = "/api/categories"

    def __init__(
        self,
        base_url: Optional[str] = None,
        registry: Optional[ServiceRegistryClient] = None,
        http_client: Optional[HttpClient] = None,
    ):
        settings = get_settings()
        super().__init__(
            service_name=settings.PROVIDER_SERVICE_NAME,
            base_url=base_url or settings.PROVIDER_SERVICE_URL,
            registry=registry,
            http_client=http_client,
        )

    async def find_by_id(self, id: int) -> Optional[Category]:
        """Get Category by ID, None when missing or unavailable"""
        try:
            data = await self.call("GET", f"{self.prefix}/{id}", fallback=lambda: None)
        except RemoteCallError as e:
            if e.status_code == 404:
                return None
            raise
        return Category.model_validate(data) if data is not None else None

    async def find_all(self) -> list[Category]:
        data = await self.call("GET", self.prefix, fallback=list)
        return [Category.model_validate(item) for item in data]

    async def find_by_condition(
        self,
        page_vo: Optional[PageVO] = None,
        condition: Optional[Category] = None,
    ) -> PageBean[Category]:
        """
        Conditional query with pagination

        Returns:
            PageBean[Category]: Requested page, empty when the provider is unavailable
        """
        page_vo = page_vo or PageVO()
        params: dict[str, int | str] = {
            "page_number": page_vo.page_number,
            "page_size": page_vo.page_size,
        }
        if condition is not None:
            if condition.name:
                params["name"] = condition.name
            if condition.status is not None:
                params["status"] = condition.status

        data = await self.call(
            "GET",
            f"{self.prefix}/page",
            params=params,
            fallback=lambda: {
                "page_number": page_vo.page_number,
                "page_size": page_vo.page_size,
            },
        )
        return PageBean[Category].model_validate(data)

    async def count(self) -> int:
        data = await self.call("GET", f"{self.prefix}/count", fallback=lambda: {"count": 0})
        return int(data["count"])

    async def save(self, entity: Category) -> Category:
        data = await self.call(
            "POST", self.prefix, json=entity.model_dump(mode="json", exclude_none=True)
        )
        return Category.model_validate(data)

    async def update(self, entity: Category) -> Category:
        """
        Replace a Category

        Raises:
            ValidationError: entity has no ID
        """
        if entity.id is None:
            raise ValidationError(message="Category id is required for update")
        data = await self.call(
            "PUT",
            f"{self.prefix}/{entity.id}",
            json=entity.model_dump(mode="json", exclude_none=True),
        )
        return Category.model_validate(data)

    async def delete_by_id(self, id: int) -> None:
        await self.call("DELETE", f"{self.prefix}/{id}")
