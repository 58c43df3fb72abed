"""Forecast offices service."""

from dataclasses import dataclass

from weathergov.core.endpoint import HttpMethod
from weathergov.core.executor import RequestExecutor
from weathergov.models.office import HeadlineCollection, Office, OfficeCollection


@dataclass(frozen=True)
class OfficesEndpoint:
    method = HttpMethod.GET
    query_items = None
    path = "/offices"


@dataclass(frozen=True)
class OfficeEndpoint:
    office_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/offices/{self.office_id}"


@dataclass(frozen=True)
class OfficeHeadlinesEndpoint:
    office_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/offices/{self.office_id}/headlines"


class OfficesService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_all_offices(self) -> OfficeCollection:
        return await self.executor.execute(OfficesEndpoint(), OfficeCollection)

    async def get_office(self, office_id: str) -> Office:
        return await self.executor.execute(OfficeEndpoint(office_id), Office)

    async def get_office_headlines(self, office_id: str) -> HeadlineCollection:
        return await self.executor.execute(OfficeHeadlinesEndpoint(office_id), HeadlineCollection)
