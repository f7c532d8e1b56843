import json

import httpx
import pytest

from northwind.database.downloader import download_database, download_table
from northwind.database.table_store import TableStore

BASE_URL = "https://northwind.test/svc"


def _paged_service(requests):
    pages = {
        "/svc/Employees": {"value": [{"EmployeeID": 1}, {"EmployeeID": 2}], "@odata.nextLink": "Employees?$skiptoken=2"},
        "/svc/Orders": {"value": [{"OrderID": 10248, "EmployeeID": 2}]},
        "/svc/Customers": {"value": []},
    }

    def handler(request):
        requests.append(request)
        if request.url.params.get("$skiptoken") == "2":
            return httpx.Response(200, json={"value": [{"EmployeeID": 3}]})
        return httpx.Response(200, json=pages[request.url.path])

    return handler


@pytest.mark.asyncio
async def test_download_table_follows_next_links():
    requests = []
    async with httpx.AsyncClient(transport=httpx.MockTransport(_paged_service(requests))) as http:
        rows = await download_table(http, BASE_URL, "Employees")

    assert [r["EmployeeID"] for r in rows] == [1, 2, 3]
    assert len(requests) == 2
    assert str(requests[1].url).startswith("https://northwind.test/svc/Employees?")


@pytest.mark.asyncio
async def test_download_table_respects_max_pages():
    requests = []
    async with httpx.AsyncClient(transport=httpx.MockTransport(_paged_service(requests))) as http:
        rows = await download_table(http, BASE_URL, "Employees", max_pages=1)

    assert len(rows) == 2
    assert len(requests) == 1


@pytest.mark.asyncio
async def test_download_database_writes_store_readable_files(tmp_path):
    requests = []
    async with httpx.AsyncClient(transport=httpx.MockTransport(_paged_service(requests))) as http:
        summary = await download_database(BASE_URL, tmp_path, client=http)

    assert summary == {"Employees": 3, "Orders": 1, "Customers": 0}
    body = json.loads((tmp_path / "Employees.json").read_text(encoding="utf-8"))
    assert list(body) == ["Employees"]

    store = TableStore(tmp_path)
    assert store.get_table("Employees", "EmployeeID").item(3) == {"EmployeeID": 3}
    assert len(store.get_table("Customers", "CustomerID")) == 0


@pytest.mark.asyncio
async def test_download_error_propagates(tmp_path):
    def handler(request):
        return httpx.Response(500)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(httpx.HTTPStatusError):
            await download_database(BASE_URL, tmp_path, tables=["Employees"], client=http)

    assert not (tmp_path / "Employees.json").exists()
