import httpx
import pytest

from northwind.dependencies import build_services
from northwind.utils.config_loader import LocalDataConfig, NorthwindConfig, ODataConfig


@pytest.mark.asyncio
async def test_build_services_wires_store_directory_and_domains(northwind_db):
    cfg = NorthwindConfig(
        data=LocalDataConfig(db_directory=str(northwind_db), email_domain="local.example"),
        odata=ODataConfig(service_url="https://northwind.test/svc/", order_email_domain="remote.example"),
    )
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(404)))

    async with build_services(cfg, http_client=http) as services:
        profile = services.employees.get_employee(1)
        assert profile.mail == "Nancy@local.example"
        assert services.catalog.base_url == "https://northwind.test/svc"
        assert services.catalog.order_email_domain == "remote.example"
        assert services.store.directory == northwind_db

    assert not http.is_closed
    await http.aclose()
