import httpx

from northwind.database.table_store import RecordNotFoundError
from northwind.error_handler import ErrorHandler


def test_record_not_found_is_reported_as_not_found():
    eh = ErrorHandler()
    out = eh.handle_exception(RecordNotFoundError("Employees", 42), context={"id": 42})

    assert out["fallback"] is True
    assert out["not_found"] is True
    assert out["metadata"]["table"] == "Employees"
    assert out["metadata"]["context"] == {"id": 42}


def test_remote_404_is_reported_as_not_found():
    request = httpx.Request("GET", "https://northwind.test/svc/Products(999)")
    response = httpx.Response(404, request=request)
    exc = httpx.HTTPStatusError("not found", request=request, response=response)

    out = ErrorHandler().handle_exception(exc)

    assert out["not_found"] is True


def test_other_failures_are_source_unavailable():
    out = ErrorHandler().handle_exception(httpx.ConnectError("boom"))

    assert out["fallback"] is True
    assert out["not_found"] is False
    assert "unavailable" in out["message"].lower()
    assert "boom" in out["metadata"]["error"]
