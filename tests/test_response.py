import json

from pagewise.core.response import page_response, status_for
from pagewise.core.result import LOAD_ERROR_MESSAGE, PaginationResult


def test_success_response():
    result = PaginationResult.start(1, 10, 50).counted(1).loaded([{"id": 1}])
    response = page_response(result)
    assert status_for(result) == 200
    assert response.status_code == 200
    assert response.media_type == "application/json"
    body = json.loads(response.body)
    assert body["success"] is True
    assert body["data"] == [{"id": 1}]
    assert "error" not in body


def test_failure_response():
    result = PaginationResult.start(1, 10, 50).counted(3).failed(LOAD_ERROR_MESSAGE)
    response = page_response(result)
    assert status_for(result) == 500
    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["success"] is False
    assert body["error"] == LOAD_ERROR_MESSAGE
    assert body["records"] == 3
