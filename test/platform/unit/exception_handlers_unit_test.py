from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest
from sqlalchemy.exc import OperationalError

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)


pytestmark = pytest.mark.unit


class _Body(BaseModel):
    name: str


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/domain')
    async def domain():
        raise DomainError('bad input')

    @app.get('/forbidden')
    async def forbidden():
        raise ForbiddenError('no entry')

    @app.get('/missing')
    async def missing():
        raise NotFoundError('gone')

    @app.get('/conflict')
    async def conflict():
        raise ConflictError('taken')

    @app.get('/storage')
    async def storage():
        raise OperationalError('SELECT 1', {}, Exception('disk I/O error at /var/lib/db'))

    @app.get('/boom')
    async def boom():
        raise RuntimeError('unexpected')

    @app.post('/body')
    async def body(payload: _Body):
        return payload

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    'path, status_code, detail',
    [
        ('/domain', 400, 'bad input'),
        ('/forbidden', 403, 'no entry'),
        ('/missing', 404, 'gone'),
        ('/conflict', 409, 'taken'),
    ],
)
def test_custom_errors_map_to_their_status(client, path, status_code, detail):
    response = client.get(path)

    assert response.status_code == status_code
    assert response.json() == {'detail': detail}


def test_storage_error_does_not_leak_driver_text(client):
    response = client.get('/storage')

    assert response.status_code == 500
    assert response.json() == {'detail': 'Database error'}


def test_unhandled_error_is_500(client):
    response = client.get('/boom')

    assert response.status_code == 500
    assert response.json() == {'detail': 'Internal server error'}


def test_request_validation_is_400_with_field_list(client):
    response = client.post('/body', json={})

    assert response.status_code == 400
    assert response.json()['detail'][0]['field'] == 'name'
