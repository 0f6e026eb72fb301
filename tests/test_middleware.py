from fastapi import FastAPI
from fastapi.testclient import TestClient

from middleware import RequestLogger


broken_app = FastAPI()


@broken_app.get('/boom')
def boom():
    raise RuntimeError('database password is hunter2')


@broken_app.get('/fine')
def fine():
    return {'ok': True}


broken_app.add_middleware(RequestLogger)
client = TestClient(broken_app, raise_server_exceptions=False)


def test_unhandled_error_is_500():
    response = client.get('/boom')

    assert response.status_code == 500
    assert response.json() == {'title': 'An unexpected error occurred.', 'status': 500}
    assert 'hunter2' not in response.text


def test_passes_through():
    response = client.get('/fine')

    assert response.status_code == 200
    assert response.json() == {'ok': True}
