import uuid

from fastapi import FastAPI
from fastapi.testclient import TestClient

from greeting_endpoint.config import http_audit


def test_extract_uses_header_value():
    assert http_audit.extract_request_id_from({http_audit.X_REQUEST_ID: 'given'}.get) == 'given'


def test_extract_generates_uuid_when_missing():
    rid = http_audit.extract_request_id_from(lambda _: None)

    assert uuid.UUID(rid)


def test_middleware_binds_request_id_during_request_only():
    # given
    app = FastAPI()
    app.add_middleware(http_audit.RequestIdMiddleware)

    @app.get('/rid')
    def current_request_id():
        return {'rid': http_audit.get_request_id()}

    # when
    with TestClient(app) as client:
        response = client.get('/rid', headers={http_audit.X_REQUEST_ID: 'abc'})

    # then
    assert response.json() == {'rid': 'abc'}
    assert response.headers[http_audit.X_REQUEST_ID] == 'abc'
    assert http_audit.get_request_id() == ''


def test_middleware_sets_request_id_on_unhandled_errors():
    # given
    app = FastAPI()
    app.add_middleware(http_audit.RequestIdMiddleware)

    @app.get('/boom')
    def boom():
        raise RuntimeError('boom')

    # when
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get('/boom', headers={http_audit.X_REQUEST_ID: 'abc'})

    # then
    assert response.status_code == 500
    assert response.headers[http_audit.X_REQUEST_ID] == 'abc'
