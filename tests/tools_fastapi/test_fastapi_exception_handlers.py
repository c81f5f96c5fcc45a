from http import HTTPStatus

import fastapi
import fastapi.testclient
import pytest

from twoface import describe, describe_err
from twoface.tools.fastapi import HttpExternal, json_endpoint, register_exception_handlers


SECRET = 'secret-filename-do-not-leak-to-user'


def test_json_endpoint():
    """ Test: @json_endpoint views """
    def main():
        # === Test: OK
        res = c.get('/users/1/name')
        assert res.status_code == 200
        assert res.headers['content-type'] == 'application/json'
        assert res.json() == 'kolypto'

        # === Test: DualError
        res = c.get('/users/2/name')
        assert res.status_code == 500
        assert res.json() == {'error': 'Database was unavailable'}
        assert 'pq:' not in res.text

        # === Test: async view
        res = c.get('/async/hello')
        assert res.status_code == 200
        assert res.json() == {'hello': 'world'}

        res = c.get('/async/missing')
        assert res.status_code == 404
        assert res.json() == {'error': 'page not found'}
        assert SECRET not in res.text

        # === Test: returned DualError is an error as well
        res = c.get('/returns-error')
        assert res.status_code == 409
        assert res.json() == {'error': 'Conflict'}

        # === Test: unserializable value
        res = c.get('/unserializable')
        assert res.status_code == 500
        assert res.json() == {'error': "Couldn't construct the JSON response"}

    # Set up the FastAPI application
    app = fastapi.FastAPI()

    def query_db_for_username(user_id: int):
        if user_id == 1:
            return 'kolypto'
        raise ConnectionError("pq: could not query relation 'users': auth error")

    @app.get('/users/{user_id}/name')
    @json_endpoint
    def get_username(user_id: int):
        with describe_err(HttpExternal(HTTPStatus.INTERNAL_SERVER_ERROR, 'Database was unavailable')):
            return query_db_for_username(user_id)

    @app.get('/async/{name}')
    @json_endpoint
    async def async_view(name: str):
        with describe_err(HttpExternal(HTTPStatus.NOT_FOUND, 'page not found')):
            if name == 'missing':
                open(SECRET)
            return {name: 'world'}

    @app.get('/returns-error')
    @json_endpoint
    def returns_error():
        return describe(SECRET, HttpExternal(HTTPStatus.CONFLICT, 'Conflict'))

    @app.get('/unserializable')
    @json_endpoint
    def unserializable():
        return float('nan')

    # Go
    with fastapi.testclient.TestClient(app) as c:
        main()


@pytest.mark.parametrize('passthru', [False, True])
def test_fastapi_exception_handlers(passthru: bool):
    """ Test: register_exception_handlers() """
    def main():
        # === Test: DualError raised from a view
        res = c.get('/dual-error')
        assert res.status_code == 403
        assert res.headers['content-type'] == 'application/json'
        assert res.json() == {'error': 'Access denied'}
        assert SECRET not in res.text

        # === Test: DualError with a plain text description
        res = c.get('/dual-error-text')
        assert res.status_code == 500
        assert res.json() == {'error': 'Something went wrong'}

        # === Test: async view decorated with describe_err
        res = c.get('/async-dual-error')
        assert res.status_code == 404
        assert res.json() == {'error': 'page not found'}
        assert SECRET not in res.text

        # === Test: OK
        res = c.get('/ok')
        assert res.status_code == 200
        assert res.json() == {'ok': True}

        # === Test: unexpected error
        if not passthru:
            res = c.get('/server-error')
            assert res.status_code == 500
            assert res.json() == {'error': 'Internal server error'}
            assert SECRET not in res.text
        else:
            with pytest.raises(RuntimeError):
                c.get('/server-error')

    # Set up the FastAPI application
    app = fastapi.FastAPI()

    @app.get('/dual-error')
    def dual_error():
        with describe_err(HttpExternal(HTTPStatus.FORBIDDEN, 'Access denied')):
            raise PermissionError(SECRET)

    @app.get('/dual-error-text')
    def dual_error_text():
        raise describe(ValueError(SECRET), 'Something went wrong')

    @app.get('/async-dual-error')
    @describe_err(HttpExternal(HTTPStatus.NOT_FOUND, 'page not found'))
    async def async_dual_error():
        open(SECRET)

    @app.get('/ok')
    def ok():
        return {'ok': True}

    @app.get('/server-error')
    def server_error():
        raise RuntimeError(SECRET)

    # Handle exceptions
    register_exception_handlers(app, passthru=passthru)

    # Go
    # NOTE: Starlette re-raises unexpected errors after the response is sent: don't let the client raise them
    with fastapi.testclient.TestClient(app, raise_server_exceptions=passthru) as c:
        main()
