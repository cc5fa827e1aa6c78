import logging
import re

import pytest
from flask import Flask
from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Response

from blogapp import sessions
from blogapp.sessions import (
    MemoryBackend,
    SessionStorageError,
    SessionStore,
    SQLBackend,
    backend_from_config,
    find_session_id,
)


def make_request(cookie=None):
    headers = {'Cookie': cookie} if cookie is not None else {}
    return EnvironBuilder(path='/', headers=headers).get_request()


@pytest.fixture(params=['memory', 'sql'])
def store(request):
    backend = MemoryBackend() if request.param == 'memory' else SQLBackend('sqlite://')
    store = SessionStore(backend, 'sid')
    store.init()
    yield store
    store.close()


USER_PAYLOAD = {'user': {'id': 1, 'username': 'stephen', 'role': 'user'}}


def test_round_trip_by_id(store):
    payload = {'user': {'id': 7, 'username': 'drake', 'role': 'user', 'tags': ['a', 'b'], 'score': 1.5, 'bio': None}}
    cookie = store.create_session(payload)
    assert store.get_session_by_id(cookie.session_id) == payload


def test_no_cookie_header_is_absent(store):
    store.create_session(USER_PAYLOAD)
    assert store.get_session_from_cookie(make_request()) is None


def test_other_cookie_names_only_is_absent(store):
    cookie = store.create_session(USER_PAYLOAD)
    request = make_request(f'other={cookie.session_id}; theme=dark')
    assert store.get_session_from_cookie(request) is None


def test_scenario_set_cookie_and_follow_up(store):
    cookie = store.create_session(USER_PAYLOAD)

    response = Response('ok')
    response.headers['X-Request-Id'] = 'abc'
    cookie.apply(response)

    assert response.headers.getlist('Set-Cookie') == [f'sid={cookie.session_id}; SameSite=None; Secure']
    assert response.headers['X-Request-Id'] == 'abc'

    assert store.get_session_from_cookie(make_request(f'sid={cookie.session_id}')) == USER_PAYLOAD
    assert store.get_session_from_cookie(make_request('sid=wrong-value')) is None


def test_apply_appends_to_existing_set_cookie(store):
    cookie = store.create_session(USER_PAYLOAD)
    response = Response('ok')
    response.headers.add('Set-Cookie', 'theme=dark')
    cookie.apply(response)
    assert response.headers.getlist('Set-Cookie') == ['theme=dark', cookie.header_value]


def test_session_cookie_found_among_other_cookies(store):
    cookie = store.create_session(USER_PAYLOAD)
    request = make_request(f'theme=dark; sid={cookie.session_id}; lang=en')
    assert store.get_session_from_cookie(request) == USER_PAYLOAD


def test_first_matching_cookie_wins(store):
    first = store.create_session({'n': 1})
    second = store.create_session({'n': 2})
    request = make_request(f'sid={first.session_id}; sid={second.session_id}')
    assert store.get_session_from_cookie(request) == {'n': 1}


def test_end_session_removes_record(store):
    cookie = store.create_session(USER_PAYLOAD)
    request = make_request(f'sid={cookie.session_id}')

    store.end_session(request)

    assert store.get_session_from_cookie(request) is None
    assert store.get_session_by_id(cookie.session_id) is None


def test_end_session_without_session_cookie_is_noop(store):
    cookie = store.create_session(USER_PAYLOAD)

    store.end_session(make_request())
    store.end_session(make_request('theme=dark'))
    store.end_session(make_request('sid=never-created'))

    assert store.get_session_by_id(cookie.session_id) == USER_PAYLOAD


def test_sessions_are_distinct_and_independent(store):
    a = store.create_session({'user': {'id': 1}})
    b = store.create_session({'user': {'id': 2}})

    assert a.session_id != b.session_id
    assert store.get_session_by_id(a.session_id) == {'user': {'id': 1}}
    assert store.get_session_by_id(b.session_id) == {'user': {'id': 2}}

    store.end_session(make_request(f'sid={a.session_id}'))
    assert store.get_session_by_id(b.session_id) == {'user': {'id': 2}}


def test_session_id_is_long_random_token(store):
    cookie = store.create_session(USER_PAYLOAD)
    # 32 bytes of urlsafe base64 without padding
    assert re.fullmatch(r'[A-Za-z0-9_\-]{43}', cookie.session_id)


@pytest.mark.parametrize('header', ['sid', 'sid=', 'theme=dark; sid'])
def test_malformed_cookie_is_logged_and_absent(store, caplog, header):
    store.create_session(USER_PAYLOAD)
    with caplog.at_level(logging.WARNING, logger='blogapp.sessions.store'):
        assert store.get_session_from_cookie(make_request(header)) is None
    assert any('Malformed session cookie' in r.getMessage() for r in caplog.records)


def test_unserializable_payload_is_rejected(store):
    with pytest.raises(TypeError):
        store.create_session({'callback': object()})


def test_corrupted_record_raises_storage_error(store):
    store.backend.set('broken', '{not json')
    with pytest.raises(SessionStorageError):
        store.get_session_by_id('broken')


def test_clear_cookie_header(store):
    response = store.clear_cookie(Response('ok'))
    assert response.headers.getlist('Set-Cookie') == ['sid=; Max-Age=0; SameSite=None; Secure']


def test_find_session_id_splits_on_first_equals():
    assert find_session_id('sid=abc=def', 'sid') == 'abc=def'
    assert find_session_id(None, 'sid') is None
    assert find_session_id('', 'sid') is None
    # the separator is exactly "; "
    assert find_session_id('theme=dark;sid=abc', 'sid') is None


def test_backend_from_config():
    assert isinstance(backend_from_config({'SESSION_STORE_BACKEND': 'memory'}), MemoryBackend)
    assert isinstance(backend_from_config({'SESSION_STORE_BACKEND': 'sql', 'SESSION_STORE_URI': 'sqlite://'}), SQLBackend)
    with pytest.raises(ValueError):
        backend_from_config({'SESSION_STORE_BACKEND': 'redis'})


def test_init_app_registers_store():
    app = Flask(__name__)
    app.config['SESSION_STORE_COOKIE_NAME'] = 'sid'
    app.config['SESSION_STORE_BACKEND'] = 'memory'

    store = sessions.init_app(app)

    assert app.extensions['session_store'] is store
    with app.app_context():
        assert sessions.get_session_store() is store


def test_init_app_fails_when_storage_already_exists():
    backend = MemoryBackend()
    backend.init()
    app = Flask(__name__)
    app.config['SESSION_STORE_COOKIE_NAME'] = 'sid'

    with pytest.raises(SessionStorageError):
        sessions.init_app(app, backend=backend)
    assert 'session_store' not in app.extensions
