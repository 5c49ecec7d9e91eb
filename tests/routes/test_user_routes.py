import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from booking_backend.models.user import User
from booking_backend.routes.user_routes import LoginRequest, SignupRequest, list_users, login, signup


def _signup_payload(**overrides) -> dict:
    payload = {
        'name': 'Ada',
        'email': 'ada@example.com',
        'password': 'secret',
        'confirmPassword': 'secret',
        'role': 'doctor',
    }
    payload.update(overrides)
    return payload


def test_signup_request_accepts_camel_case_fields() -> None:
    request = SignupRequest.model_validate(_signup_payload())

    assert request.confirm_password == 'secret'


def test_signup_creates_user(db) -> None:
    created = signup(SignupRequest.model_validate(_signup_payload()), db=db)

    assert created.id is not None
    assert created.email == 'ada@example.com'
    assert created.role == 'doctor'
    assert db.query(User).count() == 1


def test_signup_rejects_password_mismatch(db) -> None:
    with pytest.raises(HTTPException) as exception_info:
        signup(SignupRequest.model_validate(_signup_payload(confirmPassword='other')), db=db)

    assert exception_info.value.status_code == 400
    assert exception_info.value.detail == 'Passwords do not match'
    assert db.query(User).count() == 0


@pytest.mark.parametrize(
    'overrides',
    [
        {'role': 'admin'},
        {'name': None},
        {'email': None},
    ],
)
def test_signup_returns_generic_error_for_invalid_user(db, overrides: dict) -> None:
    with pytest.raises(HTTPException) as exception_info:
        signup(SignupRequest.model_validate(_signup_payload(**overrides)), db=db)

    assert exception_info.value.status_code == 500
    assert exception_info.value.detail == 'Failed to save user'
    assert db.query(User).count() == 0


def test_signup_rejects_duplicate_email(db) -> None:
    signup(SignupRequest.model_validate(_signup_payload()), db=db)

    with pytest.raises(HTTPException) as exception_info:
        signup(SignupRequest.model_validate(_signup_payload(name='Other')), db=db)

    assert exception_info.value.status_code == 500
    assert db.query(User).count() == 1


def test_signup_then_list_users_over_http(client) -> None:
    response = client.post('/api/signup', json=_signup_payload(role='patient'))

    assert response.status_code == 201
    body = response.json()
    assert body['name'] == 'Ada'
    assert 'password' not in body

    listing = client.get('/api/users')

    assert listing.status_code == 200
    assert [user['email'] for user in listing.json()] == ['ada@example.com']
    assert 'password' not in listing.json()[0]


def test_signup_mismatch_over_http_returns_error_body(client) -> None:
    response = client.post('/api/signup', json=_signup_payload(confirmPassword='nope'))

    assert response.status_code == 400
    assert response.json() == {'error': 'Passwords do not match'}


def test_login_succeeds_for_exact_name_and_password(db) -> None:
    signup(SignupRequest.model_validate(_signup_payload()), db=db)

    response = login(LoginRequest(username='Ada', password='secret'), db=db)

    assert response.message == 'Login successful'


@pytest.mark.parametrize(
    ('username', 'password'),
    [
        ('Ada', 'wrong'),
        ('ada', 'secret'),
        ('ada@example.com', 'secret'),
        (None, None),
    ],
)
def test_login_rejects_anything_but_an_exact_match(db, username, password) -> None:
    signup(SignupRequest.model_validate(_signup_payload()), db=db)

    with pytest.raises(HTTPException) as exception_info:
        login(LoginRequest(username=username, password=password), db=db)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Invalid username or password'


def test_login_over_http(client) -> None:
    client.post('/api/signup', json=_signup_payload())

    assert client.post('/api/login', json={'username': 'Ada', 'password': 'secret'}).json() == {
        'message': 'Login successful',
    }
    assert client.post('/api/login', json={'username': 'Ada', 'password': 'x'}).status_code == 401


def test_list_users_returns_generic_error_when_store_fails(db, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_query(*_args, **_kwargs):
        raise OperationalError('SELECT', {}, Exception('connection lost'))

    monkeypatch.setattr(db, 'query', failing_query)

    with pytest.raises(HTTPException) as exception_info:
        list_users(db=db)

    assert exception_info.value.status_code == 500
    assert exception_info.value.detail == 'Failed to fetch users'


def test_login_returns_generic_error_when_store_fails(db, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_query(*_args, **_kwargs):
        raise OperationalError('SELECT', {}, Exception('connection lost'))

    monkeypatch.setattr(db, 'query', failing_query)

    with pytest.raises(HTTPException) as exception_info:
        login(LoginRequest(username='Ada', password='secret'), db=db)

    assert exception_info.value.status_code == 500
    assert exception_info.value.detail == 'Login failed'
