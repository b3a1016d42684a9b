import pytest
from httpx import AsyncClient

COOKIE = "zip_admin_session"


def from_ip(ip: str) -> dict:
    return {"X-Forwarded-For": ip}


def cookie_header(response) -> dict:
    return {"Cookie": f"{COOKIE}={response.cookies.get(COOKIE)}"}


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, config):
    """
    Given the admin password is configured
    When I submit the correct password
    Then an HTTP-only session cookie is set
    And the session endpoint accepts it
    """
    response = await client.post("/auth/login", json={"password": config.ADMIN_PASSWORD})

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert "expires_at" in response.json()

    set_cookie = response.headers["set-cookie"].lower()
    assert f"{COOKIE}=" in set_cookie
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert f"max-age={7 * 24 * 60 * 60}" in set_cookie

    session = await client.get("/auth/session", headers=cookie_header(response))
    assert session.status_code == 200
    assert session.json()["valid"] is True


@pytest.mark.asyncio
async def test_login_invalid_password(client: AsyncClient):
    response = await client.post("/auth/login", json={"password": "nope"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert COOKIE not in response.cookies


@pytest.mark.asyncio
async def test_login_missing_password(client: AsyncClient):
    response = await client.post("/auth/login", json={})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_lockout_after_five_failures(client: AsyncClient, config):
    """
    Given 5 failed logins from one IP within 15 minutes
    When the correct password is submitted from that IP
    Then the login is rejected with 429
    And another IP can still log in
    """
    for _ in range(5):
        response = await client.post(
            "/auth/login", json={"password": "wrong"}, headers=from_ip("203.0.113.9")
        )
        assert response.status_code == 401

    locked = await client.post(
        "/auth/login",
        json={"password": config.ADMIN_PASSWORD},
        headers=from_ip("203.0.113.9"),
    )
    assert locked.status_code == 429
    assert locked.json()["error"]["code"] == "RATE_LIMITED"

    other = await client.post(
        "/auth/login",
        json={"password": config.ADMIN_PASSWORD},
        headers=from_ip("203.0.113.10"),
    )
    assert other.status_code == 200


@pytest.mark.asyncio
async def test_bypass_token_logs_in_while_locked_out(client: AsyncClient, config):
    for _ in range(5):
        await client.post("/auth/login", json={"password": "wrong"}, headers=from_ip("203.0.113.9"))

    response = await client.post(
        "/auth/login",
        json={"bypass_token": config.EMERGENCY_BYPASS_TOKEN},
        headers=from_ip("203.0.113.9"),
    )

    assert response.status_code == 200
    assert response.cookies.get(COOKIE)


@pytest.mark.asyncio
async def test_invalid_bypass_token(client: AsyncClient, config):
    response = await client.post(
        "/auth/login", json={"password": config.ADMIN_PASSWORD, "bypass_token": "guess"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout_revokes_session(client: AsyncClient, config):
    login = await client.post("/auth/login", json={"password": config.ADMIN_PASSWORD})
    headers = cookie_header(login)

    logout = await client.post("/auth/logout", headers=headers)

    assert logout.status_code == 200
    assert logout.json()["success"] is True
    assert "max-age=0" in logout.headers["set-cookie"].lower()

    session = await client.get("/auth/session", headers=headers)
    assert session.status_code == 401
    assert session.json()["error"]["code"] == "SESSION_EXPIRED"


@pytest.mark.asyncio
async def test_logout_without_session(client: AsyncClient):
    response = await client.post("/auth/logout")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_session_with_forged_cookie(client: AsyncClient):
    response = await client.get("/auth/session", headers={"Cookie": f"{COOKIE}=forged"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_protected_endpoints_require_session(client: AsyncClient):
    for method, path in [
        ("GET", "/settings/global"),
        ("PUT", "/settings/global"),
        ("POST", "/files"),
        ("GET", "/audit/auth-events"),
    ]:
        response = await client.request(method, path, json={})
        assert response.status_code == 401, path


@pytest.mark.asyncio
async def test_trusted_proxy_forwarded_for_keys_throttle(client: AsyncClient, config):
    """A trusted proxy's X-Forwarded-For hop is the throttled address"""
    for _ in range(5):
        await client.post(
            "/auth/login", json={"password": "wrong"}, headers=from_ip("198.51.100.7")
        )

    locked = await client.post(
        "/auth/login",
        json={"password": config.ADMIN_PASSWORD},
        headers=from_ip("198.51.100.7"),
    )
    proxy_itself = await client.post("/auth/login", json={"password": config.ADMIN_PASSWORD})

    assert locked.status_code == 429
    assert proxy_itself.status_code == 200
