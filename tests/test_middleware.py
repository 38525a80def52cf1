import pytest

from hackadmin.core.middleware import resolve_redirect


@pytest.mark.parametrize("path,authenticated,expected", [
    ("/dashboard", False, "/auth/v1/login"),
    ("/dashboard/applications", False, "/auth/v1/login"),
    ("/dashboard", True, None),
    ("/auth/v1/login", True, "/dashboard"),
    ("/auth/v1/login", False, None),
    ("/admin/get-emails", False, None),
    ("/auth-token/me", True, None),
])
def test_resolve_redirect(config, path, authenticated, expected):
    assert resolve_redirect(path, authenticated, config) == expected


def test_signed_out_dashboard_redirects_to_login(client):
    response = client.get("/dashboard", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/v1/login"


def test_signed_in_login_page_redirects_to_dashboard(client, make_admin, sign_in):
    sign_in(make_admin())

    response = client.get("/auth/v1/login", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/dashboard"


def test_invalid_cookie_counts_as_signed_out(client, config):
    client.cookies.set(config.SESSION_COOKIE_NAME, "not-a-token")

    response = client.get("/dashboard", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/v1/login"


def test_signed_in_dashboard_renders(client, make_admin, sign_in):
    sign_in(make_admin())

    response = client.get("/dashboard")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_signed_out_login_page_renders(client):
    response = client.get("/auth/v1/login")

    assert response.status_code == 200
    assert "<form" in response.text


def test_api_routes_are_not_gated(client):
    assert client.get("/health").json()["status"] == "healthy"
