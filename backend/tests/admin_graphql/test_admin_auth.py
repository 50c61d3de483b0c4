"""Admin Login — bootstrap credentials, admin email login and the IsAdmin guard."""

from teachteam.core.domain_types import UserRole

ADMIN_LOGIN = """
mutation Login($username: String!, $password: String!) {
  adminLogin(username: $username, password: $password) {
    success message user { email role }
  }
}
"""

ALL_COURSES = "{ getAllCourses { code } }"


async def test_bootstrap_login_creates_admin(gql):
    result = await gql(ADMIN_LOGIN, username="admin", password="admin")
    payload = result["data"]["adminLogin"]
    assert payload["success"] is True
    assert payload["user"] == {"email": "admin@teachteam.com", "role": "admin"}

    again = await gql(ADMIN_LOGIN, username="admin", password="admin")
    assert again["data"]["adminLogin"]["success"] is True


async def test_wrong_credentials_return_unsuccessful_payload(gql):
    result = await gql(ADMIN_LOGIN, username="admin", password="nope")
    payload = result["data"]["adminLogin"]
    assert payload["success"] is False
    assert payload["user"] is None


async def test_admin_can_log_in_with_email(gql, make_user):
    await make_user(UserRole.ADMIN, "Ada Admin", email="ada@example.com")
    result = await gql(ADMIN_LOGIN, username="ada@example.com", password="Password1")
    assert result["data"]["adminLogin"]["success"] is True


async def test_non_admin_cannot_use_admin_login(gql, make_user):
    await make_user(UserRole.LECTURER, "Laura Lecturer", email="laura@example.com")
    result = await gql(ADMIN_LOGIN, username="laura@example.com", password="Password1")
    assert result["data"]["adminLogin"]["success"] is False


async def test_admin_operations_require_admin_session(gql, client, make_user, sign_in):
    anonymous = await gql(ALL_COURSES)
    assert anonymous["data"] is None
    assert "Admin access required" in anonymous["errors"][0]["message"]

    user, _ = await make_user(UserRole.LECTURER, "Laura Lecturer")
    await sign_in(user)
    lecturer = await gql(ALL_COURSES)
    assert lecturer["errors"]


async def test_logout_ends_admin_session(admin_client, gql):
    assert (await gql(ALL_COURSES)).get("errors") is None
    await gql("mutation { adminLogout }")
    assert (await gql(ALL_COURSES))["errors"]
