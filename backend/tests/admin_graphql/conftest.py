"""Admin GraphQL fixtures — query helper and signed-in admin client.

Invariants:
    - gql() asserts HTTP 200 (GraphQL reports failures in the errors list)
    - admin_client signs in through adminLogin with the bootstrap credentials
"""

import pytest

ADMIN_LOGIN = """
mutation Login($username: String!, $password: String!) {
  adminLogin(username: $username, password: $password) {
    success message user { id email role }
  }
}
"""


@pytest.fixture
def gql(client):
    async def _gql(query: str, **variables) -> dict:
        res = await client.post("/graphql", json={"query": query, "variables": variables})
        assert res.status_code == 200, res.text
        return res.json()

    return _gql


@pytest.fixture
async def admin_client(client, gql):
    result = await gql(ADMIN_LOGIN, username="admin", password="admin")
    assert result["data"]["adminLogin"]["success"] is True
    return client
