"""Admin GraphQL API — Strawberry schema mounted at /graphql.

Invariants:
    - Resolvers delegate to the same services as the REST routers
    - Every operation except adminLogin / adminLogout and the subscription
      requires an admin session (IsAdmin)
"""
