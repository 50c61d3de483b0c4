"""Services — async data access and business operations shared by REST and GraphQL.

Invariants:
    - Each service is constructed with one AsyncSession and never opens its own
    - Services raise TeachTeamError subclasses, never HTTPException
    - Pure aggregation is delegated to core/; services only fetch and persist
"""
