"""GraphQL Router — Strawberry's FastAPI integration, HTTP + websocket subscriptions."""

from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL

from teachteam.graphql.context import get_context
from teachteam.graphql.schema import schema

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    subscription_protocols=[GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL],
)
