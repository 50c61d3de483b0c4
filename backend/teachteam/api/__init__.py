"""REST API — FastAPI routers, auth dependencies and global error handlers."""
