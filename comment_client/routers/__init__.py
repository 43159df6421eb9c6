from comment_client.routers.v1 import actions_router as actions_v1_router

__all__ = ["actions_v1_router"]
