from comment_client.routers.v1.actions import router as actions_router

__all__ = ["actions_router"]
