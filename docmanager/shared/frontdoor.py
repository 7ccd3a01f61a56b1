from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Max-Age": "86400",  # 1 day
}


def normalize_path(path: str, mount_path: str = "") -> str:
    """
    Strip the mount prefix and any trailing slash (root stays "/").

    "/api/folders/" with mount "/api" -> "/folders"
    """
    mount = mount_path.rstrip("/")
    if mount and (path == mount or path.startswith(mount + "/")):
        path = path[len(mount):] or "/"
    if path != "/" and path.endswith("/"):
        path = path.rstrip("/") or "/"
    return path


class FrontDoorMiddleware:
    """
    Plain ASGI middleware in front of the router.

    Rewrites ``scope["path"]`` with :func:`normalize_path` and answers every
    OPTIONS request with an empty 204 carrying the CORS headers, before it
    ever reaches a route.
    """

    def __init__(self, app, mount_path: str = ""):
        self.app = app
        self.mount_path = mount_path

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if scope["method"] == "OPTIONS":
            await Response(status_code=204, headers=CORS_HEADERS)(scope, receive, send)
            return

        path = normalize_path(scope["path"], self.mount_path)
        if path != scope["path"]:
            scope = dict(scope, path=path, raw_path=path.encode())
        await self.app(scope, receive, send)
