from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from lifespan import INPUT_SCHEMAS, lifespan
from routes import api_router
from shared.core.config import settings
from shared.core.request_context import request_context
from shared.utils.exception_handlers import register_exception_handlers
from shared.utils.execution_time import ExecutionTimeMiddleware
from shared.validation import render_sdl


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        token = request_context.set(request)  # store current request globally
        try:
            response: Response = await call_next(request)
        finally:
            request_context.reset(token)

        response.headers["X-Method"] = request.method
        response.headers["X-Path"] = request.url.path
        return response


def create_app() -> FastAPI:

    fastapi_app: FastAPI = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        lifespan=lifespan,
        debug=settings.is_development,
        swagger_ui_parameters={
            "filter": True,
            "docExpansion": "none",
            "displayRequestDuration": True,
        },
    )

    @fastapi_app.get(path="/", tags=["System"])
    async def root() -> dict[str, str]:
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.VERSION,
            "docs_url": "/docs",
            "schema_url": f"{settings.API_V1_STR}/schema",
        }

    @fastapi_app.get(path="/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "message": "API is running fine!"}

    @fastapi_app.get(
        path=f"{settings.API_V1_STR}/schema",
        tags=["Schema"],
        response_class=PlainTextResponse,
    )
    async def input_schema_sdl() -> str:
        """GraphQL SDL of every input type this service validates."""
        return render_sdl(*INPUT_SCHEMAS)

    fastapi_app.include_router(router=api_router)
    register_exception_handlers(fastapi_app)

    fastapi_app.add_middleware(ExecutionTimeMiddleware)
    fastapi_app.add_middleware(middleware_class=RequestContextMiddleware)
    fastapi_app.add_middleware(
        middleware_class=CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return fastapi_app


app: FastAPI = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app="main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.is_development,
        use_colors=True,
    )
