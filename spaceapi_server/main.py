from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from spaceapi_server.api.admin_ui import router as admin_ui_router
from spaceapi_server.api.routes import router
from spaceapi_server.config.settings import get_settings
from spaceapi_server.services.publisher import SOFTWARE, VERSION
from spaceapi_server.services.status_guard import StatusGuard

CORS_HEADERS = {
    'Access-Control-Allow-Headers': 'X-API-Key',
    'Access-Control-Allow-Methods': 'POST,GET',
    'Access-Control-Allow-Origin': '*',
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    print(f"[APP][startup] software={SOFTWARE} version={VERSION}", flush=True)
    try:
        yield
    finally:
        app.state.space_guard.shutdown()
        print("[APP][shutdown] pending_timer=cancelled", flush=True)


app = FastAPI(title="SpaceAPI Server", version=VERSION, lifespan=lifespan)
app.include_router(router)
app.include_router(admin_ui_router)


@app.middleware('http')
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


# NOTE: lazy-loaded so app import does not require env during tests.
app.state.get_settings = get_settings
app.state.space_guard = StatusGuard()


def run() -> None:
    import uvicorn

    settings = app.state.get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == '__main__':
    run()
