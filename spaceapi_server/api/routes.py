import hmac

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from spaceapi_server.schemas.status import CommandResponse, KeepOpenResponse
from spaceapi_server.services import publisher
from spaceapi_server.services.status_guard import MAX_KEEP_OPEN_SEC

router = APIRouter()


def api_key_matches(request: Request, candidate: str | None) -> bool:
    if not candidate:
        return False
    expected = request.app.state.get_settings().API_KEY
    return hmac.compare_digest(candidate.encode('utf-8'), expected.encode('utf-8'))


def require_api_key(request: Request, x_api_key: str | None = Header(default=None, alias='X-API-Key')) -> None:
    if not api_key_matches(request, x_api_key):
        raise HTTPException(status_code=401, detail='Api key missing')


@router.post('/admin/publish/space-open', response_model=CommandResponse, dependencies=[Depends(require_api_key)])
def open_space(request: Request):
    space = request.app.state.space_guard
    space.open()
    return CommandResponse(open=True)


@router.post('/admin/publish/space-close', response_model=CommandResponse, dependencies=[Depends(require_api_key)])
def close_space(request: Request):
    space = request.app.state.space_guard
    space.close()
    return CommandResponse(open=False)


@router.post('/admin/publish/space-keep-open', response_model=KeepOpenResponse, dependencies=[Depends(require_api_key)])
def keep_open(request: Request, duration: int | None = Query(default=None, le=MAX_KEEP_OPEN_SEC)):
    if duration is None:
        duration = request.app.state.get_settings().KEEP_OPEN_DURATION_SEC
    till = request.app.state.space_guard.keep_open(duration)
    return KeepOpenResponse(open_till=int(till))


@router.get('/', response_class=HTMLResponse)
def index(request: Request):
    settings = request.app.state.get_settings()
    is_open = request.app.state.space_guard.is_open()
    return publisher.render_index(settings.spaceapi_template(), settings.STATUS_TEXT, is_open)


@router.get('/spaceapi/v14')
def get_status_v14(request: Request):
    settings = request.app.state.get_settings()
    status = request.app.state.space_guard.snapshot()
    document = publisher.build_spaceapi_v14(settings.spaceapi_template(), status)
    return document.model_dump(exclude_none=True)


@router.get('/status/text', response_class=PlainTextResponse)
def get_status_text(request: Request):
    settings = request.app.state.get_settings()
    return publisher.status_text(settings.STATUS_TEXT, request.app.state.space_guard.is_open())


@router.get('/status/html', response_class=HTMLResponse)
def get_status_html(request: Request):
    settings = request.app.state.get_settings()
    return publisher.status_html(settings.STATUS_HTML, request.app.state.space_guard.is_open())


@router.options('/{path:path}')
def options_catch_all(path: str):
    return Response(status_code=200)
