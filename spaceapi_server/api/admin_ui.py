from typing import Literal

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from spaceapi_server.api.routes import api_key_matches
from spaceapi_server.services import publisher

router = APIRouter()

FLASH_COOKIE = 'spaceapi_flash'
_ADMIN_UI_PATH = '/admin/ui'


def _redirect_with_flash(message: str) -> RedirectResponse:
    response = RedirectResponse(_ADMIN_UI_PATH, status_code=303)
    response.set_cookie(FLASH_COOKIE, message, httponly=True, samesite='lax', path=_ADMIN_UI_PATH)
    return response


@router.get(_ADMIN_UI_PATH, response_class=HTMLResponse)
def admin_ui_view(request: Request):
    hint = request.cookies.get(FLASH_COOKIE)
    is_open = request.app.state.space_guard.is_open()
    response = HTMLResponse(publisher.render_admin_ui(is_open, hint=hint, action_url=_ADMIN_UI_PATH))
    if hint is not None:
        response.delete_cookie(FLASH_COOKIE, path=_ADMIN_UI_PATH)
    return response


@router.post(_ADMIN_UI_PATH)
def admin_ui_control(
    request: Request,
    api_key: str = Form(default=''),
    action: Literal['open', 'close'] = Form(...),
):
    if not api_key_matches(request, api_key):
        print('[ADMIN][ui_control_rejected] reason=invalid_api_key', flush=True)
        return _redirect_with_flash('Invalid API-Key')

    space = request.app.state.space_guard
    if action == 'open':
        space.open()
        hint = 'Space is now open'
    else:
        space.close()
        hint = 'Space is now closed'
    return _redirect_with_flash(hint)
