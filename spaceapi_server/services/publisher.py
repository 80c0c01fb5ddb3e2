from __future__ import annotations

from html import escape

from spaceapi_server.config.settings import StatusDisplay
from spaceapi_server.schemas.spaceapi import SpaceApiStatus, State
from spaceapi_server.schemas.status import SpaceStatus

SOFTWARE = "spaceapi-server"
VERSION = "0.1.0"
PROJECT_URL = "https://github.com/dezentrale/spaceapi-rs"


def build_spaceapi_v14(template: SpaceApiStatus, status: SpaceStatus) -> SpaceApiStatus:
    document = template.model_copy(deep=True)
    document.api_compatibility = ["14"]
    document.state = State(open=status.is_open, lastchange=int(status.last_change))
    return document


def status_text(displays: StatusDisplay, is_open: bool) -> str:
    return displays.open if is_open else displays.closed


def status_html(displays: StatusDisplay, is_open: bool) -> str:
    return displays.open if is_open else displays.closed


def render_index(template: SpaceApiStatus, displays: StatusDisplay, is_open: bool) -> str:
    """Minimal landing page: logo, configured status text, software link."""
    name = escape(template.space)
    logo = escape(template.logo)
    status = escape(status_text(displays, is_open))
    return f"""<html>
    <body>
        <center>
            <img src="{logo}" alt="{name}"></img>
            <div>{status}</div>
            <div><a href="{PROJECT_URL}">{SOFTWARE} v{VERSION}</a></div>
        </center>
    </body>
</html>
"""


def admin_action_for(is_open: bool) -> tuple[str, str]:
    if is_open:
        return "\U0001f510 Close space", "close"
    return "\U0001f513 Open space", "open"


def render_admin_ui(is_open: bool, hint: str | None = None, action_url: str = "/admin/ui") -> str:
    hint_html = f"<div>{escape(hint)}</div>" if hint else ""
    command_title, command_value = admin_action_for(is_open)
    return f"""<html>
    <head>
        <meta charset="utf-8">
    </head>
    <body>
        {hint_html}
        <form action="{action_url}" method="POST">
            <label for="api_key">API-Key</label>
            <input type="password" name="api_key"/>
            <input type="hidden" name="action" value="{command_value}"/>
            <br>
            <input type="submit" value="{command_title}" />
        </form>
    </body>
</html>
"""
