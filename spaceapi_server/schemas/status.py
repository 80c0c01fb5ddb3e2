from pydantic import BaseModel


class SpaceStatus(BaseModel):
    is_open: bool = False
    opened_until: float | None = None
    epoch: int = 0
    last_change: float = 0.0


class CommandResponse(BaseModel):
    open: bool
    open_till: int | None = None


class KeepOpenResponse(BaseModel):
    # unix seconds (UTC) until the space stays open
    open_till: int
