from pydantic import BaseModel


class Location(BaseModel):
    address: str | None = None
    lat: float | None = None
    lon: float | None = None


class Contact(BaseModel):
    email: str | None = None


class State(BaseModel):
    open: bool | None = None
    lastchange: int | None = None
    message: str | None = None


class SpaceApiStatus(BaseModel):
    api_compatibility: list[str] | None = None
    space: str
    logo: str = ""
    url: str = ""
    location: Location | None = None
    contact: Contact | None = None
    state: State | None = None
