import os
from functools import lru_cache

from pydantic import BaseModel

from spaceapi_server.schemas.spaceapi import Contact, Location, SpaceApiStatus


class StatusDisplay(BaseModel):
    open: str
    closed: str


class Settings(BaseModel):
    API_KEY: str
    KEEP_OPEN_DURATION_SEC: int = 300
    SPACE_NAME: str = "Space"
    SPACE_LOGO: str = ""
    SPACE_URL: str = ""
    SPACE_ADDRESS: str | None = None
    SPACE_LAT: float | None = None
    SPACE_LON: float | None = None
    SPACE_CONTACT_EMAIL: str | None = None
    STATUS_TEXT: StatusDisplay = StatusDisplay(open="open", closed="closed")
    STATUS_HTML: StatusDisplay = StatusDisplay(open="<span>open</span>", closed="<span>closed</span>")
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "API_KEY": os.getenv("API_KEY"),
            "KEEP_OPEN_DURATION_SEC": os.getenv("KEEP_OPEN_DURATION_SEC"),
            "SPACE_NAME": os.getenv("SPACE_NAME"),
            "SPACE_LOGO": os.getenv("SPACE_LOGO"),
            "SPACE_URL": os.getenv("SPACE_URL"),
            "SPACE_ADDRESS": os.getenv("SPACE_ADDRESS"),
            "SPACE_LAT": os.getenv("SPACE_LAT"),
            "SPACE_LON": os.getenv("SPACE_LON"),
            "SPACE_CONTACT_EMAIL": os.getenv("SPACE_CONTACT_EMAIL"),
            "STATUS_TEXT": {
                "open": os.getenv("STATUS_TEXT_OPEN", "open"),
                "closed": os.getenv("STATUS_TEXT_CLOSED", "closed"),
            },
            "STATUS_HTML": {
                "open": os.getenv("STATUS_HTML_OPEN", "<span>open</span>"),
                "closed": os.getenv("STATUS_HTML_CLOSED", "<span>closed</span>"),
            },
            "HOST": os.getenv("HOST"),
            "PORT": os.getenv("PORT"),
        }
        # unset optionals fall back to the field defaults; API_KEY stays so a missing key fails validation
        return cls.model_validate(
            {k: v for k, v in raw.items() if v is not None or k == "API_KEY"}
        )

    def spaceapi_template(self) -> SpaceApiStatus:
        location = None
        if self.SPACE_ADDRESS is not None or self.SPACE_LAT is not None or self.SPACE_LON is not None:
            location = Location(address=self.SPACE_ADDRESS, lat=self.SPACE_LAT, lon=self.SPACE_LON)
        contact = None
        if self.SPACE_CONTACT_EMAIL:
            contact = Contact(email=self.SPACE_CONTACT_EMAIL)
        return SpaceApiStatus(
            space=self.SPACE_NAME,
            logo=self.SPACE_LOGO,
            url=self.SPACE_URL,
            location=location,
            contact=contact,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
