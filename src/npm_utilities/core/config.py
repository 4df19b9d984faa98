from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Endpoints(BaseModel):
    """
    Endpoint registry for every remote resource the library reads.

    Swapping a base URL (e.g. for a mirror) never touches extraction logic.
    """

    model_config = ConfigDict(frozen=True)

    package: str = "https://www.npmjs.com/package/"
    search: str = "https://www.npmjs.com/search?q="
    user: str = "https://www.npmjs.com/~"
    status: str = "https://status.npmjs.org/"

    # Search query/filter parameter names
    ranking_param: str = "ranking"
    page_param: str = "page"
    per_page_param: str = "perPage"

    @field_validator("package", "search", "user", "status")
    def must_be_http_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL: {v!r}")
        return v


class ClientConfig(BaseModel):
    """
    Client configuration contract.

    `timeout` and `retries` are transport settings and stay off unless set.
    """

    model_config = ConfigDict(frozen=True)

    endpoints: Endpoints = Field(default_factory=Endpoints)
    timeout: Optional[float] = Field(default=None, gt=0)
    retries: int = Field(default=0, ge=0)
    user_agent: str = "Mozilla/5.0 (compatible; npm-utilities/1.0)"


_config = ClientConfig()


def get_config() -> ClientConfig:
    return _config


def set_config(config: ClientConfig) -> None:
    global _config
    _config = config
