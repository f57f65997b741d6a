"""OAuth token models."""

from pydantic import BaseModel, Field


class RequestToken(BaseModel):
    """OAuth request token (first leg of the handshake)."""

    token: str = Field(min_length=1, description="Request token value")
    token_secret: str = Field(min_length=1, description="Request token secret")
    authorization_url: str = Field(description="URL the store owner must visit to approve access")


class AccessToken(BaseModel):
    """OAuth access token used to sign every resource call."""

    token: str = Field(min_length=1, description="Access token value")
    token_secret: str = Field(min_length=1, description="Access token secret")

    model_config = {"frozen": True}
