"""OAuth 1.0a request signing for the Magento REST API."""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

import httpx

from magento_access.config import REST_API_ROOT

if TYPE_CHECKING:
    from magento_access.auth.tokens import TokenManager
    from magento_access.config import MagentoConfig

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def percent_encode(value: str) -> str:
    """RFC 3986 percent-encoding as required by OAuth 1.0a."""
    return quote(value, safe="~")


def _default_nonce() -> str:
    return secrets.token_hex(16)


def normalize_url(url: str) -> str:
    """Base string URI: lower-case scheme and host, no default port, no query."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if parts.port and parts.port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{parts.port}"
    return urlunsplit((scheme, host, parts.path or "/", "", ""))


def join_resource_url(base_url: str, resource_path: str) -> str:
    """Join store URL, REST root and resource path, skipping blank segments."""
    segments = [base_url.rstrip("/"), REST_API_ROOT, resource_path.strip("/")]
    return "/".join(s for s in segments if s.strip())


class OAuthSigner:
    """Builds HMAC-SHA1 signed requests.

    Consumer credentials and token secrets come from the TokenManager.
    Nonce and timestamp sources are injectable so a signature can be
    reproduced exactly.
    """

    def __init__(
        self,
        config: MagentoConfig,
        token_manager: TokenManager,
        *,
        nonce_factory: Callable[[], str] = _default_nonce,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self.token_manager = token_manager
        self._nonce_factory = nonce_factory
        self._clock = clock

    def resource_url(self, resource_path: str) -> str:
        """Full REST URL for ``resource_path``."""
        return join_resource_url(self.config.base_url, resource_path)

    def sign(self, method: str, resource_path: str, token: str) -> httpx.Request:
        """Build a signed request for a REST resource.

        Args:
            method: HTTP method
            resource_path: Path below the REST root (e.g. "products/7")
            token: Access token; its secret is looked up in the TokenManager

        Returns:
            An httpx.Request carrying the Authorization and Accept headers
        """
        url = self.resource_url(resource_path)
        headers = self.authorization_headers(method, url, token=token)
        headers["Accept"] = ACCEPT_HEADER
        return httpx.Request(method.upper(), url, headers=headers)

    def authorization_headers(
        self,
        method: str,
        url: str,
        *,
        token: str | None = None,
        extra_oauth_params: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Compute the OAuth Authorization header for an arbitrary URL.

        Query parameters in ``url`` take part in the signature, and the
        path is signed in its percent-encoded form. With no token the
        empty token secret is used (request-token leg).
        """
        # Sign the URL as httpx will put it on the wire
        url = str(httpx.URL(url))
        oauth_params = self._build_oauth_params()
        if token:
            oauth_params["oauth_token"] = token
        if extra_oauth_params:
            oauth_params.update(extra_oauth_params)

        token_secret = self.token_manager.secret_for(token) if token else ""

        oauth_params["oauth_signature"] = self.generate_signature(
            method=method,
            url=url,
            oauth_params=oauth_params,
            token_secret=token_secret,
        )
        return {"Authorization": build_auth_header(oauth_params)}

    def generate_signature(
        self,
        method: str,
        url: str,
        oauth_params: Mapping[str, str],
        token_secret: str,
    ) -> str:
        """Generate OAuth 1.0a HMAC-SHA1 signature."""
        base_string = signature_base_string(method, url, oauth_params)
        signing_key = (
            f"{percent_encode(self.token_manager.consumer_secret)}&{percent_encode(token_secret)}"
        )
        digest = hmac.new(
            signing_key.encode(),
            base_string.encode(),
            hashlib.sha1,
        ).digest()
        return base64.b64encode(digest).decode()

    def _build_oauth_params(self) -> dict[str, str]:
        """Build base OAuth parameters."""
        return {
            "oauth_consumer_key": self.token_manager.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": str(int(self._clock())),
            "oauth_version": "1.0",
        }


def signature_base_string(method: str, url: str, oauth_params: Mapping[str, str]) -> str:
    """Signature base string: METHOD&encoded-url&encoded-params."""
    query_params = parse_qsl(urlsplit(url).query, keep_blank_values=True)
    pairs = [
        (percent_encode(k), percent_encode(v))
        for k, v in [*query_params, *oauth_params.items()]
        if k != "oauth_signature"
    ]
    param_string = "&".join(f"{k}={v}" for k, v in sorted(pairs))

    return "&".join(
        [
            method.upper(),
            percent_encode(normalize_url(url)),
            percent_encode(param_string),
        ]
    )


def build_auth_header(oauth_params: Mapping[str, str]) -> str:
    """Build OAuth Authorization header."""
    auth_parts = [f'{k}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())]
    return "OAuth " + ", ".join(auth_parts)
