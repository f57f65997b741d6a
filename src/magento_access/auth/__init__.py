"""OAuth authentication for the Magento REST API."""

from magento_access.auth.flow import AuthorizationFlow, command_launcher
from magento_access.auth.oauth import OAuthSigner
from magento_access.auth.tokens import TokenManager, TokenStore
from magento_access.auth.verifier import FileVerifierSource, VerifierSource

__all__ = [
    "AuthorizationFlow",
    "FileVerifierSource",
    "OAuthSigner",
    "TokenManager",
    "TokenStore",
    "VerifierSource",
    "command_launcher",
]
