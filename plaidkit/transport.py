"""requests sessions with optional TLS version pinning."""

import ssl
from typing import Optional, Sequence

import requests
from requests.adapters import HTTPAdapter

TLS_VERSION_MAP = {
    "TLSv1": ssl.TLSVersion.TLSv1,
    "TLSv1.1": ssl.TLSVersion.TLSv1_1,
    "TLSv1.2": ssl.TLSVersion.TLSv1_2,
    "TLSv1.3": ssl.TLSVersion.TLSv1_3,
}


class TLSVersionAdapter(HTTPAdapter):
    """HTTPAdapter that only negotiates the given TLS versions.

    The versions are applied as a min/max range on the SSL context, so
    ("TLSv1.2", "TLSv1.3") allows both and ("TLSv1.2",) pins exactly one.
    """

    def __init__(self, ssl_versions: Sequence[str], **kwargs):
        versions = sorted(TLS_VERSION_MAP[version] for version in ssl_versions)
        self.minimum_version = versions[0]
        self.maximum_version = versions[-1]
        # HTTPAdapter.__init__ builds the pool manager, so the range must be set first
        super().__init__(**kwargs)

    def build_ssl_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        context.minimum_version = self.minimum_version
        context.maximum_version = self.maximum_version
        return context

    def init_poolmanager(self, *args, **kwargs):
        kwargs["ssl_context"] = self.build_ssl_context()
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs["ssl_context"] = self.build_ssl_context()
        return super().proxy_manager_for(*args, **kwargs)


def build_session(ssl_versions: Optional[Sequence[str]] = None) -> requests.Session:
    """Create a session, pinning HTTPS to ``ssl_versions`` when given."""
    session = requests.Session()
    if ssl_versions:
        session.mount("https://", TLSVersionAdapter(ssl_versions))
    return session
