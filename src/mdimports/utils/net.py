from __future__ import annotations

import os
import ssl
from typing import Optional

DEFAULT_UA: str = 'mdimports/1.0'

DEFAULT_ACCEPT: str = 'text/markdown, application/json, text/plain, */*'


def ssl_context_for(url: str) -> Optional[ssl.SSLContext]:
    """Return a permissive SSL context when MDIMPORTS_INSECURE_TLS=1 and the URL is HTTPS."""
    if not url.lower().startswith('https'):
        return None
    if os.getenv('MDIMPORTS_INSECURE_TLS') == '1':
        ctx = ssl.create_default_context()
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        return ctx
    return None
