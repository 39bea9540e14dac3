from typing import Optional

import requests

from .log import LOGGER
from .status import HostSanityStatusData


def fetch_host_sanity(url: str, timeout: float = 10) -> Optional[HostSanityStatusData]:
    """Fetch a remote host-sanity report, or None if it is unavailable."""
    try:
        r = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        LOGGER.warning("host sanity fetch failed url=%s error=%s", url, e)
        return None
    if r.status_code != 200:
        LOGGER.warning("host sanity fetch url=%s status=%s body=%s", url, r.status_code, r.text)
        return None
    try:
        data = r.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return HostSanityStatusData.from_dict(data)
    except (TypeError, ValueError) as e:
        LOGGER.warning("host sanity payload invalid url=%s error=%s", url, e)
        return None
