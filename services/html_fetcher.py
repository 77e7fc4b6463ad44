import logging
from typing import Optional

import httpx

from config.settings import settings
from exceptions import RecipeFetchError

logger = logging.getLogger(__name__)


async def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """
    Download a recipe page.

    Args:
        url: Page URL (http or https)
        timeout: Seconds before giving up, defaults to settings.fetch_timeout

    Raises:
        RecipeFetchError: Bad URL, network failure or non-2xx response
    """
    if not url.startswith(("http://", "https://")):
        raise RecipeFetchError(url, "URL must start with http:// or https://")

    headers = {"User-Agent": settings.user_agent}
    try:
        async with httpx.AsyncClient(timeout=timeout or settings.fetch_timeout, headers=headers) as client:
            response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
            html_content = response.text
    except httpx.HTTPStatusError as e:
        raise RecipeFetchError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise RecipeFetchError(url, f"{type(e).__name__}: {str(e)}") from e

    logger.debug(f"Fetched {len(html_content)} characters from {url}")
    return html_content
