"""Load a results tree from a file, stdin or URL."""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import httpx
from loguru import logger

from . import __version__
from .errors import ResultsLoadError
from .models import Results


DEFAULT_HEADERS = {
    "User-Agent": f"audit-printer/{__version__}",
    "Accept": "application/json",
}


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_json(url: str, timeout: float = 30.0, client: Optional[httpx.Client] = None) -> Any:
    """Fetch a JSON document over HTTP."""
    owns_client = client is None
    if owns_client:
        client = httpx.Client(headers=DEFAULT_HEADERS, timeout=timeout, follow_redirects=True)

    try:
        response = client.get(url)
        response.raise_for_status()
        return response.json()
    except httpx.TimeoutException:
        raise ResultsLoadError(f"Timeout after {timeout}s fetching {url}") from None
    except httpx.HTTPStatusError as e:
        raise ResultsLoadError(f"HTTP {e.response.status_code} fetching {url}") from e
    except httpx.RequestError as e:
        raise ResultsLoadError(f"Request failed: {e}") from e
    except ValueError as e:
        raise ResultsLoadError(f"Invalid JSON from {url}: {e}") from e
    finally:
        if owns_client:
            client.close()


def read_json(source: str) -> Any:
    """Read a JSON document from a path, or stdin for "-"."""
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise ResultsLoadError(f"Cannot read {source}: {e}") from e
    except UnicodeDecodeError as e:
        raise ResultsLoadError(f"{source} is not valid UTF-8: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ResultsLoadError(f"Invalid JSON in {source}: {e}") from e


def load_results(source: str, timeout: float = 30.0, client: Optional[httpx.Client] = None) -> Results:
    """Load results from a file path, "-" (stdin) or an http(s) URL.

    Args:
        source: Where to read the results JSON from
        timeout: Request timeout in seconds for URLs
        client: Optional httpx client to reuse for URLs

    Returns:
        The parsed results tree
    """
    logger.debug(f"Loading results from {source}")
    if is_url(source):
        data = fetch_json(source, timeout=timeout, client=client)
    else:
        data = read_json(source)
    return Results.from_dict(data)
