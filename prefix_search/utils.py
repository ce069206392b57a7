# prefix_search/utils.py

import json
import requests

from prefix_search.paths import HTTP_TIMEOUT


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def join_source(base: str, name: str) -> str:
    """
    Join an artifact file name onto a directory or a base URL.
    """
    if is_url(base):
        return base.rstrip("/") + "/" + name
    return f"{base.rstrip('/')}/{name}" if base else name


def load_json(source: str, timeout=HTTP_TIMEOUT):
    """
    Load one JSON artifact from disk or over HTTP.
    Args:
        source: str, file path or http(s) URL
    Returns:
        the decoded JSON value
    Raises:
        OSError / requests.RequestException / ValueError on failure
    """
    if is_url(source):
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(data, path):
    """
    Save a JSON artifact to disk (used for fixtures and exports).
    Args:
        data: any JSON-serializable value
        path: str, file path
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
    print(f"Saved {path}")
