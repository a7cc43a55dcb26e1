import hashlib
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from ..config import CACHE_DIR, USER_AGENT

logger = logging.getLogger(__name__)


class BaseClient:
    """HTTP client with a per-key JSON file cache and a minimum request interval."""

    def __init__(self, cache_dir: Path = CACHE_DIR, rate_limit_sec: float = 1.0):
        self.cache_dir = cache_dir
        self.rate_limit_sec = rate_limit_sec
        self.last_request_time = 0.0
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def _get_cache_path(self, key: str) -> Path:
        hashed = hashlib.md5(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{hashed}.json"

    def load_cached(self, key: str) -> Optional[Any]:
        cache_path = self._get_cache_path(key)
        if not cache_path.exists():
            return None
        try:
            with open(cache_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.warning(f"Corrupted cache file: {cache_path}")
            return None
        logger.debug(f"Cache hit: {key}")
        return data

    def save_cached(self, key: str, data: Any):
        with open(self._get_cache_path(key), "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def _wait(self):
        elapsed = time.time() - self.last_request_time
        if elapsed < self.rate_limit_sec:
            time.sleep(self.rate_limit_sec - elapsed)

    def get(self, url: str, params: Optional[Dict] = None, timeout: float = 60,
            response_type: str = "json") -> Any:
        """GET with rate limiting. Raises requests.RequestException on failure."""
        self._wait()
        logger.info(f"Fetching: {url}")
        try:
            resp = self.session.get(url, params=params, timeout=timeout)
            resp.raise_for_status()
        finally:
            self.last_request_time = time.time()
        return resp.json() if response_type == "json" else resp.text
