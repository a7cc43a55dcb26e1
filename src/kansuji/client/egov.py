from .base import BaseClient
from ..config import EGOV_API_BASE_URL, EGOV_API_V2_BASE_URL
from typing import Any, Optional
from xml.sax.saxutils import escape, quoteattr
import logging
import requests

logger = logging.getLogger(__name__)


def json_to_xml(node: Any) -> str:
    """
    Render the v2 API JSON tree ({"tag", "attr", "children"}) as XML,
    so both API versions can be handled by the same XML walker.
    """
    if isinstance(node, str):
        return escape(node)
    if not isinstance(node, dict):
        return escape(str(node))

    tag = node.get("tag", "")
    attrs = "".join(f" {k}={quoteattr(str(v))}" for k, v in (node.get("attr") or {}).items())
    children = node.get("children") or []
    if not children:
        return f"<{tag}{attrs}/>"
    return f"<{tag}{attrs}>{''.join(json_to_xml(c) for c in children)}</{tag}>"


class EGovClient(BaseClient):
    def __init__(self, **kwargs):
        kwargs.setdefault("rate_limit_sec", 0.5)
        super().__init__(**kwargs)
        self.base_url = EGOV_API_BASE_URL
        self.base_url_v2 = EGOV_API_V2_BASE_URL
        self.timeout_v2 = 60
        self.timeout_v1 = 180

    def fetch_law_xml(self, law_id: str) -> str:
        """
        Fetch the full text XML of a law.

        v2 API first, v1 API as fallback. Results are cached per law ID.
        Raises RuntimeError when both versions fail.
        """
        cache_key = f"egov_law_{law_id}"
        cached = self.load_cached(cache_key)
        if cached is not None:
            return cached

        xml_content = self._fetch_v2(law_id)
        if xml_content is None:
            logger.info(f"Falling back to v1 API for {law_id}")
            xml_content = self._fetch_v1(law_id)
        if xml_content is None:
            raise RuntimeError(f"Failed to fetch law {law_id} from both v1 and v2 APIs")

        self.save_cached(cache_key, xml_content)
        return xml_content

    def _fetch_v2(self, law_id: str) -> Optional[str]:
        url = f"{self.base_url_v2}/law_data/{law_id}"
        try:
            data = self.get(url, timeout=self.timeout_v2)
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"v2 API error for {law_id}: {type(e).__name__}: {e}")
            return None

        law_full_text = data.get("law_full_text") if isinstance(data, dict) else None
        if not law_full_text:
            logger.warning(f"v2 API returned no law_full_text for {law_id}")
            return None
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{json_to_xml(law_full_text)}'

    def _fetch_v1(self, law_id: str) -> Optional[str]:
        url = f"{self.base_url}/lawdata/{law_id}"
        try:
            return self.get(url, timeout=self.timeout_v1, response_type="text")
        except requests.RequestException as e:
            logger.error(f"v1 API error for {law_id}: {type(e).__name__}: {e}")
            return None
