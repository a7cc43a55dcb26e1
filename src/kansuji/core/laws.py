"""
LawConverter

e-Gov から法令XMLを取得し、全テキストノードの漢数字を変換して
Markdown（YAMLフロントマター付き）として書き出す。
"""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml
from bs4 import BeautifulSoup
from tqdm import tqdm

from .textwalk import convert_soup
from ..client.egov import EGovClient
from ..utils.fs import sanitize_filename
from ..utils.markdown import MarkdownDocument, read_markdown_file, write_markdown_file

logger = logging.getLogger(__name__)


def load_targets(path: Path) -> List[str]:
    """targets.yaml を読む。`targets: [...]` 形式と素のリスト形式の両方を受け付ける"""
    if not path.exists():
        return []
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if isinstance(data, dict):
        data = data.get("targets")
    if not isinstance(data, list):
        return []
    return [str(t) for t in data]


def _text(node) -> str:
    return node.get_text().strip() if node is not None else ""


def render_law_body(soup: BeautifulSoup) -> str:
    """条ごとに見出しと項の本文を並べたMarkdown本文を作る"""
    title = _text(soup.find("LawTitle"))
    lines = [f"# {title}", ""] if title else []

    articles = soup.find_all("Article")
    if not articles:
        # 条のない法令（告示など）は本文をそのまま出す
        lines.append(_text(soup.find("LawBody") or soup))
        return "\n".join(lines) + "\n"

    for article in articles:
        heading = " ".join(t for t in (_text(article.find("ArticleTitle")),
                                       _text(article.find("ArticleCaption"))) if t)
        lines.append(f"## {heading}")
        lines.append("")
        for paragraph in article.find_all("Paragraph", recursive=False):
            num = _text(paragraph.find("ParagraphNum"))
            sentences = "".join(s.get_text() for s in paragraph.find_all("Sentence"))
            lines.append(f"{num}　{sentences}" if num else sentences)
        lines.append("")
    return "\n".join(lines)


class LawConverter:
    def __init__(self, out_dir: Path, client: Optional[EGovClient] = None, force: bool = False):
        self.out_dir = out_dir
        self.client = client or EGovClient()
        self.force = force

    def output_path(self, law_id: str) -> Path:
        return self.out_dir / f"{sanitize_filename(law_id)}.md"

    def convert_law(self, law_id: str) -> Optional[Path]:
        """
        Fetch, convert and write one law.

        Returns the written path, or None when an existing output was kept.
        """
        md_path = self.output_path(law_id)
        if not self.force:
            existing = read_markdown_file(md_path)
            if existing and existing.metadata.get("law_id") == law_id:
                logger.info(f"Skip {law_id}: already converted")
                return None

        xml_content = self.client.fetch_law_xml(law_id)
        soup = BeautifulSoup(xml_content, "xml")
        changed = convert_soup(soup)

        metadata = {
            "law_id": law_id,
            "title": _text(soup.find("LawTitle")),
            "law_num": _text(soup.find("LawNum")),
            "changed_nodes": changed,
            "converted_at": date.today().isoformat(),
            "source": f"https://laws.e-gov.go.jp/law/{law_id}",
        }
        write_markdown_file(md_path, MarkdownDocument(metadata=metadata, body=render_law_body(soup)))
        logger.info(f"Wrote {md_path} ({changed} nodes converted)")
        return md_path

    def run(self, law_ids: List[str]) -> int:
        """Convert every law; failures are logged and skipped. Returns the success count."""
        if not law_ids:
            logger.warning("No targets provided/found.")
            return 0

        success_count = 0
        for law_id in tqdm(law_ids, desc="Converting laws"):
            try:
                self.convert_law(law_id)
                success_count += 1
            except Exception as e:
                logger.error(f"Conversion failed for {law_id}: {e}")

        logger.info(f"Converted {success_count}/{len(law_ids)} laws.")
        return success_count
