"""
kansuji: Markdown/YAMLフロントマター処理ユーティリティ

変換結果を書き出す Markdown ファイル（YAMLフロントマター付き）の
読み書きを一元管理するモジュール。
"""

import yaml
from pathlib import Path
from typing import Dict, Optional, Any
from dataclasses import dataclass


@dataclass
class MarkdownDocument:
    """YAMLフロントマター付きMarkdownドキュメント"""
    metadata: Dict[str, Any]
    body: str

    def to_string(self) -> str:
        """Markdownファイル形式の文字列に変換"""
        return serialize_frontmatter(self.metadata, self.body)


def parse_frontmatter(content: str) -> Optional[MarkdownDocument]:
    """
    YAMLフロントマター付きMarkdownをパース

    Args:
        content: Markdownファイルの内容

    Returns:
        MarkdownDocument オブジェクト、パース失敗時は None

    Examples:
        >>> doc = parse_frontmatter('---\\nlaw_id: test\\n---\\n# Title')
        >>> doc.metadata['law_id']
        'test'
    """
    if not content.startswith('---'):
        return None

    parts = content.split('---', 2)
    if len(parts) < 3:
        return None

    try:
        metadata = yaml.safe_load(parts[1].strip()) or {}
    except yaml.YAMLError:
        return None
    if not isinstance(metadata, dict):
        return None
    return MarkdownDocument(metadata=metadata, body=parts[2])


def serialize_frontmatter(metadata: Dict[str, Any], body: str) -> str:
    """YAMLメタデータと本文をMarkdown形式に結合"""
    yaml_str = yaml.dump(
        metadata,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    ).rstrip()
    return f"---\n{yaml_str}\n---\n{body}"


def read_markdown_file(file_path: Path) -> Optional[MarkdownDocument]:
    """Markdownファイルを読み込んでパース。失敗時は None"""
    try:
        content = file_path.read_text(encoding='utf-8')
    except (IOError, OSError):
        return None
    return parse_frontmatter(content)


def write_markdown_file(file_path: Path, doc: MarkdownDocument, create_parents: bool = True):
    """MarkdownDocument をファイルに書き込む"""
    if create_parents:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(doc.to_string(), encoding='utf-8')
