"""
kansuji ユーティリティモジュール
"""

from .patterns import (
    KANJI_NUMERAL_CHARS,
    NUM_FULL,
    NUM_INT,
    NUM_SMALL,
    is_kanji_numeral,
    follows_ascii_number,
)
from .markdown import (
    MarkdownDocument,
    parse_frontmatter,
    serialize_frontmatter,
    read_markdown_file,
    write_markdown_file,
)

__all__ = [
    # patterns
    'KANJI_NUMERAL_CHARS',
    'NUM_FULL',
    'NUM_INT',
    'NUM_SMALL',
    'is_kanji_numeral',
    'follows_ascii_number',
    # markdown
    'MarkdownDocument',
    'parse_frontmatter',
    'serialize_frontmatter',
    'read_markdown_file',
    'write_markdown_file',
]
