"""
共通正規表現パターン定義

このモジュールは、複数のモジュールで使用される漢数字の文字クラスと
正規表現パターンを一元管理するための薄いユーティリティです。

設計方針:
- パターンとシンプルなヘルパ関数のみを提供
- ビジネスロジックは持たない
- 呼び出し側に依存しない（numerals.py, rules.py 双方から安全に使用可能）
"""

import re

# ==============================================================================
# 漢数字の文字集合
# ==============================================================================

DIGIT_CHARS = '〇一二三四五六七八九'
SMALL_UNIT_CHARS = '十百千'
LARGE_UNIT_CHARS = '万億兆'
DECIMAL_SEPARATOR = '・'

# 漢数字として認識する全文字（小数点を除く）
KANJI_NUMERAL_CHARS = DIGIT_CHARS + SMALL_UNIT_CHARS + LARGE_UNIT_CHARS

# ==============================================================================
# NumeralToken の文字クラス
# ==============================================================================

# 金額・物理単位用: 万億兆と小数点を含む
NUM_FULL = f'[{KANJI_NUMERAL_CHARS}{DECIMAL_SEPARATOR}]+'

# 法令番号・別表の見出し番号用: 小数点を含まない
NUM_INT = f'[{KANJI_NUMERAL_CHARS}]+'

# 日付・期間・枝番用: 千までの位のみ
NUM_SMALL = f'[{DIGIT_CHARS}{SMALL_UNIT_CHARS}]+'

# 枝番1セグメント（の二、ノ三）
# グループ1: 漢数字
BRANCH_SEGMENT_PATTERN = re.compile(f'[のノ]({NUM_SMALL})')

# 半角数字のみ（小数点1つまで）
ASCII_NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?')

# 変換済み出力の直後とみなす文字
_ASCII_NUMBER_TAIL = frozenset('0123456789,.')


def is_kanji_numeral(char: str) -> bool:
    """
    1文字が漢数字（〇〜九、十百千、万億兆）かどうかを判定する

    Examples:
        >>> is_kanji_numeral('三')
        True
        >>> is_kanji_numeral('の')
        False
    """
    return len(char) == 1 and char in KANJI_NUMERAL_CHARS


def follows_ascii_number(text: str, index: int) -> bool:
    """text[index] の直前が半角数字またはカンマかどうか（変換済みの数値の続きか）"""
    return index > 0 and text[index - 1] in _ASCII_NUMBER_TAIL
