"""
kansuji: 金額フォーマッター

万・億・兆を残し、各4桁のまとまりの中だけカンマ区切りにする。
例: 123456789 → 1億2,345万6,789
"""

from decimal import Decimal
from typing import List, Union

PLACE_MARKERS = ('', '万', '億', '兆')
CHUNK = 10000


def format_with_place_markers(n: int) -> str:
    """
    整数を「万・億・兆＋カンマ区切り」形式の文字列にする

    値が0のまとまりは出力しない（「0万」は作らない）。
    兆より上の位は兆のまとまりにまとめてカンマ区切りで出す。

    Args:
        n: 0以上の整数

    Returns:
        フォーマット済み文字列

    Examples:
        >>> format_with_place_markers(123456789)
        '1億2,345万6,789'
        >>> format_with_place_markers(100000000)
        '1億'
        >>> format_with_place_markers(0)
        '0'
    """
    if n == 0:
        return '0'

    parts: List[str] = []
    for index, marker in enumerate(PLACE_MARKERS):
        if index == len(PLACE_MARKERS) - 1:
            chunk, n = n, 0
        else:
            n, chunk = divmod(n, CHUNK)
        if chunk:
            parts.insert(0, f"{chunk:,}{marker}")
        if not n:
            break

    return ''.join(parts)


def format_number(value: Union[int, Decimal]) -> str:
    """整数は万・億・兆付きで、小数は単純なカンマ区切りで出力する"""
    if isinstance(value, int):
        return format_with_place_markers(value)
    return f"{value:,}"
