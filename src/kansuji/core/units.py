"""
kansuji: 単位・助数詞の記号化

物理単位は記号に置き換え（キロメートル → km, 平方メートル → m²）、
助数詞（倍・枚・回…）は漢字のまま残す。
"""

import re
from types import MappingProxyType
from typing import List, Mapping

# 修飾子（平方・立方）は記号を末尾に付ける
UNIT_MODIFIERS: Mapping[str, str] = MappingProxyType({
    '平方': '²',
    '立方': '³',
})

UNIT_PREFIXES: Mapping[str, str] = MappingProxyType({
    'ギガ': 'G',
    'メガ': 'M',
    'キロ': 'k',
    'センチ': 'c',
    'ミリ': 'm',
})

UNIT_BASES: Mapping[str, str] = MappingProxyType({
    # 物理単位
    'メートル': 'm',
    'メートル毎時': 'm/h',
    'メートル毎分': 'm/min',
    'メートル毎秒': 'm/s',
    'メートル毎秒毎秒': 'm/s²',
    'グラム': 'g',
    'トン': 't',
    'リットル': 'L',
    'ニュートン': 'N',
    'ジュール': 'J',
    'ワット': 'W',
    'パーセント': '%',
    'パスカル': 'Pa',
    'ルクス': 'lx',
    'グレイ': 'Gy',
    'デシベル': 'dB',
    'オーム': 'Ω',
    'ヘクタール': 'ha',
    # 助数詞（算用数字にしても違和感のないもの）
    '倍': '倍',
    '枚': '枚',
    '回': '回',
    '個': '個',
    '点': '点',
    '冊': '冊',
})


def _alternation(keys) -> str:
    # 長いものから並べる（メートル毎秒毎秒 を メートル より先に試す）
    return '|'.join(re.escape(k) for k in sorted(keys, key=len, reverse=True))


# 単位1個分: (平方|立方)?(ギガ|…|ミリ)?(基本単位)
UNIT_TOKEN = (
    f'(?:{_alternation(UNIT_MODIFIERS)})?'
    f'(?:{_alternation(UNIT_PREFIXES)})?'
    f'(?:{_alternation(UNIT_BASES)})'
)
UNIT_TOKEN_PATTERN = re.compile(UNIT_TOKEN)


def convert_unit_to_symbol(unit: str) -> str:
    """
    単位トークンを記号に変換

    修飾子・接頭辞はそれぞれ先頭から最大1つだけ取り除き、残りを
    基本単位表で引く。表にない場合は入力をそのまま返す（変換しない合図）。

    Args:
        unit: 単位文字列（例: '平方キロメートル'）

    Returns:
        記号（例: 'km²'）。助数詞は漢字のまま（'倍' → '倍'）

    Examples:
        >>> convert_unit_to_symbol('キロメートル')
        'km'
        >>> convert_unit_to_symbol('平方メートル')
        'm²'
        >>> convert_unit_to_symbol('部')
        '部'
    """
    current = unit
    suffix = ''
    prefix = ''

    for key, symbol in UNIT_MODIFIERS.items():
        if current.startswith(key):
            suffix = symbol
            current = current[len(key):]
            break

    for key, symbol in UNIT_PREFIXES.items():
        if current.startswith(key):
            prefix = symbol
            current = current[len(key):]
            break

    if current in UNIT_BASES:
        return f"{prefix}{UNIT_BASES[current]}{suffix}"
    return unit


def split_unit_tokens(text: str) -> List[str]:
    """
    連続した単位（ニュートンメートル など）を単位トークンごとに分割

    先頭から最長一致で切り出す。単位として読めない残りがあれば、
    その部分は1つのトークンとして末尾に残す。

    Examples:
        >>> split_unit_tokens('ニュートンメートル')
        ['ニュートン', 'メートル']
        >>> split_unit_tokens('メートル毎秒毎秒')
        ['メートル毎秒毎秒']
    """
    tokens = []
    pos = 0
    while pos < len(text):
        m = UNIT_TOKEN_PATTERN.match(text, pos)
        if not m or not m.group(0):
            tokens.append(text[pos:])
            break
        tokens.append(m.group(0))
        pos = m.end()
    return tokens
