"""
kansuji: 漢数字パーサ

漢数字トークン（NumeralToken）を数値に変換するモジュール。
- 位取り記法: 二〇 → 20, 一一 → 11
- 単位付き記法: 二十三 → 23, 三億二千八百万 → 328000000
- 小数: 三・一四 → Decimal('3.14')

パースできない場合は例外を送出せず None を返す。
呼び出し側は None を受け取ったら元のテキストをそのまま残すこと。
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..utils.patterns import ASCII_NUMBER_PATTERN, DECIMAL_SEPARATOR

Number = Union[int, Decimal]

# ==============================================================================
# 漢数字テーブル
# ==============================================================================

KANJI_TO_DIGIT: Mapping[str, int] = MappingProxyType({
    '〇': 0,
    '一': 1,
    '二': 2,
    '三': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
})

UNIT_SMALL: Mapping[str, int] = MappingProxyType({
    '十': 10,
    '百': 100,
    '千': 1000,
})

UNIT_LARGE: Mapping[str, int] = MappingProxyType({
    '万': 10 ** 4,
    '億': 10 ** 8,
    '兆': 10 ** 12,
})


def parse_kanji_number(token: Optional[str]) -> Optional[Number]:
    """
    漢数字トークンを数値に変換

    対応形式:
    - 半角数字: '123' → 123, '1.5' → Decimal('1.5')
    - 小数: 三・一四 → Decimal('3.14')（小数部は一桁ずつ読む）
    - 位取り形式: 二〇 → 20, 一一 → 11（〇を含む、または単位なしの2文字以上）
    - 単位付き形式: 十 → 10, 百二十三 → 123, 三億二千八百万 → 328000000

    Args:
        token: 漢数字文字列

    Returns:
        int または Decimal。認識できない文字を含む場合は None

    Examples:
        >>> parse_kanji_number('二十')
        20
        >>> parse_kanji_number('二〇')
        20
        >>> parse_kanji_number('三・一四')
        Decimal('3.14')
        >>> parse_kanji_number('') is None
        True
    """
    if not token:
        return None

    if ASCII_NUMBER_PATTERN.fullmatch(token):
        return Decimal(token) if '.' in token else int(token)

    if DECIMAL_SEPARATOR in token:
        return _parse_decimal(token)

    if _is_positional(token):
        return _parse_positional(token)

    return _parse_place_value(token)


def _is_positional(token: str) -> bool:
    """位取り記法で読むべきトークンかどうか"""
    if '〇' in token:
        return True
    has_unit = any(c in UNIT_SMALL or c in UNIT_LARGE for c in token)
    return not has_unit and len(token) > 1


def _parse_decimal(token: str) -> Optional[Decimal]:
    """小数点（・）付きの漢数字をパース（三・一四 → 3.14）"""
    parts = token.split(DECIMAL_SEPARATOR)
    if len(parts) != 2:
        return None

    integer_part = parse_kanji_number(parts[0])
    if not isinstance(integer_part, int):
        return None

    fraction = _digits_verbatim(parts[1])
    if not fraction:
        return None

    return Decimal(f"{integer_part}.{fraction}")


def _parse_positional(token: str) -> Optional[int]:
    """位取り形式の漢数字をパース（二〇 → 20）"""
    digits = _digits_verbatim(token)
    return int(digits) if digits else None


def _digits_verbatim(text: str) -> Optional[str]:
    """各文字を数字1桁として連結する。認識できない文字があれば None"""
    result = ''
    for char in text:
        if char not in KANJI_TO_DIGIT:
            return None
        result += str(KANJI_TO_DIGIT[char])
    return result or None


def _parse_place_value(token: str) -> Optional[int]:
    """
    単位付き形式の漢数字をパース

    万・億・兆ごとに区切った「節」の中では十百千を掛け合わせて足し込み、
    節の終わりで大きな単位を掛けて合計に加える。
    """
    total = 0
    section_value = 0
    current_digit: Optional[int] = None

    for char in token:
        if char in KANJI_TO_DIGIT:
            current_digit = KANJI_TO_DIGIT[char]
        elif char in UNIT_SMALL:
            digit = 1 if current_digit is None else current_digit
            section_value += digit * UNIT_SMALL[char]
            current_digit = None
        elif char in UNIT_LARGE:
            if current_digit is not None:
                section_value += current_digit
            if section_value == 0:
                section_value = 1
            total += section_value * UNIT_LARGE[char]
            section_value = 0
            current_digit = None
        else:
            return None

    total += section_value + (current_digit or 0)
    return total
