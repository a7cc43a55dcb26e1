"""
kansuji: 文脈ルール定義

各ルールは「正規表現パターン」と「置換アクション」の組。
アクションは数値化に失敗したらマッチした文字列をそのまま返す（fail-soft）。

ルールの適用順序は converter.DEFAULT_RULES で固定する。順序自体が
変換結果の正しさに関わるので、並べ替える場合はテストを必ず確認すること。
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from .formatter import format_number
from .numerals import parse_kanji_number
from .units import UNIT_TOKEN, convert_unit_to_symbol, split_unit_tokens
from ..utils.patterns import (
    BRANCH_SEGMENT_PATTERN,
    NUM_FULL,
    NUM_INT,
    NUM_SMALL,
    follows_ascii_number,
    is_kanji_numeral,
)

logger = logging.getLogger(__name__)

LEGAL_SUFFIXES = '条項号編章節款目'
ERA_NAMES = ('明治', '大正', '昭和', '平成', '令和')


@dataclass(frozen=True)
class Rule:
    """正規表現パターンと置換アクションの組"""
    name: str
    pattern: re.Pattern[str]
    action: Callable[[re.Match[str]], str]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.action, text)


def _unchanged(match: re.Match[str], token: str) -> str:
    logger.debug(f"Unparseable numeral {token!r} left as-is in {match.group(0)!r}")
    return match.group(0)


def rewrite_branch_chain(chain: str, preceding: str = '') -> str:
    """
    枝番の連鎖（の二の三）を算用数字に変換

    各セグメントは独立に変換する。ただし「の」の直前の文字が漢数字の
    場合は、別の数字の枝番とみなしてそのセグメントは変換しない。
    直前の文字は書き換え後のテキストで判定する。

    Args:
        chain: 「の/ノ＋漢数字」の繰り返し
        preceding: chain の直前にある（書き換え後の）文字

    Returns:
        変換後の文字列。ノ は の にそろえる

    Examples:
        >>> rewrite_branch_chain('の二の三', '条')
        'の2の3'
        >>> rewrite_branch_chain('の二', '三')
        'の二'
    """
    result = ''
    last = preceding[-1:] if preceding else ''
    for m in BRANCH_SEGMENT_PATTERN.finditer(chain):
        value = parse_kanji_number(m.group(1))
        if value is None or is_kanji_numeral(last):
            result += m.group(0)
        else:
            result += f"の{value}"
        last = result[-1]
    return result


# ==============================================================================
# 1. 金額（円・銭）
# ==============================================================================

CURRENCY_PATTERN = re.compile(f'(金)?({NUM_FULL})(円|銭)')


def _replace_currency(match: re.Match[str]) -> str:
    prefix, token, suffix = match.group(1) or '', match.group(2), match.group(3)
    # 「1億円」の「億」を読み直さない
    if follows_ascii_number(match.string, match.start(2)):
        return match.group(0)
    value = parse_kanji_number(token)
    if value is None:
        return _unchanged(match, token)
    return f"{prefix}{format_number(value)}{suffix}"


# ==============================================================================
# 2. 物理単位・助数詞
# ==============================================================================

PHYSICAL_PATTERN = re.compile(f'({NUM_FULL})((?:{UNIT_TOKEN})+)')


def _replace_physical(match: re.Match[str]) -> str:
    token, unit = match.group(1), match.group(2)
    if follows_ascii_number(match.string, match.start(1)):
        return match.group(0)
    value = parse_kanji_number(token)
    if value is None:
        return _unchanged(match, token)
    symbol = ''.join(convert_unit_to_symbol(u) for u in split_unit_tokens(unit))
    return f"{value}{symbol}"


# ==============================================================================
# 3. 法令番号（第一条、同二項）
# ==============================================================================

LEGAL_PATTERN = re.compile(f'(第|同)({NUM_INT})([{LEGAL_SUFFIXES}])')


def _replace_legal(match: re.Match[str]) -> str:
    prefix, token, suffix = match.groups()
    value = parse_kanji_number(token)
    if value is None:
        return _unchanged(match, token)
    return f"{prefix}{value}{suffix}"


# ==============================================================================
# 4. 別表・別記様式（別表第一、別記様式第二十二の十一の三）
# ==============================================================================

TABLE_PATTERN = re.compile(
    f'(別表|別記様式)(第)?({NUM_INT})((?:[のノ]{NUM_SMALL})*)'
)


def _replace_table(match: re.Match[str]) -> str:
    prefix, dai, token, chain = match.group(1), match.group(2) or '', match.group(3), match.group(4)
    value = parse_kanji_number(token)
    if value is None:
        return _unchanged(match, token)
    head = f"{prefix}{dai}{value}"
    if not chain:
        return head
    return head + rewrite_branch_chain(chain, head)


# ==============================================================================
# 5. 日付・元号（令和五年十二月三日）
# ==============================================================================

DATE_PATTERN = re.compile(
    f'({"|".join(ERA_NAMES)})({NUM_SMALL})(年度|年|月|日)'
    f'((?:{NUM_SMALL}[月日])*)'
)
DATE_SEGMENT_PATTERN = re.compile(f'({NUM_SMALL})([月日])')


def _replace_date_segment(match: re.Match[str]) -> str:
    value = parse_kanji_number(match.group(1))
    if value is None:
        return _unchanged(match, match.group(1))
    return f"{value}{match.group(2)}"


def _replace_date(match: re.Match[str]) -> str:
    era, token, suffix, rest = match.groups()
    value = parse_kanji_number(token)
    if value is None:
        head = _unchanged(match, token)[:len(era) + len(token) + len(suffix)]
    else:
        head = f"{era}{value}{suffix}"
    # 月・日は年と独立に変換する
    return head + DATE_SEGMENT_PATTERN.sub(_replace_date_segment, rest)


# ==============================================================================
# 6. 期間・箇所（三箇月 → 3か月）
# ==============================================================================

COUNTER_PATTERN = re.compile(f'({NUM_SMALL})(箇|か|カ|ヵ)(月|所|国)')


def _replace_counter(match: re.Match[str]) -> str:
    token, _counter, suffix = match.groups()
    value = parse_kanji_number(token)
    if value is None:
        return _unchanged(match, token)
    return f"{value}か{suffix}"


# ==============================================================================
# 7. 枝番連鎖（第1条の二の三 → 第1条の2の3）
# ==============================================================================

BRANCH_CHAIN_PATTERN = re.compile(f'([{LEGAL_SUFFIXES}])((?:[のノ]{NUM_SMALL})+)')


def _replace_branch_chain(match: re.Match[str]) -> str:
    suffix, chain = match.groups()
    return suffix + rewrite_branch_chain(chain, suffix)


# ==============================================================================
# 8. 孤立した漢数字（既定では無効）
# ==============================================================================

ISOLATED_PATTERN = re.compile(NUM_FULL)
_IDEOGRAPH_PATTERN = re.compile(r'[一-龠々〆]')


def _is_ideograph(char: str) -> bool:
    return bool(char) and bool(_IDEOGRAPH_PATTERN.fullmatch(char))


def _replace_isolated(match: re.Match[str]) -> str:
    text = match.string
    before = text[match.start() - 1] if match.start() > 0 else ''
    after = text[match.end()] if match.end() < len(text) else ''
    # 「一部」のように前後が漢字なら語の一部とみなす
    if _is_ideograph(before) or _is_ideograph(after):
        return match.group(0)
    if follows_ascii_number(text, match.start()):
        return match.group(0)
    value = parse_kanji_number(match.group(0))
    if value is None:
        return _unchanged(match, match.group(0))
    return str(value)


CURRENCY = Rule('currency', CURRENCY_PATTERN, _replace_currency)
PHYSICAL_UNIT = Rule('physical_unit', PHYSICAL_PATTERN, _replace_physical)
LEGAL_NUMBER = Rule('legal_number', LEGAL_PATTERN, _replace_legal)
TABLE_REFERENCE = Rule('table_reference', TABLE_PATTERN, _replace_table)
DATE_ERA = Rule('date_era', DATE_PATTERN, _replace_date)
COUNTER_PERIOD = Rule('counter_period', COUNTER_PATTERN, _replace_counter)
BRANCH_CHAIN = Rule('branch_chain', BRANCH_CHAIN_PATTERN, _replace_branch_chain)
ISOLATED = Rule('isolated', ISOLATED_PATTERN, _replace_isolated)
