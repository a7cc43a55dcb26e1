"""
kansuji: ルールディスパッチャ

入力文字列に対してルールを固定順で適用し、変換後の文字列を返す。
各ルールは直前のルールの出力全体を走査し直す。

適用順序:
1. 金額 / 2. 物理単位・助数詞   … 末尾の円・単位が強い目印になる
3. 法令番号 / 4. 別表・別記様式 / 5. 日付・元号 / 6. 期間・箇所
7. 枝番連鎖                      … 条・項などの直後の「の二」を処理
"""

import logging
from typing import Iterable, Optional, Tuple

from .rules import (
    BRANCH_CHAIN,
    COUNTER_PERIOD,
    CURRENCY,
    DATE_ERA,
    ISOLATED,
    LEGAL_NUMBER,
    PHYSICAL_UNIT,
    TABLE_REFERENCE,
    Rule,
)

logger = logging.getLogger(__name__)

DEFAULT_RULES: Tuple[Rule, ...] = (
    CURRENCY,
    PHYSICAL_UNIT,
    LEGAL_NUMBER,
    TABLE_REFERENCE,
    DATE_ERA,
    COUNTER_PERIOD,
    BRANCH_CHAIN,
)


class Converter:
    """
    漢数字の正規化器

    ルール列は生成時に固定され、以後は変更しない。状態を持たないので
    複数スレッドから同じインスタンスを呼び出してよい。

    Args:
        rules: 適用するルール列（順序どおりに適用）
        include_isolated: True のとき、最後に孤立した漢数字のルールを追加する
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None, include_isolated: bool = False):
        rules = tuple(DEFAULT_RULES if rules is None else rules)
        if include_isolated:
            rules += (ISOLATED,)
        self.rules: Tuple[Rule, ...] = rules

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def convert(self, text: Optional[str]) -> Optional[str]:
        """文字列中の漢数字を変換する。何もマッチしなければ入力をそのまま返す"""
        if not text:
            return text

        processed = text
        for rule in self.rules:
            processed = rule.apply(processed)

        if processed != text:
            logger.debug(f"Converted: {text!r} -> {processed!r}")
        return processed


_default_converter = Converter()


def convert(text: Optional[str]) -> Optional[str]:
    """
    既定のルール列で漢数字を算用数字に変換

    例外を送出しない。変換済みのテキストに再度適用しても結果は変わらない。

    Examples:
        >>> convert('第十条')
        '第10条'
        >>> convert('令和五年十二月三日')
        '令和5年12月3日'
        >>> convert('一部')
        '一部'
    """
    return _default_converter.convert(text)
