"""
kansuji — 漢数字を公用文の表記に合わせて算用数字へ正規化する。

    >>> from kansuji import convert
    >>> convert('第十条の二')
    '第10条の2'
"""

from .core.converter import Converter, DEFAULT_RULES, convert
from .core.formatter import format_with_place_markers
from .core.numerals import parse_kanji_number
from .core.units import convert_unit_to_symbol

__version__ = "0.1.0"

__all__ = [
    'Converter',
    'DEFAULT_RULES',
    'convert',
    'format_with_place_markers',
    'parse_kanji_number',
    'convert_unit_to_symbol',
]
