"""
Tests for converter.py / rules.py - 文脈ルールによる変換

ルールの適用順序と fail-soft（数値化できなければ元の文字列を残す）を固定する。
"""
import pytest

from kansuji import Converter, DEFAULT_RULES, convert
from kansuji.core.rules import rewrite_branch_chain


class TestRuleOrder:

    def test_default_order(self):
        assert Converter().rule_names == (
            "currency",
            "physical_unit",
            "legal_number",
            "table_reference",
            "date_era",
            "counter_period",
            "branch_chain",
        )

    def test_isolated_rule_is_opt_in(self):
        assert "isolated" not in Converter().rule_names
        assert Converter(include_isolated=True).rule_names[-1] == "isolated"

    def test_custom_rules(self):
        converter = Converter(rules=DEFAULT_RULES[2:3])
        assert converter.convert("第十条三十メートル") == "第10条三十メートル"


class TestCurrency:

    def test_with_kin_prefix(self):
        assert convert("金一万五千円を支払う。") == "金1万5,000円を支払う。"

    def test_place_markers_kept(self):
        assert convert("三億二千八百万円") == "3億2,800万円"

    def test_sen(self):
        assert convert("五十銭") == "50銭"

    def test_decimal_amount(self):
        assert convert("一・五円") == "1.5円"

    def test_converted_amount_not_reparsed(self):
        """「1億円」の「億」を読み直さない"""
        assert convert("金一億円") == "金1億円"
        assert convert("金1億円") == "金1億円"


class TestPhysicalUnit:

    @pytest.mark.parametrize("text, expected", [
        ("三十メートル", "30m"),
        ("時速六十キロメートル毎時で走行する。", "時速60km/hで走行する。"),
        ("七百五十ミリメートル。", "750mm。"),
        ("百平方メートル", "100m²"),
        ("二・五キログラム", "2.5kg"),
        ("九・八メートル毎秒毎秒", "9.8m/s²"),
        ("十ニュートンメートル", "10Nm"),
    ])
    def test_symbols(self, text, expected):
        assert convert(text) == expected

    @pytest.mark.parametrize("text, expected", [
        ("千二百三十四倍。", "1234倍。"),
        ("三枚", "3枚"),
        ("第一回", "第1回"),
    ])
    def test_counters_keep_kanji(self, text, expected):
        assert convert(text) == expected

    def test_unparseable_left_alone(self):
        assert convert("十〇メートル") == "十〇メートル"


class TestLegalNumber:

    @pytest.mark.parametrize("text, expected", [
        ("第十条", "第10条"),
        ("第二条第三項第四号", "第2条第3項第4号"),
        ("同二項", "同2項"),
        ("第三編第一章第二節第一款第五目", "第3編第1章第2節第1款第5目"),
        ("第百九十九条", "第199条"),
    ])
    def test_values(self, text, expected):
        assert convert(text) == expected

    def test_branch_chain_after_article(self):
        assert convert("第百二十三条の二の五を参照。") == "第123条の2の5を参照。"


class TestTableReference:

    def test_table_and_form(self):
        text = "別表第一および別記様式第二十二の十一の三に基づく。"
        assert convert(text) == "別表第1および別記様式第22の11の3に基づく。"

    def test_without_dai(self):
        assert convert("別表二") == "別表2"

    def test_katakana_no_normalized(self):
        assert convert("別表第二ノ三") == "別表第2の3"

    def test_unparseable_head_left_alone(self):
        assert convert("別表第十〇の二") == "別表第十〇の二"


class TestDateEra:

    def test_year_month_day(self):
        assert convert("令和五年十二月三日") == "令和5年12月3日"

    def test_heisei(self):
        assert convert("平成三十一年四月一日施行。") == "平成31年4月1日施行。"

    def test_fiscal_year(self):
        assert convert("昭和六十年度") == "昭和60年度"

    def test_positional_year(self):
        assert convert("令和二〇年") == "令和20年"

    def test_gannen_unchanged(self):
        assert convert("明治元年") == "明治元年"

    def test_month_without_era_unchanged(self):
        assert convert("十二月三日") == "十二月三日"


class TestCounterPeriod:

    @pytest.mark.parametrize("text, expected", [
        ("三箇月", "3か月"),
        ("三か月の期間。", "3か月の期間。"),
        ("五ヵ所", "5か所"),
        ("十カ国", "10か国"),
    ])
    def test_counter_normalized_to_ka(self, text, expected):
        assert convert(text) == expected


class TestBranchChain:

    def test_rewrites_each_segment(self):
        assert rewrite_branch_chain("の二の三", "条") == "の2の3"

    def test_katakana_no(self):
        assert rewrite_branch_chain("ノ二", "条") == "の2"

    def test_preceding_kanji_numeral_blocks(self):
        """「の」の直前が漢数字なら別の数字の枝番とみなして変換しない"""
        assert rewrite_branch_chain("の二", "三") == "の二"

    def test_failed_segment_kept(self):
        assert convert("第1条の十〇") == "第1条の十〇"

    def test_standalone_branch_unchanged(self):
        assert convert("三の二") == "三の二"


class TestIsolated:

    def test_disabled_by_default(self):
        assert convert("千三百三十スイス") == "千三百三十スイス"

    def test_enabled(self):
        converter = Converter(include_isolated=True)
        assert converter.convert("千三百三十スイス") == "1330スイス"

    def test_adjacent_kanji_blocks(self):
        converter = Converter(include_isolated=True)
        assert converter.convert("一部") == "一部"


class TestProperties:

    SAMPLES = [
        "第十条",
        "三十メートル",
        "令和五年十二月三日",
        "三箇月",
        "金一億円",
        "金三億二千八百万円を支払う。",
        "別記様式第二十二の十一の三",
        "第百二十三条の二の五",
        "一部",
        "三の二",
        "時速六十キロメートル毎時",
    ]

    @pytest.mark.parametrize("text", [
        "",
        "hello world",
        "ABC 123",
        "こんにちは、世界。",
        "法律の施行",
    ])
    def test_no_kanji_numerals_unchanged(self, text):
        assert convert(text) == text

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = convert(text)
        assert convert(once) == once

    def test_none_passes_through(self):
        assert convert(None) is None

    def test_isolated_bare_numeral_unchanged(self):
        assert convert("一部") == "一部"
