"""
Tests for laws.py - e-Gov 法令の変換と Markdown 出力

ネットワークには接続しない（FakeClient で XML を返す）。
"""
import pytest

from kansuji.core.laws import LawConverter, load_targets
from kansuji.utils.markdown import read_markdown_file

LAW_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Law><LawNum>令和五年法律第十号</LawNum><LawBody><LawTitle>テスト法</LawTitle>\
<MainProvision><Article Num="1"><ArticleCaption>（目的）</ArticleCaption>\
<ArticleTitle>第一条</ArticleTitle><Paragraph Num="1"><ParagraphNum/>\
<ParagraphSentence><Sentence>この法律は、別表第一に定める三箇所に適用する。</Sentence>\
</ParagraphSentence></Paragraph></Article></MainProvision></LawBody></Law>"""


class FakeClient:
    def __init__(self):
        self.calls = []

    def fetch_law_xml(self, law_id):
        self.calls.append(law_id)
        if law_id == "BAD":
            raise RuntimeError(f"Failed to fetch law {law_id} from both v1 and v2 APIs")
        return LAW_XML


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def converter(tmp_path, client):
    return LawConverter(tmp_path / "out", client=client)


class TestConvertLaw:

    def test_writes_frontmatter(self, converter):
        path = converter.convert_law("TESTLAW")
        doc = read_markdown_file(path)
        assert doc.metadata["law_id"] == "TESTLAW"
        assert doc.metadata["title"] == "テスト法"
        assert doc.metadata["law_num"] == "令和5年法律第10号"
        assert doc.metadata["changed_nodes"] == 3

    def test_body_is_converted(self, converter):
        doc = read_markdown_file(converter.convert_law("TESTLAW"))
        assert "# テスト法" in doc.body
        assert "## 第1条 （目的）" in doc.body
        assert "この法律は、別表第1に定める3か所に適用する。" in doc.body

    def test_existing_output_skipped(self, converter, client):
        converter.convert_law("TESTLAW")
        assert converter.convert_law("TESTLAW") is None
        assert client.calls == ["TESTLAW"]

    def test_force_reconverts(self, tmp_path, client):
        LawConverter(tmp_path, client=client).convert_law("TESTLAW")
        path = LawConverter(tmp_path, client=client, force=True).convert_law("TESTLAW")
        assert path is not None
        assert client.calls == ["TESTLAW", "TESTLAW"]


class TestRun:

    def test_failures_are_counted_not_raised(self, converter):
        assert converter.run(["TESTLAW", "BAD"]) == 1

    def test_no_targets(self, converter):
        assert converter.run([]) == 0


class TestLoadTargets:

    def test_targets_key(self, tmp_path):
        path = tmp_path / "targets.yaml"
        path.write_text("targets:\n  - 140AC0000000045\n  - 129AC0000000089\n", encoding="utf-8")
        assert load_targets(path) == ["140AC0000000045", "129AC0000000089"]

    def test_bare_list(self, tmp_path):
        path = tmp_path / "targets.yaml"
        path.write_text("- 140AC0000000045\n", encoding="utf-8")
        assert load_targets(path) == ["140AC0000000045"]

    def test_missing_or_empty(self, tmp_path):
        assert load_targets(tmp_path / "missing.yaml") == []
        path = tmp_path / "empty.yaml"
        path.write_text("targets: []", encoding="utf-8")
        assert load_targets(path) == []
