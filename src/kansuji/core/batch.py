"""
CSV 一括変換チェック

スニペット列を含む CSV を読み込み、各行のスニペットを変換した結果を
「変換結果」列として末尾に追加した CSV を書き出す。
出力は目視検分用（Excel で開けるよう BOM 付き UTF-8）。
"""
import csv
import logging
from pathlib import Path
from typing import Callable, List, Optional

from tqdm import tqdm

from .converter import convert
from ..config import CSV_RESULT_HEADER, CSV_SNIPPET_COLUMN

logger = logging.getLogger(__name__)


def default_output_path(input_path: Path) -> Path:
    """kansuuji.csv -> kansuuji_with_test.csv"""
    return input_path.with_name(f"{input_path.stem}_with_test{input_path.suffix}")


class CsvBatchConverter:
    def __init__(self, column: int = CSV_SNIPPET_COLUMN,
                 converter: Optional[Callable[[str], str]] = None):
        if column < 0:
            raise ValueError(f"column must be >= 0: {column}")
        self.column = column
        self.converter = converter or convert

    def convert_rows(self, rows: List[List[str]]) -> List[List[str]]:
        """Append the converted snippet to every row. The first row is the header."""
        if not rows:
            return []

        header, *body = rows
        output = [header + [CSV_RESULT_HEADER]]
        for row in tqdm(body, desc="Converting", disable=len(body) < 100):
            # 空行は出力しない
            if not any(cell.strip() for cell in row):
                continue
            snippet = row[self.column] if self.column < len(row) else ''
            output.append(row + [self.converter(snippet)])
        return output

    def run(self, input_path: Path, output_path: Optional[Path] = None) -> Path:
        output_path = output_path or default_output_path(input_path)

        # utf-8-sig: 先頭の BOM を読み飛ばす
        with open(input_path, "r", encoding="utf-8-sig", newline="") as f:
            rows = list(csv.reader(f))

        logger.info(f"Converting {max(len(rows) - 1, 0)} rows from {input_path}")
        output = self.convert_rows(rows)

        with open(output_path, "w", encoding="utf-8-sig", newline="") as f:
            writer = csv.writer(f, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
            writer.writerows(output)

        logger.info(f"Wrote {output_path}")
        return output_path
