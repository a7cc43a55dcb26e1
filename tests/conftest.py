"""Pytest configuration — src レイアウトのパッケージを import 可能にする。"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
