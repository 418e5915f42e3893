"""Lanza `envelope-analyzer` desde un checkout, sin `pip install -e .`.

    python main.py analyze active.txt cje 2.107.3.4 usuario clave
    python main.py doctor run
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC_DIR = Path(__file__).resolve().parent / "src"


if __name__ == "__main__":
    if str(_SRC_DIR) not in sys.path:
        sys.path.insert(0, str(_SRC_DIR))

    from cli.main import run

    run()
