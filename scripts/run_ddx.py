#!/usr/bin/env python3
"""
Dr.Gaze — Оцінка вибору з командного рядка

Запуск:
    python scripts/run_ddx.py --zones ino --symptoms right_impaired_adduction
    python scripts/run_ddx.py --zones lefttilt righttilt
    python scripts/run_ddx.py --list
"""

import sys
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dr_gaze.cli import main


if __name__ == "__main__":
    sys.exit(main())
