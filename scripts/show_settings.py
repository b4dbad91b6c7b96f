#!/usr/bin/env python
"""
Simulation Settings - Display Script

This script loads a settings document and prints the run parameters.

Usage:
    python show_settings.py
    python show_settings.py settings.xml
    python show_settings.py settings.yaml --mode plot
    python show_settings.py settings.xml --materials materials.xml

Without arguments the bundled example settings.xml is used.
"""

from pathlib import Path
import sys

# 添加项目根目录到路径（确保可以导入 sim_settings）
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from sim_settings.data_paths import get_example_document
from sim_settings.runner import main as runner_main


def main():
    """脚本入口点"""
    if len(sys.argv) > 1:
        return runner_main()
    # 默认运行 - 使用包内示例文档
    return runner_main([
        str(get_example_document("settings.xml")),
        "--materials", str(get_example_document("materials.xml")),
    ])


if __name__ == "__main__":
    sys.exit(main())
