#!/usr/bin/env python3
"""
Hostman - 主入口点

管理 hosts 文件中的条目：搜索、新增、启用、禁用、移除和导出。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostman 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostman.cli import main


if __name__ == '__main__':
    main()
