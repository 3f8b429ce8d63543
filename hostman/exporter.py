"""
条目导出为结构化文本
"""

import json
from typing import Iterable

from hostman.models import Entry

INDENT = 2


def export_entries(entries: Iterable[Entry]) -> str:
    """
    把条目列表导出为 JSON，两个空格缩进

    每个条目包含 address、domain、aliases、disabled 和 raw 字段。

    参数:
        entries: 要导出的条目

    返回:
        JSON 文本（不含结尾换行符）
    """
    return json.dumps(
        [entry.to_dict() for entry in entries],
        indent=INDENT,
        ensure_ascii=False,
    )
