"""
hosts 文件行的解析与序列化
"""

import re

from hostman.errors import (
    BadFormatError,
    EmptyLineError,
    MissingFieldsError,
    SuperfluousCommentError,
)
from hostman.models import Entry

COMMENT_MARKER = "#"

# 新增条目格式: <地址>@<域名>[,<别名>...]，地址只接受小写十六进制
ADD_SPEC_PATTERN = re.compile(r"([0-9a-f:.]{7,39})@(\S+)")


def parse_line(line: str) -> Entry:
    """
    把 hosts 文件中的一行解析为 Entry

    空格和制表符都可以作为分隔符，任意数量均可。
    地址前的 # 表示该条目被禁用。

    参数:
        line: 原始文本行

    返回:
        解析得到的 Entry

    异常:
        EmptyLineError: 空行
        SuperfluousCommentError: 以 "# " 开头的注释行
        MissingFieldsError: 少于两个字段
    """
    line = line.strip()

    if not line:
        raise EmptyLineError("hosts 条目为空")

    if line.startswith(COMMENT_MARKER + " "):
        raise SuperfluousCommentError("多余的注释行")

    fields = [f for f in line.replace(" ", "\t").split("\t") if f]

    if len(fields) < 2:
        raise MissingFieldsError("地址和域名是必需的")

    address, domain = fields[0], fields[1]
    disabled = address.startswith(COMMENT_MARKER)
    if disabled:
        address = address[1:]

    # 地址为空或仍以 # 开头（如 ##1.2.3.4）都不是有效条目
    if not address or address.startswith(COMMENT_MARKER):
        raise MissingFieldsError("地址和域名是必需的")

    return Entry(
        address=address,
        domain=domain,
        aliases=tuple(fields[2:]),
        disabled=disabled,
    )


def serialize_entry(entry: Entry) -> str:
    """序列化为规范行，不含换行符"""
    return entry.to_hosts_line()


def parse_add_spec(spec: str) -> Entry:
    """
    解析命令行新增条目的格式

    例如 "127.0.0.1@example.com,example.org" 会得到地址 127.0.0.1、
    域名 example.com 和别名 example.org。

    异常:
        BadFormatError: 不符合 ADDR@DOMAIN[,ALIAS...]
        MissingFieldsError: 逗号之间没有有效的域名
    """
    if not ADD_SPEC_PATTERN.fullmatch(spec):
        raise BadFormatError(f"无效的条目格式: {spec}")

    line = spec.replace("@", "\t", 1).replace(",", " ")
    return parse_line(line)
