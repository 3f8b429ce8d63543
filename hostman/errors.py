"""
Hostman 异常类型
"""


class HostmanError(Exception):
    """所有 hostman 错误的基类"""


class ParseError(HostmanError):
    """无法把一行文本解析为 hosts 条目"""


class EmptyLineError(ParseError):
    """去除空白后该行为空"""


class SuperfluousCommentError(ParseError):
    """该行是以 "# " 开头的普通注释"""


class MissingFieldsError(ParseError):
    """地址和域名至少需要两个字段"""


class BadFormatError(HostmanError):
    """新增条目的格式不符合 ADDR@DOMAIN[,ALIAS...]"""


class DuplicateEntryError(HostmanError):
    """条目已存在于 hosts 文件中"""
