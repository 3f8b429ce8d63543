"""
Hostman 数据模型
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Entry:
    """
    代表 hosts 文件中的单个条目

    属性:
        address: 第一列的 IP 地址（IPv4 或 IPv6 字面量）
        domain: 第二列的规范主机名
        aliases: 域名之后的其他主机名，保持原有顺序
        disabled: 行首带有 # 时为 True
    """

    address: str
    domain: str
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    disabled: bool = False

    def __post_init__(self) -> None:
        if not self.address or not self.domain:
            raise ValueError("地址和域名都不能为空")
        # 允许传入 list，统一存为不可变的 tuple
        object.__setattr__(self, "aliases", tuple(self.aliases))

    @property
    def raw(self) -> str:
        """
        规范形式: <地址>\t<域名>[ <别名1> <别名2> ...]

        不包含禁用标记，用于比较和搜索。
        """
        raw = f"{self.address}\t{self.domain}"
        if self.aliases:
            raw += " " + " ".join(self.aliases)
        return raw

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式（不含换行符）

        返回:
            禁用时带 # 前缀的规范行
        """
        return ("#" if self.disabled else "") + self.raw

    def with_disabled(self, disabled: bool) -> "Entry":
        return replace(self, disabled=disabled)

    def without_alias(self, alias: str) -> "Entry":
        return replace(self, aliases=tuple(a for a in self.aliases if a != alias))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "domain": self.domain,
            "aliases": list(self.aliases),
            "disabled": self.disabled,
            "raw": self.raw,
        }

    def __str__(self) -> str:
        return self.to_hosts_line()
