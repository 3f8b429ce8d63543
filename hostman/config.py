"""
配置管理模块，支持环境变量和命令行参数
"""

import os
from dataclasses import dataclass

DEFAULT_HOSTS_FILE = "/etc/hosts"

ACTION_ADD = "add"
ACTION_SEARCH = "search"
ACTION_REMOVE = "remove"
ACTION_ENABLE = "enable"
ACTION_DISABLE = "disable"
ACTION_EXPORT = "export"
ACTION_USAGE = "usage"


@dataclass
class Config:
    """应用配置类，由命令行参数填充，默认值来自环境变量"""

    hosts_file_path: str = DEFAULT_HOSTS_FILE
    add: str = ""
    search: str = ""
    enable: bool = False
    disable: bool = False
    remove: bool = False
    export: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTS_FILE: hosts 文件路径 (默认: /etc/hosts)
            LOG_LEVEL: 日志级别 (默认: WARNING)
        """
        return cls(
            hosts_file_path=os.getenv("HOSTS_FILE", DEFAULT_HOSTS_FILE),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper()
        )

    @property
    def action(self) -> str:
        """
        按优先级确定本次要执行的命令

        add 优先；其次是 search，搭配 remove、enable、disable、export 中
        第一个被设置的选项，都没有设置时只打印匹配结果；
        没有 search 时 export 导出全部条目；否则打印用法。
        """
        if self.add:
            return ACTION_ADD

        if self.search:
            for action, flag in (
                (ACTION_REMOVE, self.remove),
                (ACTION_ENABLE, self.enable),
                (ACTION_DISABLE, self.disable),
                (ACTION_EXPORT, self.export),
            ):
                if flag:
                    return action
            return ACTION_SEARCH

        if self.export:
            return ACTION_EXPORT

        return ACTION_USAGE

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
        if not self.hosts_file_path:
            raise ValueError("hosts 文件路径不能为空")
