"""
Hostman 主应用模块
"""

import logging
import sys
from typing import List, Optional, TextIO

from hostman.config import (
    ACTION_ADD,
    ACTION_DISABLE,
    ACTION_ENABLE,
    ACTION_EXPORT,
    ACTION_REMOVE,
    ACTION_SEARCH,
    ACTION_USAGE,
    Config,
)
from hostman.exporter import export_entries
from hostman.hosts_manager import HostsFileManager
from hostman.models import Entry


class Hostman:
    """
    命令入口，把一次调用的意图映射到 hosts 文档操作

    每次调用只执行一个命令：
    - add: 新增条目
    - search: 搜索条目，可选地移除、启用、禁用或导出匹配结果
    - export: 导出全部条目
    """

    def __init__(self, config: Config, out: Optional[TextIO] = None):
        """
        初始化 Hostman

        参数:
            config: 应用配置
            out: 结果输出流 (默认: 标准输出)

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.out = out or sys.stdout
        self.logger = self._setup_logging()

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        日志写到标准错误，标准输出只留给搜索结果和导出内容。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostman')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def run(self) -> str:
        """
        执行配置中指定的命令

        返回:
            实际执行的命令名；没有可执行的命令时返回 usage

        异常:
            HostmanError: 新增条目格式错误或重复
            OSError: 打开或写入 hosts 文件失败
        """
        action = self.config.action
        if action == ACTION_USAGE:
            return action

        self.logger.debug(f"Hosts 文件: {self.config.hosts_file_path}, 命令: {action}")

        with HostsFileManager(self.config.hosts_file_path, self.logger) as manager:
            manager.load()

            if action == ACTION_ADD:
                manager.add(self.config.add)
            elif action == ACTION_EXPORT and not self.config.search:
                self._print_export(manager.entries())
            else:
                self._apply_to_matches(manager, action)

        return action

    def _apply_to_matches(self, manager: HostsFileManager, action: str) -> None:
        matches = manager.search(self.config.search)
        self.logger.debug(f"搜索 {self.config.search!r} 匹配到 {len(matches)} 条记录")

        if action == ACTION_REMOVE:
            self._print_raw(manager.remove(matches))
        elif action == ACTION_ENABLE:
            self._print_raw(manager.enable(matches))
        elif action == ACTION_DISABLE:
            self._print_raw(manager.disable(matches))
        elif action == ACTION_EXPORT:
            self._print_export(matches)
        elif action == ACTION_SEARCH:
            self._print_raw(matches)

    def _print_raw(self, entries: List[Entry]) -> None:
        """每个条目的规范形式单独一行"""
        for entry in entries:
            print(entry.raw, file=self.out)

    def _print_export(self, entries: List[Entry]) -> None:
        print(export_entries(entries), file=self.out)
