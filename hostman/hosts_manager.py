"""
Hosts 文件管理模块，支持原子性更新
"""

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from hostman.errors import DuplicateEntryError, ParseError
from hostman.models import Entry
from hostman.parser import parse_add_spec, parse_line

FILE_MODE = 0o644


class HostsFileManager:
    """
    hosts 文件的内存文档

    按文件顺序持有全部条目，并在打开期间持有文件句柄。
    每次修改后都会完整重写文件，使用原子性文件操作（临时文件 + 重命名）
    防止文件损坏。
    """

    def __init__(self, hosts_path: str, logger: logging.Logger):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path).absolute()
        self.logger = logger
        self.lock = threading.Lock()
        self._entries: List[Entry] = []
        self._handle: Optional[TextIO] = None

    def __enter__(self) -> "HostsFileManager":
        if self._handle is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def count(self) -> int:
        return len(self._entries)

    def open(self) -> None:
        """
        以追加 + 读写模式打开 hosts 文件，不会创建新文件

        异常:
            FileNotFoundError: 文件不存在
            PermissionError: 没有读写权限
        """
        fd = os.open(self.hosts_path, os.O_RDWR | os.O_APPEND)
        # 非 UTF-8 字节（例如 Latin-1 注释）替换为 U+FFFD，不阻塞加载
        self._handle = os.fdopen(fd, "a+", encoding="utf-8", errors="replace")

    def close(self) -> None:
        """释放文件句柄"""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def load(self) -> None:
        """
        逐行读取 hosts 文件并解析为条目

        无法解析的行（空行、注释、字段不足）会被静默跳过，
        不影响对有效条目的操作。
        """
        if self._handle is None:
            raise RuntimeError("hosts 文件尚未打开")

        self._handle.seek(0)
        for number, line in enumerate(self._handle, start=1):
            try:
                self._entries.append(parse_line(line))
            except ParseError as e:
                self.logger.debug(f"跳过第 {number} 行: {e}")

        self.logger.debug(f"从 {self.hosts_path} 加载了 {self.count} 条记录")

    def entries(self) -> List[Entry]:
        """返回当前条目列表的快照"""
        return list(self._entries)

    def search(self, query: str) -> List[Entry]:
        """
        按文件顺序返回规范形式中包含 query 的条目

        参数:
            query: 子串，可以匹配地址、域名或别名的任意部分

        返回:
            匹配的条目列表
        """
        return [entry for entry in self._entries if query in entry.raw]

    def already_exists(self, entry: Entry) -> bool:
        """按规范形式判断条目是否已存在，忽略禁用状态"""
        return any(current.raw == entry.raw for current in self._entries)

    def add(self, spec: str) -> Entry:
        """
        新增一个条目并重写文件

        参数:
            spec: ADDR@DOMAIN[,ALIAS...] 格式的字符串

        返回:
            新增的条目

        异常:
            BadFormatError: 格式无效
            MissingFieldsError: 缺少域名
            DuplicateEntryError: 条目已存在
            OSError: 写入失败
        """
        entry = parse_add_spec(spec)

        if self.already_exists(entry):
            raise DuplicateEntryError(f"条目已在 hosts 文件中: {entry.raw}")

        self._entries.append(entry)
        self.write()
        self.logger.info(f"已添加: {entry.raw}")
        return entry

    def remove(self, selection: Iterable[Entry]) -> List[Entry]:
        """
        移除规范形式出现在 selection 中的所有条目

        返回:
            被移除的条目列表
        """
        raws = {entry.raw for entry in selection}
        kept: List[Entry] = []
        removed: List[Entry] = []

        for entry in self._entries:
            if entry.raw in raws:
                removed.append(entry)
                self.logger.info(f"已移除: {entry.raw}")
            else:
                kept.append(entry)

        self._entries = kept
        self.write()
        return removed

    def enable(self, selection: Iterable[Entry]) -> List[Entry]:
        """启用 selection 中的条目，返回受影响的条目"""
        return self._set_disabled(selection, False)

    def disable(self, selection: Iterable[Entry]) -> List[Entry]:
        """禁用 selection 中的条目，返回受影响的条目"""
        return self._set_disabled(selection, True)

    def _set_disabled(self, selection: Iterable[Entry], disabled: bool) -> List[Entry]:
        raws = {entry.raw for entry in selection}
        refactored: List[Entry] = []
        affected: List[Entry] = []
        action = "禁用" if disabled else "启用"

        for entry in self._entries:
            if entry.raw in raws:
                entry = entry.with_disabled(disabled)
                affected.append(entry)
                self.logger.info(f"已{action}: {entry.raw}")
            refactored.append(entry)

        self._entries = refactored
        self.write()
        return affected

    @staticmethod
    def remove_alias(entry: Entry, alias: str) -> Entry:
        """返回去掉指定别名后的条目副本，不修改文档"""
        return entry.without_alias(alias)

    def write(self) -> None:
        """
        原子性重写 hosts 文件

        每个条目一行，禁用的条目带 # 前缀。失败时内存中的条目不会回滚。

        异常:
            PermissionError: 如果没有写入 hosts 文件的权限
            OSError: 如果文件系统操作失败
        """
        content = "".join(entry.to_hosts_line() + "\n" for entry in self._entries)

        # 符号链接指向的真实文件
        target = self.hosts_path.resolve()

        with self.lock:
            try:
                # 写入临时文件（同一目录）
                temp_fd, temp_path = tempfile.mkstemp(
                    dir=target.parent,
                    prefix='.hosts.tmp.',
                    text=True
                )

                try:
                    with os.fdopen(temp_fd, 'w', encoding='utf-8', newline='\n') as f:
                        f.write(content)

                    os.chmod(temp_path, FILE_MODE)
                    # 原子性替换（同一文件系统内有效）
                    os.replace(temp_path, target)

                except Exception:
                    # 出错时清理临时文件
                    if os.path.exists(temp_path):
                        os.unlink(temp_path)
                    raise

            except PermissionError:
                self.logger.error(f"写入 hosts 文件权限被拒绝: {target}")
                raise
            except OSError as e:
                self.logger.error(f"更新 hosts 文件失败: {e}")
                raise

            # 替换后旧句柄指向已删除的 inode，重新打开
            if self._handle is not None:
                self.close()
                self.open()

        self.logger.info(f"已写入 {self.count} 条 host 记录到 {self.hosts_path}")
