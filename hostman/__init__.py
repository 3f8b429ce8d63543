"""
Hostman - 管理 hosts 文件条目的命令行工具和库
"""

__version__ = "1.0.0"
__author__ = "Hostman Project"

from hostman.app import Hostman
from hostman.config import Config
from hostman.errors import (
    BadFormatError,
    DuplicateEntryError,
    EmptyLineError,
    HostmanError,
    MissingFieldsError,
    ParseError,
    SuperfluousCommentError,
)
from hostman.exporter import export_entries
from hostman.hosts_manager import HostsFileManager
from hostman.models import Entry
from hostman.parser import parse_add_spec, parse_line, serialize_entry

__all__ = [
    "Hostman",
    "Config",
    "Entry",
    "HostsFileManager",
    "export_entries",
    "parse_line",
    "parse_add_spec",
    "serialize_entry",
    "HostmanError",
    "ParseError",
    "EmptyLineError",
    "SuperfluousCommentError",
    "MissingFieldsError",
    "BadFormatError",
    "DuplicateEntryError",
]
