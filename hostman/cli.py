"""
命令行入口
"""

import click

from hostman.app import Hostman
from hostman.config import ACTION_USAGE, Config
from hostman.errors import HostmanError

EXIT_ERROR = 1
EXIT_USAGE = 2

EXAMPLES = """\b
示例:
  hostman -search example
  hostman -search example -export
  hostman -search example -remove
  hostman -search 127.0.0.1 -enable
  hostman -search 127.0.0.1 -disable
  hostman -add 127.0.0.1@example.com
  hostman -add 127.0.0.1@example.com,example.org
  hostman -add 127.0.0.1@example.com,example.org,example.net
  hostman -export (默认: /etc/hosts)
  hostman -config /tmp/hosts -export
"""


@click.command(epilog=EXAMPLES, context_settings={"help_option_names": ["-h", "-help", "--help"]})
@click.option("-config", "--config", "config_path", default=None, metavar="PATH",
              help="hosts 文件的绝对路径 (默认: /etc/hosts)")
@click.option("-add", "--add", "add", default="", metavar="ADDR@DOMAIN[,ALIAS...]",
              help="向 hosts 文件新增条目")
@click.option("-search", "--search", "search", default="", metavar="QUERY",
              help="在 hosts 文件中搜索地址或域名")
@click.option("-enable", "--enable", "enable", is_flag=True, help="启用匹配的条目")
@click.option("-disable", "--disable", "disable", is_flag=True, help="禁用匹配的条目")
@click.option("-remove", "--remove", "remove", is_flag=True, help="移除匹配的条目")
@click.option("-export", "--export", "export", is_flag=True, help="以 JSON 列出条目")
@click.pass_context
def cli(ctx, config_path, add, search, enable, disable, remove, export):
    """Hostman (Hosts Manager) - 管理 hosts 文件中的条目"""
    config = Config.from_env()
    if config_path:
        config.hosts_file_path = config_path
    config.add = add
    config.search = search
    config.enable = enable
    config.disable = disable
    config.remove = remove
    config.export = export

    if config.action == ACTION_USAGE:
        click.echo(ctx.get_help())
        ctx.exit(EXIT_USAGE)

    try:
        Hostman(config).run()
    except (HostmanError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_ERROR)


def main() -> None:
    """主入口点"""
    cli(prog_name="hostman")


if __name__ == '__main__':
    main()
