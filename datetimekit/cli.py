#!filepath: datetimekit/cli.py
from typing import Optional

import typer
from rich import print
from rich.markup import escape

from datetimekit import __version__, logs
from datetimekit.config import AppConfig
from datetimekit.core.timestamp import Timestamp
from datetimekit.utils.datetime_utils import DateTimeUtils
from datetimekit.utils.errors import UserInputError

app = typer.Typer(help="datetimekit: move / compare / format timestamps")


def _parse_value(value: str, zone: Optional[str]) -> Timestamp:
    # 纯数字按毫秒时间戳处理
    if value.lstrip("-").isdigit():
        return Timestamp.coerce(int(value), zone)
    return Timestamp.coerce(value, zone)


def _run(func, *args):
    try:
        return func(*args)
    except UserInputError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.callback()
def main(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML 配置文件路径"),
):
    """
    加载配置（不指定时使用 $DATETIMEKIT_CONFIG 或包内 base.yml）
    """
    cfg = AppConfig.load(config)
    DateTimeUtils.configure(cfg)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
@logs.catch("format command failed", ignore=(typer.Exit,))
def format(
    value: str,
    mask: str = typer.Option("isoDateTime", "--mask", "-m", help="命名 mask 或字面模板"),
    utc: bool = typer.Option(False, "--utc", help="使用 UTC 字段"),
    zone: Optional[str] = typer.Option(None, "--zone", "-z", help="本地时区，例如 America/Chicago"),
):
    """
    按 mask 格式化时间
    """
    ts = _run(_parse_value, value, zone)
    print(escape(_run(DateTimeUtils.format, ts, mask, utc)))


@app.command()
@logs.catch("move command failed", ignore=(typer.Exit,))
def move(
    value: str,
    units: int,
    part: str,
    mask: str = typer.Option("isoDateTime", "--mask", "-m"),
    utc: bool = typer.Option(False, "--utc"),
    zone: Optional[str] = typer.Option(None, "--zone", "-z"),
):
    """
    时间 ± units 个 part（d w m q y h M s l）
    """
    ts = _run(_parse_value, value, zone)
    _run(DateTimeUtils.move, ts, units, part)
    print(escape(DateTimeUtils.format(ts, mask, utc)))


@app.command()
@logs.catch("compare command failed", ignore=(typer.Exit,))
def compare(
    date_a: str,
    date_b: str,
    part: str,
    zone: Optional[str] = typer.Option(None, "--zone", "-z"),
):
    """
    date_a 到 date_b 相差多少个完整 part
    """
    a = _run(_parse_value, date_a, zone)
    b = _run(_parse_value, date_b, zone)
    print(_run(DateTimeUtils.compare, a, b, part))


@app.command()
def dst(
    value: str,
    zone: Optional[str] = typer.Option(None, "--zone", "-z"),
):
    """
    距标准时间的小时数 + 是否处于夏令时
    """
    ts = _run(_parse_value, value, zone)
    hours = DateTimeUtils.hours_from_standard(ts)
    flag = "[yellow]DST[/yellow]" if DateTimeUtils.is_daylight_savings(ts) else "standard"
    print(f"{hours:g}h from standard ({flag})")


@app.command()
def leap(year: int):
    """
    是否闰年
    """
    print(DateTimeUtils.is_leap_year(year))


if __name__ == "__main__":
    app()

# python -m datetimekit.cli format 2024-03-15T13:05:09Z --utc
