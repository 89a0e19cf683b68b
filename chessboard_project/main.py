#!/usr/bin/env python3
"""
Chessboard 主入口文件

提供命令行接口来查询走法可达性和显示棋盘。
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from chessboard_project import __version__, __description__
from chessboard_project.src.move_engine import (
    ChessBoard, ConfigManager, EngineConfig, LoggingConfig, MoveValidator,
    Piece, Point, ChessRulesError, setup_logger, render_board
)

console = Console()


class PointParamType(click.ParamType):
    """解析 "行,列" 格式的坐标"""
    name = "point"

    def convert(self, value, param, ctx):
        if isinstance(value, Point):
            return value
        try:
            row, col = (int(part) for part in value.split(","))
        except ValueError:
            self.fail(f"无效的坐标: {value!r}，应为 行,列", param, ctx)
        return Point(row, col)


class PlacementParamType(click.ParamType):
    """解析 "行,列=符号" 格式的棋子摆放，如 0,4=R"""
    name = "placement"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        pos, sep, symbol = value.partition("=")
        if not sep:
            self.fail(f"无效的摆放: {value!r}，应为 行,列=符号", param, ctx)
        point = POINT.convert(pos, param, ctx)
        try:
            piece = Piece.from_symbol(symbol.strip())
        except ValueError as e:
            self.fail(str(e), param, ctx)
        return point, piece


POINT = PointParamType()
PLACEMENT = PlacementParamType()


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("Chessboard\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    panel = Panel(
        banner_text,
        title="棋盘走法系统",
        title_align="center",
        border_style="blue",
        padding=(1, 2)
    )
    console.print(panel)


def _build_board(ctx: click.Context, size: Optional[int], board_file: Optional[str],
                 placements: Tuple) -> ChessBoard:
    """根据命令行参数构建棋盘"""
    if board_file:
        board = ChessBoard.load_from_file(board_file)
    else:
        board = ChessBoard(size or ctx.obj['engine_config'].board_size)

    for point, piece in placements:
        if not board.is_point_inside(point):
            raise click.BadParameter(f"摆放位置越界: {tuple(point)}", param_hint="--place")
        board.place(point, piece)
    return board


def _build_validator(ctx: click.Context, strict: Optional[bool]) -> MoveValidator:
    engine_config = ctx.obj['engine_config']
    if strict is not None:
        engine_config = EngineConfig(
            board_size=engine_config.board_size,
            strict_destination=strict,
            enable_king_rule=engine_config.enable_king_rule
        )
    return MoveValidator.from_config(engine_config)


def board_options(func):
    """棋盘相关的公共选项"""
    func = click.option('--place', 'placements', type=PLACEMENT, multiple=True,
                        help='摆放棋子，如 0,4=R（大写白方，小写黑方）')(func)
    func = click.option('--board', 'board_file', type=click.Path(exists=True, dir_okay=False),
                        help='JSON格式的棋盘文件')(func)
    func = click.option('--size', type=click.IntRange(min=1), help='棋盘边长')(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="Chessboard")
@click.option('--debug', is_flag=True, help='启用调试模式')
@click.option('--config-dir', type=click.Path(file_okay=False), help='配置目录')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: Optional[str]):
    """棋盘走法系统 - 判断棋子走法的几何可达性"""
    ctx.ensure_object(dict)

    if config_dir:
        manager = ConfigManager(config_dir)
        engine_config = manager.get_engine_config()
        logging_config = manager.get_logging_config()
    else:
        engine_config = EngineConfig()
        logging_config = LoggingConfig()

    setup_logger(
        level='DEBUG' if debug else logging_config.level,
        log_file=logging_config.log_file,
        log_dir=logging_config.log_dir,
        max_size=logging_config.max_size,
        backup_count=logging_config.backup_count,
        console_output=logging_config.console_output
    )

    if debug:
        console.print("[yellow]调试模式已启用[/yellow]")

    ctx.obj['engine_config'] = engine_config


@cli.command()
@click.argument('piece')
@click.argument('from_pos', metavar='FROM', type=POINT)
@click.argument('to_pos', metavar='TO', type=POINT)
@board_options
@click.option('--strict/--lenient', default=None, help='终点越界时报错/返回不可达')
@click.pass_context
def check(ctx, piece: str, from_pos: Point, to_pos: Point, size, board_file, placements, strict):
    """判断棋子能否从 FROM 走到 TO"""
    try:
        board = _build_board(ctx, size, board_file, placements)
        validator = _build_validator(ctx, strict)
        available = validator.move_available(board, piece, from_pos, to_pos)
    except (ChessRulesError, ValueError) as e:
        console.print(f"[red]发生错误: {escape(str(e))}[/red]", highlight=False)
        sys.exit(1)

    if available:
        console.print(f"[green]可达[/green] {piece} {tuple(from_pos)} -> {tuple(to_pos)}")
    else:
        console.print(f"[red]不可达[/red] {piece} {tuple(from_pos)} -> {tuple(to_pos)}")


@cli.command()
@click.argument('piece')
@click.argument('from_pos', metavar='FROM', type=POINT)
@board_options
@click.pass_context
def moves(ctx, piece: str, from_pos: Point, size, board_file, placements):
    """列出棋子从 FROM 出发的所有可达格子"""
    try:
        board = _build_board(ctx, size, board_file, placements)
        validator = _build_validator(ctx, None)
        squares = validator.reachable_squares(board, piece, from_pos)
    except (ChessRulesError, ValueError) as e:
        console.print(f"[red]发生错误: {escape(str(e))}[/red]", highlight=False)
        sys.exit(1)

    console.print(f"可达格子数: {len(squares)}")
    for point in squares:
        console.print(f"{point.row},{point.col}", highlight=False)


@cli.command()
@board_options
@click.option('--output', type=click.Path(dir_okay=False), help='将棋盘保存为JSON文件')
@click.pass_context
def show(ctx, size, board_file, placements, output: Optional[str]):
    """显示棋盘"""
    try:
        board = _build_board(ctx, size, board_file, placements)
    except ValueError as e:
        console.print(f"[red]发生错误: {escape(str(e))}[/red]", highlight=False)
        sys.exit(1)

    console.print(render_board(board, with_coordinates=True), highlight=False)

    if output:
        board.save_to_file(output)
        console.print(f"[green]棋盘已保存: {Path(output)}[/green]")


@cli.command()
@click.pass_context
def info(ctx):
    """显示系统信息"""
    print_banner()

    validator = MoveValidator.from_config(ctx.obj['engine_config'])
    status_text = Text()
    status_text.append("支持的棋子类型\n", style="bold yellow")
    for kind in validator.supported_kinds():
        status_text.append(f"• {kind.name.lower()}\n", style="white")

    console.print(Panel(status_text, title="走法规则", border_style="yellow"))


def main():
    """主入口函数"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
