"""
CLI 入口模块 - 使用 Typer 构建命令行界面

两个主要命令：
1. parse: 把整个输入当作一个文档注释解析
2. scan: 扫描目录下源文件中的所有文档注释，可选检查必需标签
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from docblock_tags.core import ParseOptions, Validator
from docblock_tags.reporters import JsonReporter, Reporter, RichReporter
from docblock_tags.scanner import (
    ScanConfig,
    ScanPathError,
    ScanResult,
    build_docblock,
    scan_source_files,
)

# 调用方默认忽略的标签；解析器本身不带任何默认忽略集合
DEFAULT_IGNORE_TAGS: frozenset[str] = frozenset({"param", "return"})

# 创建 Typer 应用实例
app = typer.Typer(
    name="docblock-tags",
    help="Parse tags out of /** ... */ doc comments.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


def configure_logging(verbose: bool) -> None:
    """根据 --verbose 设置日志级别"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def build_options(
    allow: Optional[list[str]],
    ignore: Optional[list[str]],
    default: str,
    all_tags: bool,
) -> ParseOptions:
    """
    由命令行参数构建解析配置

    没有给出 --ignore 时使用 DEFAULT_IGNORE_TAGS；--all-tags 表示不忽略任何标签。
    """
    if all_tags:
        ignored: frozenset[str] = frozenset()
    elif ignore:
        ignored = frozenset(ignore)
    else:
        ignored = DEFAULT_IGNORE_TAGS
    try:
        return ParseOptions.create(allow=allow, ignore=ignored, default=default)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--default")


def get_reporter(format: str) -> Reporter:
    """获取对应的报告器"""
    if format == "json":
        return JsonReporter()
    return RichReporter(console)


def read_input(source: str) -> str:
    """读取文件内容，`-` 表示标准输入"""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


AllowOption = typer.Option(None, "--allow", "-a", help="Only keep these tags (repeatable)")
IgnoreOption = typer.Option(None, "--ignore", "-i", help="Drop these tags (repeatable, default: param, return)")
DefaultOption = typer.Option("description", "--default", "-d", help="Tag name for text before the first tag")
AllTagsOption = typer.Option(False, "--all-tags", help="Do not ignore any tag by default")
FormatOption = typer.Option("rich", "--format", "-f", help="Output format: rich (default) or json")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Show detailed output")


@app.command()
def parse(
    source: str = typer.Argument("-", help="File containing one doc comment, or - for stdin"),
    allow: Optional[list[str]] = AllowOption,
    ignore: Optional[list[str]] = IgnoreOption,
    default: str = DefaultOption,
    all_tags: bool = AllTagsOption,
    format: str = FormatOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Parse a single doc comment and print its tags.

    Examples:
        docblock-tags parse comment.txt
        cat comment.txt | docblock-tags parse --format json
        docblock-tags parse comment.txt -a throws -a see
    """
    configure_logging(verbose)

    try:
        comment = read_input(source)
    except OSError as e:
        console.print(f"[red]Error:[/red] Failed to read {escape(source)}: {escape(str(e))}")
        raise typer.Exit(2)

    options = build_options(allow, ignore, default, all_tags)
    name = "<stdin>" if source == "-" else source
    block = build_docblock(comment, file_path=name, line_number=0, options=options)

    result = ScanResult(docblocks=[block])
    result.stats["docblocks"] = 1
    get_reporter(format).report(result, name)


@app.command()
def scan(
    target: str = typer.Argument(".", help="Directory to scan"),
    require: Optional[list[str]] = typer.Option(
        None,
        "--require",
        "-r",
        help="Tags every doc comment must have (repeatable)",
    ),
    warn_empty: bool = typer.Option(
        False,
        "--warn-empty-description",
        help="Warn about doc comments with an empty description",
    ),
    allow: Optional[list[str]] = AllowOption,
    ignore: Optional[list[str]] = IgnoreOption,
    default: str = DefaultOption,
    all_tags: bool = AllTagsOption,
    no_gitignore: bool = typer.Option(False, "--no-gitignore", help="Scan files ignored by .gitignore"),
    format: str = FormatOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Scan source files for doc comments and parse their tags.

    Examples:
        docblock-tags scan
        docblock-tags scan ./src --require description
        docblock-tags scan ./src --format json --all-tags
    """
    configure_logging(verbose)

    root = Path(target).resolve()
    options = build_options(allow, ignore, default, all_tags)
    config = ScanConfig(respect_gitignore=not no_gitignore)

    on_file = None
    if verbose:
        def on_file(file_path: str, language: str) -> None:
            console.print(f"[dim]  ({language}) {file_path}[/dim]")

    try:
        result = scan_source_files(root, options=options, config=config, on_file=on_file)
    except ScanPathError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]  Scanned {result.stats['files_scanned']} files[/dim]")
        console.print(f"[dim]  - {len(result.docblocks)} doc comments[/dim]")

    if require or warn_empty:
        validator = Validator(
            required=require or (),
            default_tag=default,
            warn_empty_description=warn_empty,
        )
        validation = validator.validate(result.docblocks)
        result.issues.extend(validation.issues)
        result.stats.update(validation.stats)

    get_reporter(format).report(result, target)

    if result.stats.get("errors", 0) > 0:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of docblock-tags."""
    from docblock_tags import __version__
    console.print(f"[bold]docblock-tags[/bold] v{__version__}")


if __name__ == "__main__":
    app()
