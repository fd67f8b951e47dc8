"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式

每个文档注释一张标签表，最后是问题列表和统计面板。
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from docblock_tags.core.models import Multi, Scalar, TagValue
from docblock_tags.core.validator import Issue
from docblock_tags.scanner.models import DocBlock, ScanResult

# 最多显示的问题数
MAX_ISSUES_SHOWN = 10


def format_tag_value(value: TagValue) -> Text:
    """将标签值格式化为 Rich Text，多值标签逐行编号"""
    if isinstance(value, Scalar):
        return Text(value.value) if value.value else Text("(empty)", style="dim")

    text = Text()
    for i, item in enumerate(value.values(), 1):
        if i > 1:
            text.append("\n")
        text.append(f"{i}. ", style="dim")
        text.append(item)
    return text


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, result: ScanResult, target: str) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self.console.print("─" * 80, style="dim")
        self.console.print(
            "📋 DocBlock 标签解析报告 📋",
            style="bold cyan",
            justify="center",
        )
        self.console.print("─" * 80, style="dim")

        if not result.docblocks:
            self.console.print("[yellow]没有找到文档注释[/yellow]")

        for block in result.docblocks:
            self._print_docblock(block)

        if result.issues:
            self._print_issues(result.issues)

        self._print_summary(result, target)

    def _print_docblock(self, block: DocBlock) -> None:
        """打印单个文档注释的标签表"""
        location = block.file_path or "<input>"
        if block.line_number:
            location += f":{block.line_number}"

        title = escape(block.declaration) if block.declaration else "docblock"

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Tag", style="cyan", no_wrap=True)
        table.add_column("Value")

        if not block.tags:
            table.add_row("[dim]-[/dim]", Text("(no tags)", style="dim"))

        for name, value in block.tags.items():
            label = f"@{name}"
            if isinstance(value, Multi):
                label += f" ×{len(value)}"
            table.add_row(label, format_tag_value(value))

        self.console.print()
        self.console.print(f"[bold]{title}[/bold] [dim]{escape(location)}[/dim]")
        self.console.print(table)

    def _print_issues(self, issues: list[Issue]) -> None:
        """打印问题详情"""
        self.console.print()
        self.console.print("[bold]◆ 问题详情[/bold]")
        self.console.print()

        # 按严重程度排序
        sorted_issues = sorted(
            issues,
            key=lambda x: (0 if x.severity == "error" else 1, x.file_path, x.line_number or 0),
        )

        for i, issue in enumerate(sorted_issues[:MAX_ISSUES_SHOWN], 1):
            if issue.severity == "error":
                icon = "❌"
                style = "red"
            else:
                icon = "⚠️"
                style = "yellow"

            location = f"{issue.file_path}"
            if issue.line_number:
                location += f":{issue.line_number}"

            self.console.print(f"  {i}. [{style}]{icon} {escape(issue.message)}[/{style}]")
            self.console.print(f"     [dim]{escape(location)}[/dim]")
            if issue.suggestion:
                self.console.print(f"     [dim]→ {escape(issue.suggestion)}[/dim]")

        if len(issues) > MAX_ISSUES_SHOWN:
            self.console.print(f"  [dim]... 还有 {len(issues) - MAX_ISSUES_SHOWN} 个问题未显示[/dim]")

    def _print_summary(self, result: ScanResult, target: str) -> None:
        """打印统计面板"""
        error_count = result.stats.get("errors", 0)
        warning_count = result.stats.get("warnings", 0)
        color = "red" if error_count else ("yellow" if warning_count else "green")

        content = Text()
        content.append("文档注释: ", style="bold")
        content.append(f"{len(result.docblocks)}\n")
        if "files_scanned" in result.stats:
            content.append("扫描文件: ", style="bold")
            content.append(f"{result.stats['files_scanned']}\n")
        content.append("错误: ", style="bold")
        content.append(f"{error_count}", style="red" if error_count else "green")
        content.append("  警告: ", style="bold")
        content.append(f"{warning_count}\n\n", style="yellow" if warning_count else "green")
        content.append(f"目标: {target}", style="dim")

        self.console.print()
        self.console.print(Panel(
            content,
            title="[bold]📊 统计[/bold]",
            border_style=color,
        ))
        self.console.print()
