"""
输出格式化模块
使用rich库美化输出
"""

from typing import Dict, List, Any, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from src.core.dfa import DFA


# 不可见字符的显示形式
_SPECIAL_SYMBOLS = {
    '\n': '\\n',
    '\t': '\\t',
    '\r': '\\r',
    ' ': '␣',
}


def display_symbol(symbol: str) -> str:
    """
    把输入字符转换为可显示的形式
    :param symbol: 输入字符
    :return: 显示用字符串
    """
    return _SPECIAL_SYMBOLS.get(symbol, symbol)


class OutputFormatter:
    """输出格式化器"""

    def __init__(self, console: Optional[Console] = None):
        """
        初始化格式化器
        :param console: rich 控制台，默认新建
        """
        self.console = console if console is not None else Console()

    def _state_name(self, dfa: DFA, state: int) -> str:
        """状态的显示名称"""
        if state == dfa.TRAP_STATE:
            return "trap"
        return str(state)

    def print_automaton(self, dfa: DFA):
        """
        打印自动机信息
        :param dfa: 自动机对象
        """
        info_text = Text()
        info_text.append("类型: ", style="bold yellow")
        info_text.append(f"{dfa.get_name()}\n", style="cyan")
        for key, value in dfa.get_params().items():
            info_text.append(f"{key}: ", style="bold yellow")
            info_text.append(f"{value!r}\n", style="cyan")
        info_text.append("状态数: ", style="bold yellow")
        info_text.append(f"{dfa.num_states}\n", style="cyan")
        info_text.append("接受状态: ", style="bold yellow")
        info_text.append(f"{sorted(dfa.accepting_states)}", style="cyan")

        panel = Panel(info_text, title="[bold magenta]自动机信息[/bold magenta]",
                      border_style="magenta")
        self.console.print(panel)

    def print_transition_table(self, dfa: DFA):
        """
        打印转移表（包括硬编码的规则边）
        :param dfa: 自动机对象
        """
        table = Table(title=f"{dfa.get_name()} 转移表", show_header=True, header_style="bold magenta")
        table.add_column("状态", style="cyan", justify="center")
        table.add_column("输入", justify="center")
        table.add_column("后继状态", style="cyan", justify="center")
        table.add_column("来源", justify="left")

        for src, symbol, dst in dfa.edges():
            table.add_row(str(src), display_symbol(symbol), str(dst), "转移表")
        for src, label, dst in dfa.rule_edges():
            table.add_row(str(src), label, str(dst), "[yellow]规则[/yellow]")

        self.console.print("\n")
        self.console.print(table)
        self.console.print("[dim]表中没有的输入一律进入 trap[/dim]")

    def print_trace(self, dfa: DFA, steps: List[Dict[str, Any]], accepted: bool):
        """
        打印运行过程
        :param dfa: 自动机对象
        :param steps: DFA.trace 返回的步骤列表
        :param accepted: 是否接受
        """
        table = Table(title="运行过程", show_header=True, header_style="bold magenta")
        table.add_column("步骤", style="yellow", justify="center")
        table.add_column("当前状态", style="cyan", justify="center")
        table.add_column("输入", style="green", justify="center")
        table.add_column("后继状态", justify="center")

        for step in steps:
            next_name = self._state_name(dfa, step['next'])
            if step['next'] == dfa.TRAP_STATE:
                next_name = f"[red]{next_name}[/red]"
            elif dfa.is_accepting_state(step['next']):
                next_name = f"[bold green]{next_name}[/bold green]"
            table.add_row(
                str(step['step']),
                self._state_name(dfa, step['state']),
                display_symbol(step['input']),
                next_name
            )

        self.console.print("\n")
        self.console.print(table)

        if accepted:
            self.console.print("\n[bold green]✓ 接受！输入被自动机识别。[/bold green]")
        else:
            self.console.print("\n[bold red]✗ 拒绝！输入不被自动机识别。[/bold red]")

    def print_error(self, message: str):
        """
        打印错误消息
        :param message: 错误消息
        """
        self.console.print(f"[bold red]错误: {message}[/bold red]")

    def print_success(self, message: str):
        """
        打印成功消息
        :param message: 成功消息
        """
        self.console.print(f"[bold green]✓ {message}[/bold green]")

    def print_info(self, message: str):
        """
        打印信息消息
        :param message: 信息消息
        """
        self.console.print(f"[bold cyan]ℹ {message}[/bold cyan]")

    def print_separator(self):
        """打印分隔线"""
        self.console.print("\n" + "=" * 80 + "\n")
