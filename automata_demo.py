"""
自动机演示程序
选择单词自动机或注释自动机，逐条输入字符串并查看运行过程
"""

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table
from rich import box

from src.core.dfa import DFA
from src.automaton.registry import create_automaton
from src.utils.output_formatter import OutputFormatter
from src.utils.dfa_exporter import DFAExporter
from src.utils.dfa_visualizer import DFAVisualizer


def decode_input(raw: str) -> str:
    """
    解码用户输入中的转义序列（\\n、\\t、\\\\）
    :param raw: 原始输入
    :return: 解码后的字符串
    """
    result = []
    i = 0
    escapes = {'n': '\n', 't': '\t', '\\': '\\'}
    while i < len(raw):
        if raw[i] == '\\' and i + 1 < len(raw) and raw[i + 1] in escapes:
            result.append(escapes[raw[i + 1]])
            i += 2
        else:
            result.append(raw[i])
            i += 1
    return ''.join(result)


def choose_automaton(console: Console) -> DFA:
    """
    显示菜单并创建用户选择的自动机
    :param console: rich 控制台
    :return: 自动机实例
    """
    console.print("\n[bold yellow]请选择自动机：[/bold yellow]\n")

    menu_table = Table(show_header=False, box=box.SIMPLE, padding=(0, 2))
    menu_table.add_column("选项", style="cyan", justify="right")
    menu_table.add_column("自动机", style="green")
    menu_table.add_row("[1]", "单词自动机（WordDFA）")
    menu_table.add_row("[2]", "注释自动机（CommentDFA）")
    console.print(menu_table)

    choice = Prompt.ask("\n请输入选项编号", choices=["1", "2"], default="1")

    if choice == "1":
        word = decode_input(Prompt.ask("请输入要识别的单词", default=""))
        return create_automaton("WordDFA", word=word)
    return create_automaton("CommentDFA")


def main():
    """主程序"""
    console = Console()
    formatter = OutputFormatter(console)

    title = Panel(
        "[bold cyan]DFA 演示程序[/bold cyan]\n\n"
        "单词识别与注释识别（//...\\n、{...}、(*...*)）",
        border_style="cyan",
        padding=(1, 2)
    )
    console.print(title)

    dfa = choose_automaton(console)
    formatter.print_automaton(dfa)
    formatter.print_transition_table(dfa)

    console.print("\n输入字符串进行识别，支持 \\n 和 \\t 转义，输入 :q 退出")
    while True:
        raw = Prompt.ask("\n[bold]输入[/bold]", default=":q")
        if raw == ":q":
            break
        word = decode_input(raw)
        steps = dfa.trace(word)
        formatter.print_trace(dfa, steps, dfa.is_accepting())

    formatter.print_separator()

    if Confirm.ask("是否导出 JSON？", default=False):
        try:
            path = DFAExporter(dfa).export_to_json()
            formatter.print_success(f"已导出到 {path}")
        except OSError as e:
            formatter.print_error(str(e))

    if Confirm.ask("是否生成状态图？", default=False):
        try:
            path = DFAVisualizer(dfa).visualize()
            formatter.print_success(f"已生成 {path}")
        except Exception as e:
            # graphviz 未安装 dot 时抛出 ExecutableNotFound
            formatter.print_error(f"生成图片失败: {e}")


if __name__ == "__main__":
    main()
