"""
DFA 可视化工具
"""

import os
from collections import defaultdict
from typing import Optional

from graphviz import Digraph

from src.core.dfa import DFA
from src.config.dfa_config import dfa_config
from src.utils.output_formatter import display_symbol


class DFAVisualizer:
    """DFA 可视化器"""

    def __init__(self, automaton: DFA):
        """
        初始化可视化器
        :param automaton: 自动机对象
        """
        self.automaton = automaton

    def build_graph(self) -> Digraph:
        """
        构造 graphviz 图（不渲染）
        :return: Digraph 对象
        """
        dfa = self.automaton

        dot = Digraph(comment=f'{dfa.get_name()} DFA')
        dot.attr(rankdir='LR')  # 从左到右排列
        dot.attr('node', shape='circle')

        # 不可见的起始节点指向初始状态
        dot.node('start', '', shape='point')
        dot.edge('start', str(dfa.INITIAL_STATE), label='')

        for state in dfa.states:
            if dfa.is_accepting_state(state):
                dot.node(str(state), str(state), shape='doublecircle',
                         style='filled', fillcolor='lightgreen')
            else:
                dot.node(str(state), str(state))

        # 同一对状态之间的多条边合并成一条，标签用逗号分隔
        for src, dst, label in self._merge_edges(dfa.edges()):
            dot.edge(str(src), str(dst), label=self._escape(label))

        for src, dst, label in self._merge_edges(dfa.rule_edges()):
            dot.edge(str(src), str(dst), label=self._escape(label), style='dashed')

        if dfa_config.is_trap_state_shown():
            trap = str(dfa.TRAP_STATE)
            dot.node(trap, 'trap', shape='circle', style='filled', fillcolor='lightgray')
            dot.edge(trap, trap, label='Σ')
            for src, label in self._trap_edges():
                dot.edge(str(src), trap, label=self._escape(label), style='dotted')

        return dot

    def visualize(self, output_dir: Optional[str] = None, filename: Optional[str] = None) -> str:
        """
        生成 DFA 图片
        :param output_dir: 输出目录，默认取配置中的 image_dir
        :param filename: 输出文件名（不含扩展名），默认为 "<名称>_dfa"
        :return: 生成的图片路径
        """
        if output_dir is None:
            output_dir = dfa_config.image_dir
        os.makedirs(output_dir, exist_ok=True)

        if filename is None:
            filename = f"{self.automaton.get_name().lower()}_dfa"

        output_path = os.path.join(output_dir, filename)
        self.build_graph().render(output_path, format=dfa_config.image_format, cleanup=True)

        return f"{output_path}.{dfa_config.image_format}"

    def _merge_edges(self, edges):
        """
        合并起点终点相同的边
        :param edges: [(起点, 符号, 终点), ...]
        :return: [(起点, 终点, 合并后的标签), ...]
        """
        labels = defaultdict(list)
        for src, symbol, dst in edges:
            # 规则边的标签已是可读形式
            labels[(src, dst)].append(display_symbol(symbol) if len(symbol) == 1 else symbol)
        return [(src, dst, ', '.join(symbols)) for (src, dst), symbols in labels.items()]

    def _escape(self, label: str) -> str:
        """dot 标签中的反斜杠是转义符，需要加倍才能原样显示"""
        return label.replace('\\', '\\\\')

    def _trap_edges(self):
        """
        表中缺失的边隐含指向陷阱状态
        有 Σ∖{...} 规则边的状态对任意字符都有去处，不会进入陷阱
        :return: [(起点, 标签), ...]
        """
        dfa = self.automaton
        total_states = {src for src, label, _ in dfa.rule_edges() if label.startswith('Σ')}

        defined = defaultdict(list)
        for src, symbol, _ in dfa.edges():
            defined[src].append(display_symbol(symbol))
        for src, label, _ in dfa.rule_edges():
            defined[src].append(label)

        edges = []
        for state in dfa.states:
            if state in total_states:
                continue
            if defined[state]:
                edges.append((state, 'Σ∖{' + ','.join(defined[state]) + '}'))
            else:
                edges.append((state, 'Σ'))
        return edges
