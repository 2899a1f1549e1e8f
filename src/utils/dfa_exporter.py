"""
DFA 导出工具
将自动机导出为 JSON 格式，并可从 JSON 重建
"""

import json
import os
from typing import Dict, List, Any, Optional, Tuple

from src.core.dfa import DFA
from src.config.dfa_config import dfa_config


def _is_int(value: Any) -> bool:
    """JSON 中的 true/false 在 Python 里也是 int，需要排除"""
    return isinstance(value, int) and not isinstance(value, bool)


class DFAExporter:
    """DFA 导出器"""

    def __init__(self, automaton: DFA):
        """
        初始化导出器
        :param automaton: 自动机对象
        """
        self.automaton = automaton

    def export_to_json(self, output_dir: Optional[str] = None) -> str:
        """
        导出 DFA 为 JSON 文件
        :param output_dir: 输出目录，默认取配置中的 output_dir
        :return: 生成的文件路径
        """
        if output_dir is None:
            output_dir = dfa_config.output_dir
        os.makedirs(output_dir, exist_ok=True)

        filename = f"dfa_{self.automaton.get_name().lower()}.json"
        filepath = os.path.join(output_dir, filename)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.build_dfa_data(), f, indent=2, ensure_ascii=False)

        return filepath

    def build_dfa_data(self) -> Dict[str, Any]:
        """
        构建 DFA 的 JSON 数据结构
        :return: 可序列化的字典
        """
        dfa = self.automaton
        return {
            "name": dfa.get_name(),
            "params": dfa.get_params(),
            "num_states": dfa.num_states,
            "initial": dfa.INITIAL_STATE,
            "trap": dfa.TRAP_STATE,
            "accepting": sorted(dfa.accepting_states),
            "transitions": self._edges_data(dfa.edges()),
            "rules": self._edges_data(dfa.rule_edges())
        }

    def _edges_data(self, edges: List[Tuple[int, str, int]]) -> List[Dict[str, Any]]:
        """
        把边列表转换为字典列表
        :param edges: [(起点, 符号, 终点), ...]
        :return: [{"from", "symbol", "to"}, ...]
        """
        return [{"from": src, "symbol": symbol, "to": dst} for src, symbol, dst in edges]

    @staticmethod
    def load_from_json(filepath: str) -> Dict[str, Any]:
        """
        从 JSON 文件加载 DFA 数据
        :param filepath: JSON 文件路径
        :return: DFA 数据
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)

    @staticmethod
    def validate_format(data: Dict[str, Any]) -> bool:
        """
        验证 JSON 数据是否符合 DFA 格式
        :param data: 待验证的数据
        :return: 是否符合格式
        """
        if not isinstance(data, dict):
            return False

        required_fields = ["name", "params", "num_states", "initial", "trap",
                           "accepting", "transitions", "rules"]
        if not all(field in data for field in required_fields):
            return False

        if not isinstance(data["name"], str) or not isinstance(data["params"], dict):
            return False

        for field in ("num_states", "initial", "trap"):
            if not _is_int(data[field]):
                return False

        if not isinstance(data["accepting"], list):
            return False
        if not all(_is_int(state) for state in data["accepting"]):
            return False
        # 陷阱状态不能是接受状态
        if data["trap"] in data["accepting"]:
            return False

        for field in ("transitions", "rules"):
            edges = data[field]
            if not isinstance(edges, list):
                return False
            for edge in edges:
                if not isinstance(edge, dict):
                    return False
                if not all(key in edge for key in ("from", "symbol", "to")):
                    return False
                if not _is_int(edge["from"]) or not _is_int(edge["to"]):
                    return False
                if not isinstance(edge["symbol"], str):
                    return False

        return True

    @staticmethod
    def load_automaton(filepath: str) -> DFA:
        """
        从 JSON 文件重建自动机
        转移表和规则由自动机类型本身决定，文件中的只用于校验
        :param filepath: JSON 文件路径
        :return: 自动机实例
        """
        from src.automaton.registry import create_automaton

        data = DFAExporter.load_from_json(filepath)
        if not DFAExporter.validate_format(data):
            raise ValueError(f"文件不是有效的 DFA 格式: {filepath}")

        try:
            automaton = create_automaton(data["name"], **data["params"])
        except TypeError as e:
            # 参数缺失、多余或类型不对
            raise ValueError(f"文件中的构造参数无效: {filepath}") from e

        # 重建结果必须与文件内容一致
        rebuilt = DFAExporter(automaton).build_dfa_data()
        if rebuilt != data:
            raise ValueError(f"文件中的转移与 {data['name']} 的构造结果不一致: {filepath}")

        return automaton
