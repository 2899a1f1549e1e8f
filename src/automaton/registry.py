"""
自动机注册表
按名称创建自动机，供导入和交互程序使用
"""

from typing import Dict, Type
from src.core.dfa import DFA
from src.automaton.word_dfa import WordDFA
from src.automaton.comment_dfa import CommentDFA


AUTOMATON_TYPES: Dict[str, Type[DFA]] = {
    'WordDFA': WordDFA,
    'CommentDFA': CommentDFA,
}


def create_automaton(name: str, **params) -> DFA:
    """
    按名称创建自动机
    :param name: 自动机名称（见 AUTOMATON_TYPES）
    :param params: 构造参数
    :return: 自动机实例
    """
    if name not in AUTOMATON_TYPES:
        raise ValueError(f"未知的自动机类型: {name}")
    return AUTOMATON_TYPES[name](**params)
