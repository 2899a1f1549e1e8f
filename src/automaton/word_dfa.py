"""
单词识别自动机
只接受一个确定的字符串
"""

from typing import Dict, Tuple, Any
from src.core.dfa import DFA


class WordDFA(DFA):
    """
    识别给定单词的 DFA
    以 "foo" 为例：-> (0) -f-> (1) -o-> (2) -o-> [3]
    其余任何输入（包括到达终态后的输入）都进入陷阱状态
    """

    def __init__(self, word: str):
        """
        初始化单词自动机
        :param word: 要识别的单词
        """
        self.word = word

        # 第 i 个字符把状态 i 推进到 i+1
        transitions: Dict[Tuple[int, str], int] = {}
        for i, letter in enumerate(word):
            transitions[(i, letter)] = i + 1

        # 状态 len(word) 是唯一的接受状态；空串时即初始状态
        super().__init__(len(word) + 1, transitions, [len(word)])

    def get_name(self) -> str:
        """获取自动机名称"""
        return "WordDFA"

    def get_params(self) -> Dict[str, Any]:
        """获取构造参数"""
        return {'word': self.word}
