"""
注释识别自动机
识别三种注释：
1. 以 // 开始、换行结束的单行注释
2. 以 { 开始、} 结束的多行注释
3. 以 (* 开始、*) 结束的多行注释
"""

from typing import Dict, List, Tuple, Any
from src.core.dfa import DFA


class CommentDFA(DFA):
    """
    注释 DFA
    自环和多分支无法用稀疏转移表表示，因此状态 2、4、6、7 的转移在 _transition 中硬编码
    """

    START = 0  # 起始
    SLASH = 1  # 读到 /
    LINE_BODY = 2  # // 注释内部
    CLOSED = 3  # 注释结束（接受）
    BRACE_BODY = 4  # { } 注释内部
    PAREN = 5  # 读到 (
    STAR_BODY = 6  # (* *) 注释内部
    STAR_SEEN = 7  # (* *) 注释内部，刚读到 *

    NUM_STATES = 8

    def __init__(self):
        """初始化注释自动机"""
        transitions = {
            (self.START, '/'): self.SLASH,
            (self.SLASH, '/'): self.LINE_BODY,
            (self.LINE_BODY, '\n'): self.CLOSED,
            (self.START, '{'): self.BRACE_BODY,
            (self.BRACE_BODY, '}'): self.CLOSED,
            (self.START, '('): self.PAREN,
            (self.PAREN, '*'): self.STAR_BODY,
        }
        super().__init__(self.NUM_STATES, transitions, [self.CLOSED])

    def get_name(self) -> str:
        """获取自动机名称"""
        return "CommentDFA"

    def get_params(self) -> Dict[str, Any]:
        """获取构造参数（无参数）"""
        return {}

    def _transition(self, state: int, letter: str) -> int:
        """
        注释 DFA 的转移函数
        注释体内的状态按字符分支，其余状态查转移表
        :param state: 当前状态
        :param letter: 输入字符
        :return: 后继状态
        """
        if state == self.LINE_BODY:
            if letter == '\n':
                return super()._transition(state, letter)
            return self.LINE_BODY

        if state == self.BRACE_BODY:
            if letter == '}':
                return super()._transition(state, letter)
            return self.BRACE_BODY

        if state == self.STAR_BODY:
            if letter == '*':
                return self.STAR_SEEN
            return self.STAR_BODY

        if state == self.STAR_SEEN:
            if letter == ')':
                return self.CLOSED
            if letter == '*':
                # 连续的 * 仍可能紧跟 )
                return self.STAR_SEEN
            return self.STAR_BODY

        # START / SLASH / CLOSED / PAREN
        return super()._transition(state, letter)

    def rule_edges(self) -> List[Tuple[int, str, int]]:
        """
        _transition 中硬编码的边
        :return: [(起点, 标签, 终点), ...]，Σ∖{...} 表示除括号内字符外的任意字符
        """
        return [
            (self.LINE_BODY, 'Σ∖{\\n}', self.LINE_BODY),
            (self.BRACE_BODY, 'Σ∖{}}', self.BRACE_BODY),
            (self.STAR_BODY, '*', self.STAR_SEEN),
            (self.STAR_BODY, 'Σ∖{*}', self.STAR_BODY),
            (self.STAR_SEEN, ')', self.CLOSED),
            (self.STAR_SEEN, '*', self.STAR_SEEN),
            (self.STAR_SEEN, 'Σ∖{*,)}', self.STAR_BODY),
        ]
