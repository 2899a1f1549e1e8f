"""
确定性有限自动机（DFA）执行引擎
提供状态容器、稀疏转移表以及单步、重置、接受判断和运行操作
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple, Any, Mapping, FrozenSet


class DFA(ABC):
    """
    DFA 抽象基类
    转移表只记录有定义的边，缺失的 (状态, 字符) 一律进入陷阱状态
    """

    INITIAL_STATE = 0  # 初始状态
    TRAP_STATE = -1  # 陷阱状态（吸收、非接受）

    def __init__(self, num_states: int,
                 transitions: Dict[Tuple[int, str], int],
                 accepting_states: Iterable[int]):
        """
        初始化自动机
        :param num_states: 声明的状态数量（仅用于说明，运行时不检查）
        :param transitions: 转移表 {(状态, 字符): 后继状态}
        :param accepting_states: 接受状态集合
        """
        self._num_states = num_states
        # 构造完成后转移表和接受集都不再改变
        self._transitions: Mapping[Tuple[int, str], int] = MappingProxyType(dict(transitions))
        self._accepting_states: FrozenSet[int] = frozenset(accepting_states)
        self._current_state = self.INITIAL_STATE

    @abstractmethod
    def get_name(self) -> str:
        """
        获取自动机名称
        :return: 名称（如 "WordDFA"）
        """
        pass

    @abstractmethod
    def get_params(self) -> Dict[str, Any]:
        """
        获取构造参数（用于导出后重建自动机）
        :return: 参数字典
        """
        pass

    @property
    def current_state(self) -> int:
        """当前状态"""
        return self._current_state

    @property
    def num_states(self) -> int:
        """声明的状态数量"""
        return self._num_states

    @property
    def states(self) -> List[int]:
        """所有声明的状态（不含陷阱状态）"""
        return list(range(self._num_states))

    @property
    def transitions(self) -> Mapping[Tuple[int, str], int]:
        """只读转移表"""
        return self._transitions

    @property
    def accepting_states(self) -> FrozenSet[int]:
        """接受状态集合"""
        return self._accepting_states

    def reset(self):
        """重置到初始状态"""
        self._current_state = self.INITIAL_STATE

    def step(self, letter: str):
        """
        读入一个字符，执行一步转移
        若存在转移则进入后继状态，否则进入陷阱状态；陷阱状态下保持不变
        :param letter: 当前输入字符
        """
        self._current_state = self.next_state(self._current_state, letter)

    def is_accepting(self) -> bool:
        """
        判断当前是否处于接受状态
        :return: 当前状态是否属于接受集
        """
        return self.is_accepting_state(self._current_state)

    def run(self, word: str) -> bool:
        """
        在输入串上运行自动机
        :param word: 输入串
        :return: 是否接受该输入
        """
        self.reset()
        for letter in word:
            self.step(letter)
        return self.is_accepting()

    def next_state(self, state: int, letter: str) -> int:
        """
        计算后继状态，不修改自动机
        陷阱状态在这里统一处理，子类只需覆盖 _transition
        :param state: 当前状态
        :param letter: 输入字符
        :return: 后继状态
        """
        if state == self.TRAP_STATE:
            return self.TRAP_STATE
        return self._transition(state, letter)

    def _transition(self, state: int, letter: str) -> int:
        """
        默认转移函数：查转移表，查不到则进入陷阱状态
        :param state: 当前状态（不会是陷阱状态）
        :param letter: 输入字符
        :return: 后继状态
        """
        return self._transitions.get((state, letter), self.TRAP_STATE)

    def is_accepting_state(self, state: int) -> bool:
        """判断给定状态是否为接受状态"""
        return state in self._accepting_states

    def accepts(self, word: str) -> bool:
        """
        判断输入串是否被接受，状态由调用方局部保存
        与 run 结果相同，但不改变 current_state，可供多个调用方共享同一实例
        :param word: 输入串
        :return: 是否接受
        """
        state = self.INITIAL_STATE
        for letter in word:
            state = self.next_state(state, letter)
        return self.is_accepting_state(state)

    def trace(self, word: str) -> List[Dict[str, Any]]:
        """
        运行自动机并记录每一步
        :param word: 输入串
        :return: 步骤列表，每步包含 step / state / input / next
        """
        self.reset()
        steps = []
        for i, letter in enumerate(word, 1):
            before = self._current_state
            self.step(letter)
            steps.append({
                'step': i,
                'state': before,
                'input': letter,
                'next': self._current_state
            })
        return steps

    def edges(self) -> List[Tuple[int, str, int]]:
        """
        转移表中的边，按 (起点, 字符) 排序
        :return: [(起点, 字符, 终点), ...]
        """
        return [(src, symbol, dst)
                for (src, symbol), dst in sorted(self._transitions.items())]

    def rule_edges(self) -> List[Tuple[int, str, int]]:
        """
        由代码实现、不在转移表中的边（用于展示和导出）
        :return: [(起点, 标签, 终点), ...]
        """
        return []

    def __repr__(self):
        return f"{self.get_name()}(states={self._num_states}, current={self._current_state})"
