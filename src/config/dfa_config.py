"""
DFA 输出配置模块
控制导出目录、图片格式以及是否绘制陷阱状态
"""


class DFAConfig:
    """DFA 输出配置（全局单例）"""

    DEFAULT_OUTPUT_DIR = "output/dfa_data"
    DEFAULT_IMAGE_DIR = "output/DFA"
    DEFAULT_IMAGE_FORMAT = "png"

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.reset_defaults()

    def reset_defaults(self):
        """恢复默认配置"""
        self.output_dir = self.DEFAULT_OUTPUT_DIR  # JSON 导出目录
        self.image_dir = self.DEFAULT_IMAGE_DIR  # 图片输出目录
        self.image_format = self.DEFAULT_IMAGE_FORMAT
        # 默认不画陷阱状态，所有缺失的边都隐含指向它
        self.show_trap_state = False

    def enable_trap_state(self):
        """在图中绘制陷阱状态"""
        self.show_trap_state = True

    def disable_trap_state(self):
        """不绘制陷阱状态"""
        self.show_trap_state = False

    def is_trap_state_shown(self) -> bool:
        """检查是否绘制陷阱状态"""
        return self.show_trap_state


# 全局配置实例
dfa_config = DFAConfig()
