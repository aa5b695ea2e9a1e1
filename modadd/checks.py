"""
兼容性检查标志

用一个字节保存三个独立的布尔标志，在一次添加会话中按引用共享。
"""

# 位映射 (从右到左): 0 = 执行检查, 1 = 游戏版本, 2 = 模组加载器
PERFORM_CHECKS = 1 << 0
GAME_VERSION = 1 << 1
MOD_LOADER = 1 << 2

ALL_SET = PERFORM_CHECKS | GAME_VERSION | MOD_LOADER


class Checks:
    """
    检查标志寄存器

    只允许通过自身的 set/unset/reset 方法修改，不复制状态。
    """

    __slots__ = ("_bits",)

    def __init__(self):
        self._bits = 0

    @classmethod
    def new_all_set(cls) -> "Checks":
        """所有标志均为 True"""
        checks = cls()
        checks._bits = ALL_SET
        return checks

    @classmethod
    def from_flags(
        cls, perform_checks: bool, game_version: bool, mod_loader: bool
    ) -> "Checks":
        """根据给定的布尔值生成标志"""
        checks = cls()
        if perform_checks:
            checks.set_perform_checks()
        if game_version:
            checks.set_game_version()
        if mod_loader:
            checks.set_mod_loader()
        return checks

    def _set(self, bit: int):
        self._bits = (self._bits | bit) & 0xFF

    def _unset(self, bit: int):
        self._bits = self._bits & ~bit & 0xFF

    def set_perform_checks(self):
        self._set(PERFORM_CHECKS)

    def set_game_version(self):
        self._set(GAME_VERSION)

    def set_mod_loader(self):
        self._set(MOD_LOADER)

    def unset_perform_checks(self):
        self._unset(PERFORM_CHECKS)

    def unset_game_version(self):
        self._unset(GAME_VERSION)

    def unset_mod_loader(self):
        self._unset(MOD_LOADER)

    @property
    def perform_checks(self) -> bool:
        return bool(self._bits & PERFORM_CHECKS)

    @property
    def game_version(self) -> bool:
        return bool(self._bits & GAME_VERSION)

    @property
    def mod_loader(self) -> bool:
        return bool(self._bits & MOD_LOADER)

    def reset(self):
        """清除所有标志"""
        self._bits = 0

    def __repr__(self) -> str:
        return (
            f"Checks(perform_checks={self.perform_checks}, "
            f"game_version={self.game_version}, mod_loader={self.mod_loader})"
        )
