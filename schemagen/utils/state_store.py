from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class State(Generic[T]):
    """値の変更をバインドされたコールバックへ通知する入れ物"""

    def __init__(self, var: T):
        self.var = var
        self._binds: list[Callable[[], None]] = []

    @property
    def value(self) -> T:
        """現在保持している値 (差し替え時のみ通知される)"""
        return self.var

    @value.setter
    def value(self, new_value: T):
        self.var = new_value

        for bind in list(self._binds):
            bind()

    def set(self, new_value: T):
        """値を丸ごと差し替え、バインド済みのコールバックを順に呼ぶ"""
        self.value = new_value

    def bind_callback(self, callback: Callable[[], None]):
        """差し替えのたびに呼ばれるコールバックを登録する"""
        self._binds.append(callback)
