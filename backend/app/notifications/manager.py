# backend/app/notifications/manager.py

"""
チャンネル名から通知ドライバを解決するマネージャ。

責務:
- チャンネル名 → コンストラクタ（引数なしの呼び出し可能オブジェクト）の登録
- 初回解決時にのみドライバを生成し、以後は同じインスタンスを返す
- チャンネル名省略時のデフォルトチャンネル解決

生成済みインスタンスのキャッシュはスレッド間で共有されるため、
「キャッシュ確認 → 生成 → 登録」はロックの中で行う。
ロックは再入可能なので、コンストラクタの中から別チャンネルを解決してよい。
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional

from .drivers import ChannelDriver

logger = logging.getLogger(__name__)

DriverConstructor = Callable[[], ChannelDriver]
DefaultChannelResolver = Callable[[], Optional[str]]


class NotificationManagerError(RuntimeError):
    """NotificationManager 全般の基底例外。"""


class UnknownDriverError(NotificationManagerError):
    """コンストラクタが登録されていないチャンネル名を要求された場合の例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Notification driver [{name}] is not supported.")
        self.name = name


class DefaultDriverNotConfiguredError(NotificationManagerError):
    """デフォルトチャンネルが設定されていない場合の例外。"""

    def __init__(self) -> None:
        super().__init__("No default notification channel is configured.")


class NotificationManager:
    """
    通知ドライバのレジストリ兼ファクトリ。

    NOTE:
      - extend() で既存チャンネルのコンストラクタを差し替えても、
        生成済みのインスタンスは破棄しない（キャッシュは無効化されない）。
    """

    def __init__(
        self,
        default_channel: DefaultChannelResolver,
        constructors: Optional[Dict[str, DriverConstructor]] = None,
    ) -> None:
        self._default_channel = default_channel
        self._constructors: Dict[str, DriverConstructor] = dict(constructors or {})
        self._drivers: Dict[str, ChannelDriver] = {}
        self._lock = threading.RLock()

    def extend(self, name: str, constructor: DriverConstructor) -> None:
        """
        チャンネル名に対するコンストラクタを登録（または上書き）する。
        """
        with self._lock:
            self._constructors[name] = constructor

    def default_driver_name(self) -> str:
        """
        設定済みのデフォルトチャンネル名を返す。

        :raises DefaultDriverNotConfiguredError: 未設定の場合
        """
        name = self._default_channel()
        if not name:
            raise DefaultDriverNotConfiguredError()
        return name

    def registered_channels(self) -> List[str]:
        with self._lock:
            return sorted(self._constructors)

    def driver(self, name: Optional[str] = None) -> ChannelDriver:
        """
        チャンネル名に対応するドライバを返す。

        :param name: チャンネル名。None の場合はデフォルトチャンネル。
        :raises UnknownDriverError: コンストラクタ未登録のチャンネル名
        :raises DefaultDriverNotConfiguredError: name 省略かつデフォルト未設定
        """
        if name is None:
            name = self.default_driver_name()

        # 生成済みなら同じインスタンスを返す
        with self._lock:
            cached = self._drivers.get(name)
            if cached is not None:
                return cached

            constructor = self._constructors.get(name)
            if constructor is None:
                raise UnknownDriverError(name)

            driver = constructor()
            self._drivers[name] = driver

        logger.info("Notification driver created for channel %s.", name)
        return driver

    def send(self, message: str, channel: Optional[str] = None) -> None:
        """
        driver(channel).send(message) のショートハンド。
        """
        self.driver(channel).send(message)
