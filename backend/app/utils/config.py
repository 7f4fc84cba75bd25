# backend/app/utils/config.py

"""
環境変数読み取り用のユーティリティ。
通知チャンネル（Email / SMS）やメール送信基盤の設定で共通利用する。
"""

import os
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値
    """
    value = os.getenv(name)

    if value is None or value.strip() == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value.strip()


def get_env_float(name: str, default: float) -> float:
    """
    浮動小数点の環境変数を取得する。

    未設定なら default、不正な値なら RuntimeError。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return float(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(f"Invalid float value for env var {name}: {raw!r}") from exc


def get_env_int(name: str, default: int) -> int:
    """
    整数の環境変数を取得する。

    未設定なら default、不正な値なら RuntimeError。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(f"Invalid integer value for env var {name}: {raw!r}") from exc


def get_env_bool(name: str, default: bool) -> bool:
    raw = get_env(name, required=False)
    if raw is None:
        return default

    normalized = raw.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise RuntimeError(f"Invalid boolean value for env var {name}: {raw!r}")
