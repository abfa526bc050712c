"""
評分配置模組

提供統一的配置類別，控制 typo 權重、門檻與日誌行為。

使用方式:
    from dictascore import DictationEngine, GradingConfig

    config = GradingConfig(typo_factor=0.5, mistakes_passing=2)
    engine = DictationEngine(config)

    # 練習介面的 behaviour 設定 (typoFactor 為百分比)
    config = GradingConfig.from_behaviour({"typoFactor": "50", "mistakesPassing": 2})

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("dictascore").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class GradingConfig:
    """
    評分配置

    屬性:
        typo_factor: typo 權重，範圍 [0, 1]
        mistakes_mastering: 精熟容許錯誤數 (>= 0)
        mistakes_passing: 通過容許錯誤數 (>= 0)
        ignore_punctuation: 是否忽略標點
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
    """

    typo_factor: float = 1.0
    mistakes_mastering: float = 0
    mistakes_passing: float = 0
    ignore_punctuation: bool = False

    # 日誌控制
    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        if not 0.0 <= self.typo_factor <= 1.0:
            raise ValueError(f"typo_factor must be between 0.0 and 1.0, got {self.typo_factor}")
        if self.mistakes_mastering < 0:
            raise ValueError(f"mistakes_mastering must be >= 0, got {self.mistakes_mastering}")
        if self.mistakes_passing < 0:
            raise ValueError(f"mistakes_passing must be >= 0, got {self.mistakes_passing}")
        configure_logging(self.verbose)

    @classmethod
    def from_behaviour(cls, behaviour: Mapping[str, Any], **kwargs) -> "GradingConfig":
        """
        從練習介面的 behaviour 設定建立配置

        - typoFactor: 百分比 (0-100，可為字串)，未設定視為 100
        - mistakesMastering / mistakesPassing: 未設定視為 0
        - ignorePunctuation: 未設定視為 False

        Args:
            behaviour: behaviour 設定
            **kwargs: 其他 GradingConfig 欄位 (例如 verbose)
        """
        typo_percent = behaviour.get("typoFactor")
        if typo_percent is None or typo_percent == "":
            typo_percent = 100

        return cls(
            typo_factor=int(float(typo_percent)) / 100,
            mistakes_mastering=behaviour.get("mistakesMastering") or 0,
            mistakes_passing=behaviour.get("mistakesPassing") or 0,
            ignore_punctuation=bool(behaviour.get("ignorePunctuation", False)),
            **kwargs,
        )


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = GradingConfig()
