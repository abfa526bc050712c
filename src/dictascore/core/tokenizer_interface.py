"""
分詞器抽象基類
"""

from abc import ABC, abstractmethod
from typing import List

from dictascore.core.types import TokenizedText


class Tokenizer(ABC):
    """
    分詞器介面

    子類負責把原始文字轉為單字序列，並保留重建顯示文字所需的空白資訊。
    """

    @abstractmethod
    def tokenize(self, text: str, ignore_punctuation: bool = False) -> TokenizedText:
        pass

    def split(self, text: str, ignore_punctuation: bool = False) -> List[str]:
        """只回傳單字文字列表"""
        return self.tokenize(text, ignore_punctuation).texts()
