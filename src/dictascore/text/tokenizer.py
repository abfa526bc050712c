"""
聽寫分詞器模組

把參考句與作答文字切成單字序列。

標點處理:
- 黏在單字上的標點會被切成獨立 token
- 切開處插入零寬標記 (U+200C)，重建顯示文字時據此決定是否補空白
- ignore_punctuation 開啟時，標點在切分前就被移除

使用方式:
    from dictascore.text.tokenizer import DictationTokenizer

    tokenizer = DictationTokenizer()
    result = tokenizer.tokenize("Hello, world!")
    result.texts()   # ['Hello', '\u200c,', 'world', '\u200c!']
"""

import re
from typing import List, Optional, Sequence

from dictascore.core.tokenizer_interface import Tokenizer
from dictascore.core.types import TokenizedText, Word

# 零寬標記：看不見，但保留「這裡原本沒有空白」的資訊
BOUNDARY_MARKER = "\u200c"

PUNCTUATION_CHARS = ".?!,'\";:-()/+*\u201c\u201e"
PUNCTUATION = "[" + re.escape(PUNCTUATION_CHARS) + "]"
WORD = r"\w"

_PUNCTUATION_RE = re.compile(PUNCTUATION)
_WORD_BEFORE_PUNCTUATION_RE = re.compile(f"({WORD}|^)({PUNCTUATION})")
_PUNCTUATION_BEFORE_WORD_RE = re.compile(f"({PUNCTUATION})({WORD})")


def strip_punctuation(text: str) -> str:
    """移除所有標點字元"""
    return _PUNCTUATION_RE.sub("", text)


def add_boundary_markers(text: str) -> str:
    """
    在單字與標點之間插入「空白 + 零寬標記」

    範例:
        >>> add_boundary_markers("cat.")
        'cat \\u200c.'
    """
    text = _WORD_BEFORE_PUNCTUATION_RE.sub(lambda m: f"{m.group(1)} {BOUNDARY_MARKER}{m.group(2)}", text)
    text = _PUNCTUATION_BEFORE_WORD_RE.sub(lambda m: f"{m.group(1)}{BOUNDARY_MARKER} {m.group(2)}", text)
    return text


def remove_boundary_markers(text: Optional[str]) -> Optional[str]:
    """移除零寬標記，None 原樣回傳"""
    if text is None:
        return None
    return text.replace(BOUNDARY_MARKER, "")


def compute_spaces(words: Sequence[Optional[str]]) -> List[bool]:
    """
    計算每個 token 後面是否需要顯示空白

    相鄰兩個 token 只要任一側帶有零寬標記就不補空白；最後一個永遠是 False。
    少於兩個 token 時回傳 [False]。

    Args:
        words: token 文字序列，None 視為空字串

    Returns:
        List[bool]: 與 words 等長（至少一個元素）的旗標
    """
    if len(words) < 2:
        return [False]

    normalized = [word or "" for word in words]
    spaces = []
    for current, following in zip(normalized, normalized[1:]):
        spaces.append(not (current.endswith(BOUNDARY_MARKER) or following.startswith(BOUNDARY_MARKER)))
    spaces.append(False)
    return spaces


class DictationTokenizer(Tokenizer):
    """
    聽寫分詞器

    功能:
    - 以空白切分單字
    - 黏著的標點切成獨立 token 並加上零寬標記
    - 可選擇完全忽略標點

    空字串（或只有空白）回傳空序列；作答為空時，對齊階段會把每個參考字標為 missing。
    """

    def tokenize(self, text: str, ignore_punctuation: bool = False) -> TokenizedText:
        """
        將文字切成單字序列

        Args:
            text: 原始文字
            ignore_punctuation: 是否先移除標點

        Returns:
            TokenizedText: 單字序列與空白旗標
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        if ignore_punctuation:
            text = strip_punctuation(text)

        parts = add_boundary_markers(text).split()
        return TokenizedText(
            words=[Word(part) for part in parts],
            spaces=compute_spaces(parts),
        )


_default_tokenizer = DictationTokenizer()


def tokenize(text: str, ignore_punctuation: bool = False) -> TokenizedText:
    """使用預設分詞器切分文字"""
    return _default_tokenizer.tokenize(text, ignore_punctuation)
