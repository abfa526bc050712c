"""
核心資料型別

- Word / Gap: 對齊序列中的 token（Gap 為明確的「缺席」標記，而非 None）
- AlignedPair: 等長的參考/作答對齊結果
- MistakeType: 每一欄的分類
- MistakeTally: 各類型的計數
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, Union


class MistakeType(Enum):
    """對齊欄位的錯誤類型"""
    MATCH = "match"        # 完全相同
    TYPO = "typo"          # 拼寫錯誤 (相似但不同)
    WRONG = "wrong"        # 錯字 (不相似)
    MISSING = "missing"    # 漏寫 (作答側為 Gap)
    ADDED = "added"        # 多寫 (參考側為 Gap)

    @property
    def is_mistake(self) -> bool:
        return self is not MistakeType.MATCH


@dataclass(frozen=True)
class Word:
    """出現在序列中的單字"""
    text: str

    def __str__(self) -> str:
        return self.text


class Gap:
    """對齊時插入的缺席標記 (singleton)"""

    _instance: Optional["Gap"] = None

    def __new__(cls) -> "Gap":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "GAP"

    def __bool__(self) -> bool:
        return False


GAP = Gap()

Token = Union[Word, Gap]


def token_text(token: Token) -> Optional[str]:
    """取得 token 文字，Gap 回傳 None"""
    return token.text if isinstance(token, Word) else None


@dataclass(frozen=True)
class AlignedPair:
    """
    對齊結果

    Attributes:
        reference: 參考側 token 序列（可含 Gap）
        answer: 作答側 token 序列（可含 Gap）

    兩側等長；第 i 欄由 (reference[i], answer[i]) 組成，不會兩側同時為 Gap。
    """
    reference: Tuple[Token, ...]
    answer: Tuple[Token, ...]

    def __post_init__(self):
        if len(self.reference) != len(self.answer):
            raise ValueError(
                f"Aligned sequences must have equal length, got {len(self.reference)} and {len(self.answer)}"
            )

    def __len__(self) -> int:
        return len(self.reference)

    def __iter__(self) -> Iterator[Tuple[Token, Token]]:
        return iter(zip(self.reference, self.answer))

    @classmethod
    def from_columns(cls, columns: Sequence[Tuple[Token, Token]]) -> "AlignedPair":
        return cls(
            reference=tuple(ref for ref, _ in columns),
            answer=tuple(ans for _, ans in columns),
        )

    def reversed(self) -> "AlignedPair":
        return AlignedPair(reference=self.reference[::-1], answer=self.answer[::-1])

    def reference_words(self) -> List[str]:
        """參考側去掉 Gap 後的文字（應等於原始參考序列）"""
        return [t.text for t in self.reference if isinstance(t, Word)]

    def answer_words(self) -> List[str]:
        """作答側去掉 Gap 後的文字（應等於原始作答序列）"""
        return [t.text for t in self.answer if isinstance(t, Word)]


@dataclass
class MistakeTally:
    """各錯誤類型的計數"""
    added: int = 0
    missing: int = 0
    typo: int = 0
    wrong: int = 0
    match: int = 0

    def count(self, mistake_type: MistakeType) -> None:
        setattr(self, mistake_type.value, getattr(self, mistake_type.value) + 1)

    @property
    def mistakes(self) -> int:
        """未加權的錯誤總數 (added + missing + wrong + typo)"""
        return self.added + self.missing + self.wrong + self.typo

    def weighted(self, typo_factor: float) -> float:
        """加權錯誤總數，typo 以 typo_factor 計"""
        return self.added + self.missing + self.wrong + self.typo * typo_factor

    def __add__(self, other: "MistakeTally") -> "MistakeTally":
        if not isinstance(other, MistakeTally):
            return NotImplemented
        return MistakeTally(
            added=self.added + other.added,
            missing=self.missing + other.missing,
            typo=self.typo + other.typo,
            wrong=self.wrong + other.wrong,
            match=self.match + other.match,
        )

    def as_dict(self) -> dict:
        return {
            "added": self.added,
            "missing": self.missing,
            "typo": self.typo,
            "wrong": self.wrong,
            "match": self.match,
        }


@dataclass
class TokenizedText:
    """分詞結果：單字序列與每個邊界是否需要顯示空白"""
    words: List[Word] = field(default_factory=list)
    spaces: List[bool] = field(default_factory=list)

    def texts(self) -> List[str]:
        return [w.text for w in self.words]
