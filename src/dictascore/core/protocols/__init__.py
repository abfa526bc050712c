from .similarity import SimilarityProtocol

__all__ = ["SimilarityProtocol"]
