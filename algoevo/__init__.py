"""AlgoEvo: knowledge base of algorithmic-trading technology evolution."""

__version__ = "0.1.0"
