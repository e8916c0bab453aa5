"""
Training data for CGP programs.

Exported Classes:
    Dataset: Paired input and output samples
"""

from evocgp.data.dataset import Dataset

__all__ = ['Dataset']
