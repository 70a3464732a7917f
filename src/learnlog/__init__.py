"""learnlog: a personal learning-log journal."""

__version__ = "0.1.0"
