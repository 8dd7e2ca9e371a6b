"""Utility modules for the Video Idea Evaluator."""
from .validators import IdeaValidator
from .response_helpers import ResponseHelper
from .logging import LoggerSetup, CorrelatedLogger, MetricsLogger
from .numbers import round_half_up, round_int, percentage

__all__ = [
    "IdeaValidator", "ResponseHelper",
    "LoggerSetup", "CorrelatedLogger", "MetricsLogger",
    "round_half_up", "round_int", "percentage"
]
