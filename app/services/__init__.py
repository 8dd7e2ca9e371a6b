"""Service layer modules for the Video Idea Evaluator."""
from .normalizer import VideoRecordNormalizer
from .outlier_detector import StatisticalOutlierDetector
from .duration_analyzer import DurationGapAnalyzer
from .pattern_miner import PatternMiner
from .scoring import SaturationScorer, ConfidenceScorer
from .title_generator import TitleGenerator
from .youtube_client import YouTubeClient
from .trends_client import TrendsClient
from .evaluation_service import ResultAssembler, VideoIdeaEvaluator
from .opportunity_scanner import OpportunityScanner

__all__ = [
    "VideoRecordNormalizer", "StatisticalOutlierDetector", "DurationGapAnalyzer",
    "PatternMiner", "SaturationScorer", "ConfidenceScorer", "TitleGenerator",
    "YouTubeClient", "TrendsClient", "ResultAssembler", "VideoIdeaEvaluator", "OpportunityScanner"
]
