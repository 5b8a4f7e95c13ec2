from .pipeline import AnalysisPipeline
from .base import AnalysisStage, AnalyzerBackend
from .dispatch import dispatch_pipeline, resolve_stage_kinds, DEFAULT_RESOURCES
from .normalize import normalize, normalize_all
