"""Core data models for pyscope."""

from .schemas import (
    AnalysisReport,
    AnalysisRequest,
    Branch,
    CodeLocation,
    CodeSample,
    ComplexityMetrics,
    ControlFlowAnalysis,
    DataFlowAnalysis,
    ExecutionPrediction,
    ExportEnvelope,
    Issue,
    LogicalAnalysis,
    Loop,
    QualityScores,
    Suggestion,
    VariableRecord,
)

__all__ = [
    "AnalysisReport",
    "AnalysisRequest",
    "Branch",
    "CodeLocation",
    "CodeSample",
    "ComplexityMetrics",
    "ControlFlowAnalysis",
    "DataFlowAnalysis",
    "ExecutionPrediction",
    "ExportEnvelope",
    "Issue",
    "LogicalAnalysis",
    "Loop",
    "QualityScores",
    "Suggestion",
    "VariableRecord",
]
