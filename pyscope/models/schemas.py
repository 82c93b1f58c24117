"""Pydantic schemas for pyscope analysis results."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Severity = Literal["error", "warning", "info"]
IssueCategory = Literal[
    "style",
    "security",
    "performance",
    "best-practice",
    "bug",
    "documentation",
    "unused",
]
SuggestionCategory = Literal["optimization", "best-practice", "security", "readability"]
Priority = Literal["high", "medium", "low"]
Difficulty = Literal["beginner", "intermediate", "advanced"]


class ResultModel(BaseModel):
    """Base for immutable analysis results."""

    model_config = ConfigDict(frozen=True)


class Issue(ResultModel):
    """A single lint-style finding."""

    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(default=1, ge=1)
    severity: Severity
    message: str
    category: IssueCategory


class Branch(ResultModel):
    """A conditional branch opener."""

    line: int
    kind: Literal["if", "switch", "ternary"] = "if"
    condition: str = ""
    always_true: bool = False
    always_false: bool = False
    edge_cases: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_exclusive(self) -> "Branch":
        if self.always_true and self.always_false:
            raise ValueError("a branch cannot be both always true and always false")
        return self


class Loop(ResultModel):
    """A loop opener."""

    line: int
    kind: Literal["for", "while", "do-while"]
    condition: str = ""
    issues: List[str] = Field(default_factory=list)


class CodeLocation(ResultModel):
    """A point finding (unreachable line, infinite loop suspect, leak)."""

    line: int
    column: int = 1
    description: str


class VariableRecord(ResultModel):
    """Approximate lifetime of an assigned name."""

    name: str
    declared_line: int
    last_used_line: int
    scope: str = "local"


class ControlFlowAnalysis(ResultModel):
    """Branches, loops and control-flow anomalies."""

    branches: List[Branch] = Field(default_factory=list)
    loops: List[Loop] = Field(default_factory=list)
    unreachable_code: List[CodeLocation] = Field(default_factory=list)
    infinite_loops: List[CodeLocation] = Field(default_factory=list)


class DataFlowAnalysis(ResultModel):
    """Variable tracking and resource leak suspects."""

    uninitialized_variables: List[str] = Field(default_factory=list)
    unused_variables: List[str] = Field(default_factory=list)
    variables: List[VariableRecord] = Field(default_factory=list)
    resource_leaks: List[CodeLocation] = Field(default_factory=list)


class ComplexityMetrics(ResultModel):
    """Line-heuristic complexity metrics."""

    cyclomatic_complexity: int = Field(default=1, ge=1)
    cognitive_complexity: int = Field(default=0, ge=0)
    lines_of_code: int = Field(default=0, ge=0)
    max_nesting_depth: int = Field(default=0, ge=0)


class LogicalAnalysis(ResultModel):
    """Control flow, data flow and complexity together."""

    control_flow: ControlFlowAnalysis
    data_flow: DataFlowAnalysis
    complexity: ComplexityMetrics


class QualityScores(ResultModel):
    """Five independent 0-100 quality dimensions."""

    maintainability: int = Field(..., ge=0, le=100)
    readability: int = Field(..., ge=0, le=100)
    testability: int = Field(..., ge=0, le=100)
    performance: int = Field(..., ge=0, le=100)
    security: int = Field(..., ge=0, le=100)


class Suggestion(ResultModel):
    """An actionable improvement."""

    line: int
    category: SuggestionCategory
    priority: Priority
    title: str
    description: str
    example: Optional[str] = None


class ExecutionPrediction(ResultModel):
    """Best-effort prediction of what the program prints."""

    can_execute: bool = True
    has_output: bool = False
    output: str = ""
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    elapsed_ms: float = Field(
        default=0.0, description="Wall time of the simulation, diagnostic only"
    )


class AnalysisReport(ResultModel):
    """Aggregate result of one analyze() call."""

    language: Literal["python"] = "python"
    issues: List[Issue] = Field(default_factory=list)
    logic: LogicalAnalysis
    quality: QualityScores
    suggestions: List[Suggestion] = Field(default_factory=list)
    explanation: str = ""
    execution: ExecutionPrediction


class CodeSample(ResultModel):
    """An entry of the sample catalog."""

    id: str
    title: str
    description: str
    code: str
    language: str = "python"
    difficulty: Difficulty
    concepts: List[str] = Field(default_factory=list)


class AnalysisRequest(BaseModel):
    """Request to analyze code."""

    code: str = Field(..., description="Source code to analyze")


class ExportEnvelope(ResultModel):
    """Serializable bundle of the input, its report and an export timestamp."""

    source_code: str
    report: AnalysisReport
    timestamp: datetime
    language: str = "python"
