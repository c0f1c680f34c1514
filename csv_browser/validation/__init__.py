from .errors import ValidationError, ValidationIssue
from .chart_validation import chart_issues, validate_chart_state

__all__ = ["ValidationError", "ValidationIssue", "chart_issues", "validate_chart_state"]
