"""Start-up diagnostics for the model servers codeshift depends on."""

from codeshift.diagnostics.requirements import DOCS_URL, RequirementIssue, check_startup_requirements

__all__ = ["DOCS_URL", "RequirementIssue", "check_startup_requirements"]
