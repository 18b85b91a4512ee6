from app.processor.models import GroupFailure, MergeReport


class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class EmptyResultError(ProcessorError):
    """Raised when a request produces no merged output at all."""

    NO_DOCUMENTS = "no_documents"
    NO_COMPLETE_GROUPS = "no_complete_groups"
    ALL_GROUPS_FAILED = "all_groups_failed"

    def __init__(self, reason: str, report: MergeReport | None = None) -> None:
        self.reason = reason
        self.report = report if report is not None else MergeReport()
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.reason == self.NO_DOCUMENTS:
            return "No files uploaded."
        if self.reason == self.NO_COMPLETE_GROUPS:
            return (
                "No valid pair found: every group is missing a main document "
                "or an attachment."
            )
        failed = ", ".join(f"{f.group_key} ({f.reason})" for f in self.report.failures)
        return f"None of the groups could be merged: {failed}"


class GroupMergeError(ProcessorError):
    """Raised in fail-fast mode when one group cannot be merged."""

    def __init__(self, failure: GroupFailure) -> None:
        self.failure = failure
        super().__init__(f"Group {failure.group_key} could not be merged: {failure.reason}")
