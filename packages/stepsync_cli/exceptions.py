"""Custom exceptions for the StepSync HTTP client"""


class StepSyncClientError(Exception):
    """Base exception for all StepSync client errors"""
    pass


class StepSyncAPIError(StepSyncClientError):
    """API communication error"""
    pass
