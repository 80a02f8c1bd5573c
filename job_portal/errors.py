"""Exception types raised by the job portal core."""

from __future__ import annotations


class JobPortalError(Exception):
    """Base class for errors raised by this package."""


class StoreError(JobPortalError):
    """A local store (job postings or profiles) could not be read.

    Scoring depends on the store, so this propagates to the caller instead of
    degrading to an empty result.
    """


class SourceNotConfiguredError(JobPortalError):
    """A provider connector is missing a required credential."""

    def __init__(self, source: str, setting: str) -> None:
        super().__init__(f"{source} is not configured: set {setting}")
        self.source = source
        self.setting = setting
