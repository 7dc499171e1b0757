"""Strata error types."""


class StrataError(Exception):
    """Base error for all strata failures."""


class StrataRequestError(StrataError):
    """Request could not be decoded or failed validation."""


class StrataStoreError(StrataError):
    """Result store is missing, unreadable, or lacks a container."""


class StrataChecksumError(StrataStoreError):
    """Stored container does not match its indexed checksum."""
