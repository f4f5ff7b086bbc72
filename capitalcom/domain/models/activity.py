"""Enumerations describing entries of the activity history."""

from __future__ import annotations

from enum import Enum


class ActivitySource(str, Enum):
    CLOSE_OUT = "CLOSE_OUT"
    DEALER = "DEALER"
    SL = "SL"
    SYSTEM = "SYSTEM"
    TP = "TP"
    USER = "USER"


class ActivityStatus(str, Enum):
    ACCEPTED = "ACCEPTED"
    CREATED = "CREATED"
    EXECUTED = "EXECUTED"
    EXPIRED = "EXPIRED"
    REJECTED = "REJECTED"
    MODIFIED = "MODIFIED"
    MODIFY_REJECT = "MODIFY_REJECT"
    CANCELLED = "CANCELLED"
    CANCEL_REJECT = "CANCEL_REJECT"
    UNKNOWN = "UNKNOWN"


class ActivityType(str, Enum):
    POSITION = "POSITION"
    WORKING_ORDER = "WORKING_ORDER"
    EDIT_STOP_AND_LIMIT = "EDIT_STOP_AND_LIMIT"
    SWAP = "SWAP"
    SYSTEM = "SYSTEM"


__all__ = ["ActivitySource", "ActivityStatus", "ActivityType"]
