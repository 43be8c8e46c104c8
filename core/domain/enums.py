from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    DEFERRED = "DEFERRED"


class RAGStatus(str, Enum):
    RED = "RED"
    AMBER = "AMBER"
    GREEN = "GREEN"


class HourlyRateSource(str, Enum):
    PROJECT = "PROJECT"
    RESOURCE = "RESOURCE"
    ORGANIZATION = "ORGANIZATION"


class TrackingBy(str, Enum):
    END_DATE = "END_DATE"
    MILESTONE = "MILESTONE"


class ProjectType(str, Enum):
    FIXED_PRICE = "FP"
    TIME_MATERIAL = "TM"


class ResourceStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class MilestoneState(str, Enum):
    COMPLETED = "Completed"
    DELAYED = "Delayed"
    ON_TRACK = "On Track"


__all__ = [
    "ProjectStatus",
    "RAGStatus",
    "HourlyRateSource",
    "TrackingBy",
    "ProjectType",
    "ResourceStatus",
    "MilestoneState",
]
