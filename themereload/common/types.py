"""Common types and data structures for themereload"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Optional


class SemanticType(Enum):
    """Value type of a GTK setting, selects the xsettingsd encoding"""
    BOOL = "bool"
    STRING = "string"
    INT = "int"
    ENUM = "enum"


class DaemonOutcome(Enum):
    """What the daemon supervisor did"""
    SIGNALED = "signaled"        # Running instance was sent the reload signal
    SPAWNED = "spawned"          # No instance, started a fresh detached one
    UNAVAILABLE = "unavailable"  # Not running and not installed


class PipelineFailure(IntFlag):
    """Exit status bits, one per notification pipeline"""
    NONE = 0
    LEGACY = 1  # GTK2 client message walk failed
    MODERN = 2  # xsettingsd config/reload failed


@dataclass(frozen=True)
class SettingSpec:
    """Mapping of one GTK settings key onto its XSettings counterpart"""
    xsettings_name: str
    semantic_type: SemanticType
    enum_type: Optional[str] = None  # GTK enum name, only for ENUM settings


@dataclass(frozen=True)
class DaemonResult:
    """Tagged outcome of a daemon reload attempt"""
    outcome: DaemonOutcome
    name: str
    pid: Optional[int] = None
    executable: Optional[str] = None

    def isAvailable(self) -> bool:
        """Check if a daemon instance will pick up the config"""
        return self.outcome is not DaemonOutcome.UNAVAILABLE
