from perfscore.config.settings import ApiConfig, OperationMode, ScoringConfig, Settings

__all__ = [
    "ApiConfig",
    "OperationMode",
    "ScoringConfig",
    "Settings",
]
