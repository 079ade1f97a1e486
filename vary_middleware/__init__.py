from vary_middleware.contracts.error_contract import VaryErrorCode
from vary_middleware.contracts.vary_policy import VaryConfig
from vary_middleware.errors import VaryConfigError
from vary_middleware.middleware.vary import VaryMiddleware, build_vary_value

__all__ = [
    "VaryConfig",
    "VaryConfigError",
    "VaryErrorCode",
    "VaryMiddleware",
    "build_vary_value",
]
