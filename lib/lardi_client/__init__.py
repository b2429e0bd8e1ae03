from .client import LardiClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    DecodeError,
    LardiClientError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .models import CargoPack, CargoRequest, CargoResponse, LoadParams, PaymentForm, Response, ResponseContacts

__all__ = [
    "LardiClient",
    "ClientConfig",
    "ApiError",
    "AuthError",
    "DecodeError",
    "LardiClientError",
    "SerializationError",
    "TransportError",
    "ValidationError",
    "CargoPack",
    "CargoRequest",
    "CargoResponse",
    "LoadParams",
    "PaymentForm",
    "Response",
    "ResponseContacts",
]
