from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import httpx

from .config_types import ClientConfig
from .errors import LardiClientError
from .models import CargoRequest, CargoResponse, Response, ResponseContacts, find_by_name
from .transport import Transport

PATH_CARGO = "/v2/proposals/my/add/cargo"
PATH_CURRENCIES = "/v2/references/currencies"
PATH_UNITS = "/v2/references/payment/units"
PATH_MOMENTS = "/v2/references/payment/moments"
PATH_BODY_TYPES = "/v2/references/body/types"
PATH_PACKAGE = "/v2/references/cargo/package"
PATH_PAYMENT_TYPES = "/v2/references/payment/types"
PATH_LOAD_TYPES = "/v2/references/load/types"
PATH_AREAS = "/v2/references/areas"
PATH_CONTACTS = "/v2/users/user/contacts"


@contextmanager
def _operation(name: str) -> Iterator[None]:
    try:
        yield
    except LardiClientError as exc:
        exc.operation = name
        raise


class LardiClient:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self.config = cfg
        self._t = Transport(cfg, http_transport=http_transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "LardiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get(self, path: str, *, timeout: float | None = None) -> Any:
        return self._t.request("GET", path, timeout=timeout)

    def _post(self, path: str, body: Any, *, timeout: float | None = None) -> Any:
        return self._t.request("POST", path, json_body=body, timeout=timeout)

    def _references(self, path: str, operation: str, timeout: float | None) -> list[Response]:
        with _operation(operation):
            return Response.list_from_payload(self._get(path, timeout=timeout))

    # --- proposals ---
    def create_cargo(self, req: CargoRequest, *, timeout: float | None = None) -> CargoResponse:
        req.validate()
        with _operation("create cargo request"):
            data = self._post(PATH_CARGO, req.to_payload(), timeout=timeout)
            return CargoResponse.from_payload(data)

    # --- users ---
    def get_contacts(self, *, timeout: float | None = None) -> list[ResponseContacts]:
        with _operation("get contacts"):
            return ResponseContacts.list_from_payload(self._get(PATH_CONTACTS, timeout=timeout))

    # --- references ---
    def get_areas(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_AREAS, "get areas", timeout)

    def find_area(self, name: str, *, timeout: float | None = None) -> Response | None:
        """Return the first area named exactly ``name`` or None."""
        return find_by_name(self.get_areas(timeout=timeout), name)

    def get_load_types(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_LOAD_TYPES, "get load types", timeout)

    def get_payment_types(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_PAYMENT_TYPES, "get payment types", timeout)

    def get_package_types(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_PACKAGE, "get package types", timeout)

    def get_body_types(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_BODY_TYPES, "get body types", timeout)

    def find_body_type(self, name: str, *, timeout: float | None = None) -> Response | None:
        return find_by_name(self.get_body_types(timeout=timeout), name)

    def get_payment_moments(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_MOMENTS, "get payment moments", timeout)

    def get_currencies(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_CURRENCIES, "get currencies", timeout)

    def find_currency(self, name: str, *, timeout: float | None = None) -> Response | None:
        return find_by_name(self.get_currencies(timeout=timeout), name)

    def get_units(self, *, timeout: float | None = None) -> list[Response]:
        return self._references(PATH_UNITS, "get units", timeout)
