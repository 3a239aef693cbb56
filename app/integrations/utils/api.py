"""Utilities for provider API integrations."""

import json
from typing import Any, Dict, Sequence

import requests

from infrastructure.exceptions import DeliveryError, TransportError


def decode_json_body(response: requests.Response) -> Dict[str, Any]:
    """Decode a provider response, rejecting non-2xx and non-object bodies.

    Raises:
        TransportError: Non-2xx status or a body that is not a JSON object.
            The raw body is attached to the error.
    """
    body = response.text
    if not 200 <= response.status_code < 300:
        raise TransportError(f"HTTP {response.status_code}", response_body=body)
    try:
        data = json.loads(body)
    except ValueError as e:
        raise TransportError(f"invalid JSON response: {e}", response_body=body) from e
    if not isinstance(data, dict):
        raise TransportError(
            "invalid JSON response: expected an object", response_body=body
        )
    return data


def raise_for_errcode(
    data: Dict[str, Any], body: str, diagnostic_fields: Sequence[str] = ()
) -> None:
    """Raise DeliveryError when an ``{errcode, errmsg}`` envelope reports failure.

    Non-empty diagnostic fields (for example the recipients the provider
    rejected) are appended to the message instead of being dropped.

    Example:
        >>> raise_for_errcode({"errcode": 81013, "errmsg": "user invalid",
        ...                    "invaliduser": "u9"}, body, ("invaliduser",))
        Traceback (most recent call last):
        ...
        DeliveryError: user invalid (invaliduser=u9)
    """
    errcode = data.get("errcode", 0)
    if errcode in (0, None):
        return
    message = str(data.get("errmsg") or f"errcode {errcode}")
    details = [
        f"{field}={data[field]}" for field in diagnostic_fields if data.get(field)
    ]
    if details:
        message = f"{message} ({', '.join(details)})"
    raise DeliveryError(message, response_body=body)
