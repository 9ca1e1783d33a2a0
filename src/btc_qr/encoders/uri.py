"""BIP21 payment URI assembly."""

from __future__ import annotations

from urllib.parse import quote

# Characters left unescaped by JavaScript's encodeURIComponent.
_UNRESERVED = "-_.!~*'()"


def _encode_component(value: str) -> str:
    return quote(value, safe=_UNRESERVED)


def build_payment_uri(
    address: str,
    amount: str | None = None,
    label: str | None = None,
    message: str | None = None,
) -> str:
    """Build ``bitcoin:<address>[?amount=..&label=..&message=..]``.

    Parameters appear in the fixed order amount, label, message. Empty or
    missing values are omitted. *amount* is inserted as given; *label* and
    *message* are percent-encoded.
    """
    uri = f"bitcoin:{address.strip()}"
    params: list[str] = []
    if amount:
        params.append(f"amount={amount.strip()}")
    if label:
        params.append(f"label={_encode_component(label)}")
    if message:
        params.append(f"message={_encode_component(message)}")
    if params:
        uri += "?" + "&".join(params)
    return uri


class PaymentURIBuilder:
    """Callable wrapper around :func:`build_payment_uri`."""

    scheme = "bitcoin"

    def build(
        self,
        address: str,
        amount: str | None = None,
        label: str | None = None,
        message: str | None = None,
    ) -> str:
        return build_payment_uri(address, amount, label, message)
