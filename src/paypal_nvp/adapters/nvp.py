"""Name-value-pair (NVP) encoding for the PayPal gateway.

Requests are built as an ordered list of ``(key, value)`` pairs which the
transport form-encodes. Responses are flat ``key=value&key=value&`` bodies;
they are tokenized once into a dict and every lookup after that is a plain
key lookup.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import unquote_plus

from paypal_nvp.core.exceptions import ParseError
from .models import (
    ErrorEntry, LineItem, PayPalConfig, PayPalMethodType,
    PaymentRequest, PaymentResponse,
)


logger = logging.getLogger(__name__)

NVPair = Tuple[str, str]

DELIMITER = "&"
SEPARATOR = "="


class MessageConstants:
    """Field names and fixed values of the NVP API."""

    # Credentials
    USER = "USER"
    PASSWORD = "PWD"
    SIGNATURE = "SIGNATURE"
    VERSION = "VERSION"

    # Actions
    METHOD = "METHOD"
    EXPRESSCHECKOUTACTION = "SetExpressCheckout"
    PAYMENTACTION = "PAYMENTACTION"
    SALEACTION = "Sale"

    # Line items, suffixed with the item index
    NAMEREQUEST = "L_NAME"
    NUMBERREQUEST = "L_NUMBER"
    DESCRIPTIONREQUEST = "L_DESC"
    AMOUNTREQUEST = "L_AMT"
    QUANTITYREQUEST = "L_QTY"

    # Totals
    SUBTOTALREQUEST = "ITEMAMT"
    TAXREQUEST = "TAXAMT"
    SHIPPINGREQUEST = "SHIPPINGAMT"
    SHIPPINGDISCOUNTREQUEST = "SHIPDISCAMT"
    GRANDTOTALREQUEST = "AMT"

    RETURNURL = "RETURNURL"
    CANCELURL = "CANCELURL"

    # Response
    ACK = "ACK"
    TOKEN = "TOKEN"
    SUCCESS = "success"
    SUCCESSWITHWARNINGS = "successwithwarnings"
    ERRORCODE = "L_ERRORCODE"
    ERRORSHORTMESSAGE = "L_SHORTMESSAGE"
    ERRORLONGMESSAGE = "L_LONGMESSAGE"
    ERRORSEVERITYCODE = "L_SEVERITYCODE"
    ERRORPASSTHROUGHNAME = "L_ERRORPARAMID"
    ERRORPASSTHROUGHVALUE = "L_ERRORPARAMVALUE"


# ---- Request encoding ----

def _amount(value: Decimal) -> str:
    return format(value, "f")


def credential_pairs(config: PayPalConfig) -> List[NVPair]:
    return [
        (MessageConstants.USER, config.user),
        (MessageConstants.PASSWORD, config.password.get_secret_value()),
        (MessageConstants.SIGNATURE, config.signature.get_secret_value()),
        (MessageConstants.VERSION, config.lib_version),
    ]


def item_pairs(index: int, item: LineItem) -> List[NVPair]:
    return [
        (f"{MessageConstants.NAMEREQUEST}{index}", item.short_description),
        (f"{MessageConstants.NUMBERREQUEST}{index}", item.system_id),
        (f"{MessageConstants.DESCRIPTIONREQUEST}{index}", item.description),
        (f"{MessageConstants.AMOUNTREQUEST}{index}", _amount(item.unit_price)),
        (f"{MessageConstants.QUANTITYREQUEST}{index}", str(item.quantity)),
    ]


def cost_pairs(request: PaymentRequest) -> List[NVPair]:
    """Line items followed by the order totals.

    The shipping discount is sent as a negative amount. Its magnitude is
    taken first, so a discount that is already negative is not negated
    twice.
    """
    pairs: List[NVPair] = []
    for index, item in enumerate(request.items):
        pairs.extend(item_pairs(index, item))

    summary = request.summary
    pairs.extend([
        (MessageConstants.SUBTOTALREQUEST, _amount(summary.sub_total)),
        (MessageConstants.TAXREQUEST, _amount(summary.total_tax)),
        (MessageConstants.SHIPPINGREQUEST, _amount(summary.total_shipping)),
        (MessageConstants.SHIPPINGDISCOUNTREQUEST, "-" + _amount(abs(summary.shipping_discount))),
        (MessageConstants.GRANDTOTALREQUEST, _amount(summary.grand_total)),
    ])
    return pairs


def checkout_pairs(request: PaymentRequest) -> List[NVPair]:
    pairs: List[NVPair] = [(MessageConstants.PAYMENTACTION, MessageConstants.SALEACTION)]
    pairs.extend(cost_pairs(request))
    pairs.append((MessageConstants.RETURNURL, request.params.return_url))
    pairs.append((MessageConstants.CANCELURL, request.params.cancel_url))
    pairs.extend(request.params.additional_params.items())
    pairs.append((MessageConstants.METHOD, MessageConstants.EXPRESSCHECKOUTACTION))
    return pairs


def build_request_pairs(request: PaymentRequest, config: PayPalConfig) -> List[NVPair]:
    """Build the ordered pairs for one gateway call.

    Credentials always come first. Only the checkout flow adds anything
    after them; for the other method types the request carries credentials
    only.
    """
    pairs = credential_pairs(config)
    if request.method_type == PayPalMethodType.CHECKOUT:
        pairs.extend(checkout_pairs(request))
    else:
        # TODO: add the GetExpressCheckoutDetails and DoExpressCheckoutPayment flows
        logger.warning(
            f"Method type {request.method_type.value} is not implemented; "
            "sending credentials only"
        )
    return pairs


# ---- Response parsing ----

def parse_nvp(body: str) -> Dict[str, str]:
    """Tokenize an NVP response body.

    Every value must be followed by ``&``. Keys are taken as-is and the first
    occurrence of a repeated key wins. Values are form-decoded with
    ``unquote_plus``: ``%XX`` escapes are resolved and a literal ``+`` in a
    raw value comes back as a space, so a value that really contains ``+``
    must arrive as ``%2B``.
    """
    body = body.strip()
    if not body:
        return {}
    if not body.endswith(DELIMITER):
        raise ParseError("NVP response is missing the terminating delimiter", body=body)

    values: Dict[str, str] = {}
    for token in body[:-1].split(DELIMITER):
        if not token:
            continue
        key, sep, value = token.partition(SEPARATOR)
        if not sep or not key:
            raise ParseError(f"Malformed NVP token: {token!r}", body=body)
        values.setdefault(key, unquote_plus(value))
    return values


def _error_entries(values: Mapping[str, str]) -> List[ErrorEntry]:
    entries: List[ErrorEntry] = []
    index = 0
    while True:
        error_code = values.get(f"{MessageConstants.ERRORCODE}{index}")
        if error_code is None:
            return entries
        entries.append(ErrorEntry(
            error_code=error_code,
            short_message=values.get(f"{MessageConstants.ERRORSHORTMESSAGE}{index}"),
            long_message=values.get(f"{MessageConstants.ERRORLONGMESSAGE}{index}"),
            severity_code=values.get(f"{MessageConstants.ERRORSEVERITYCODE}{index}"),
        ))
        index += 1


def _pass_through_errors(values: Mapping[str, str]) -> Dict[str, Optional[str]]:
    errors: Dict[str, Optional[str]] = {}
    index = 0
    while True:
        name = values.get(f"{MessageConstants.ERRORPASSTHROUGHNAME}{index}")
        if name is None:
            return errors
        errors[name] = values.get(f"{MessageConstants.ERRORPASSTHROUGHVALUE}{index}")
        index += 1


def build_response(raw_response: str, response: PaymentResponse) -> PaymentResponse:
    """Populate ``response`` from a raw NVP body and return it.

    A non-success acknowledgement is not an exception: it is reported through
    ``successful``/``error_detected`` and the error lists.
    """
    values = parse_nvp(raw_response)
    ack = values.get(MessageConstants.ACK)
    if ack is None:
        raise ParseError("NVP response has no ACK field", body=raw_response)

    ack = ack.lower()
    if ack == MessageConstants.SUCCESS:
        response.successful = True
        response.error_detected = False
        response.response_token = values.get(MessageConstants.TOKEN)
    elif ack == MessageConstants.SUCCESSWITHWARNINGS:
        response.successful = True
        response.error_detected = True
        response.response_token = values.get(MessageConstants.TOKEN)
    else:
        response.successful = False
        response.error_detected = True

    if response.error_detected:
        response.error_responses.extend(_error_entries(values))
        response.pass_through_errors.update(_pass_through_errors(values))
    return response
