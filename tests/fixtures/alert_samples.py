#!/usr/bin/env python3
"""
Synthetic Bank Alert Samples

Snippets modelled on real HDFC alert templates. Account numbers, VPAs,
names and reference numbers are all synthetic.
"""

from typing import Any

UPI_DEBIT_SNIPPET = (
    "Rs.500.00 has been debited from account 1234 to VPA merchant@upi Some Merchant Store "
    "on 15-07-25. Your transaction reference number is 987654"
)

UPI_CREDIT_SNIPPET = (
    "Rs.2,150.00 has been credited to your account 5678 from VPA payer@okbank Test Payer "
    "on 03-08-25. Your UPI transaction reference number is 112233445566"
)

CARD_DEBIT_SNIPPET = (
    "Rs.899.00 has been debited from your account 4321 for card transaction at TEST ONLINE RETAILER "
    "on 20-07-25. Your reference number is 556677"
)

OTP_SNIPPET = "OTP is 482910 for your transaction"

UNPARSEABLE_SNIPPET = "Rs. 1200 credited to your account"

# Generic-only: amount comes before "debited", so no specific template fires
HDFC_COMPOSITE_SNIPPET = (
    "Dear Customer, INR 75.00 debited from account 9876 to VPA shop@okaxis Corner Shop "
    "on 11-07-25. UPI transaction reference number is 445566"
)

GENERIC_DEBIT_SNIPPET = "INR 1,250.50 spent on your a/c no. XX4455 at AMAZON RETAIL on 05/07/2025. Ref no: 77889900"


def make_message(message_id: str, snippet: str | None, internal_date: str | None = "1752537600000") -> dict[str, Any]:
    """Build a provider-shaped message dict."""
    message: dict[str, Any] = {"id": message_id, "threadId": f"thread-{message_id}"}
    if snippet is not None:
        message["snippet"] = snippet
    if internal_date is not None:
        message["internalDate"] = internal_date
    return message


def sample_inbox() -> list[dict[str, Any]]:
    """A small mixed inbox: three templates, one OTP, one unparseable alert."""
    return [
        make_message("msg-upi-debit", UPI_DEBIT_SNIPPET),
        make_message("msg-otp", OTP_SNIPPET),
        make_message("msg-upi-credit", UPI_CREDIT_SNIPPET),
        make_message("msg-unparsed", UNPARSEABLE_SNIPPET),
        make_message("msg-card", CARD_DEBIT_SNIPPET),
    ]
