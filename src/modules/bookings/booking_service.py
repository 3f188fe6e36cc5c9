import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from src.common.utils.email_service import EmailAttachment, EmailDispatcher, render_email, render_template
from src.common.utils.formatters import (
    format_best_days,
    format_cleaning_type,
    format_current_cleaner,
    format_value,
)
from src.modules.bookings.schemas import UserDetails

logger = logging.getLogger(__name__)

CUSTOMER_SUBJECT = "Booking Received - Loksar Services"

Row = Tuple[str, str]
RowBuilder = Callable[[Dict[str, Any]], List[Row]]


def build_cleaning_rows(details: Dict[str, Any]) -> List[Row]:
    return [
        ("Property Type", format_value(details.get("propertyType"))),
        ("Frequency", format_value(details.get("frequency"))),
        ("Bedrooms", format_value(details.get("bedrooms"))),
        ("Bathrooms", format_value(details.get("receptionRooms"))),
        ("Service Type", format_cleaning_type(details.get("cleaningType"), details.get("cleaningTypeOther"))),
        ("Current Cleaner", format_current_cleaner(details.get("currentCleaner"))),
        ("Preferred Days", format_best_days(details.get("bestDays"))),
        ("Supplies", format_value(details.get("supplyMaterials"))),
        ("Hiring Decision", format_value(details.get("hiringDecision"))),
        ("Location", format_value(details.get("location"))),
    ]


# (label, bookingDetails key)
GARDENING_FIELDS = [
    ("Property Type", "propertyType"),
    ("Services", "services"),
    ("Frequency", "frequency"),
    ("Garden Size", "gardenSize"),
    ("Condition", "gardenCondition"),
    ("Plants", "plants"),
    ("Waste Removal", "gardenWaste"),
    ("Start Time", "workBegin"),
    ("Hiring Decision", "hiringDecision"),
    ("Location", "location"),
]


def build_gardening_rows(details: Dict[str, Any]) -> List[Row]:
    return [(label, format_value(details.get(key))) for label, key in GARDENING_FIELDS]


@dataclass(frozen=True)
class BookingKind:
    service_name: str
    accent_color: str
    admin_subject: str
    received_line: str
    follow_up_line: str
    build_rows: RowBuilder


CLEANING = BookingKind(
    service_name="Cleaning",
    accent_color="#d32f2f",
    admin_subject="New Cleaning Job Alert",
    received_line="We have received your request for a cleaning service.",
    follow_up_line="We will review your property details and provide you with a competitive quote shortly.",
    build_rows=build_cleaning_rows,
)

GARDENING = BookingKind(
    service_name="Gardening",
    accent_color="#2e7d32",
    admin_subject="New Gardening Job Alert",
    received_line="We have received your gardening service request.",
    follow_up_line="Our gardening experts will review your requirements and get back to you soon.",
    build_rows=build_gardening_rows,
)


def parse_booking_details(raw: str) -> Dict[str, Any]:
    details = json.loads(raw)
    if not isinstance(details, dict):
        raise ValueError("bookingDetails must be a JSON object")
    return details


async def process_booking(
    kind: BookingKind,
    user_details_raw: str,
    booking_details_raw: str,
    description: str,
    attachments: Sequence[EmailAttachment],
    dispatcher: EmailDispatcher,
    admin_email: str,
) -> bool:
    """
    Parse a booking submission and send the admin and customer emails.

    Attachments go on the admin copy only. Raises on malformed JSON,
    invalid contact details or a transport failure.
    """
    user = UserDetails.model_validate_json(user_details_raw)
    details = parse_booking_details(booking_details_raw)
    rows = kind.build_rows(details)

    context = {
        "service_name": kind.service_name,
        "accent_color": kind.accent_color,
        "received_line": kind.received_line,
        "follow_up_line": kind.follow_up_line,
        "name": user.name,
        "email": user.email,
        "phone": format_value(user.phone),
        "rows": rows,
        "description": description,
        "attachment_names": [attachment.filename for attachment in attachments],
    }

    admin_html = render_email(f"New {kind.service_name} Job", render_template("booking_admin.html", context))
    customer_html = render_email("Booking Received", render_template("booking_customer.html", context))

    await dispatcher.send(admin_email, kind.admin_subject, admin_html, attachments)
    await dispatcher.send(user.email, CUSTOMER_SUBJECT, customer_html)
    logger.info(
        "%s booking from %s processed with %d attachment(s)",
        kind.service_name, user.email, len(attachments),
    )
    return True
