import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.common.config import get_settings
from src.common.utils.email_service import EmailAttachment, EmailDispatcher
from src.modules.bookings import booking_service
from src.modules.contact import contact_service

async def send_samples():
    settings = get_settings()
    dispatcher = EmailDispatcher(settings)
    recipient = settings.ADMIN_EMAIL
    print("Testing Email Service...")

    print(f"\n1. Sending contact form emails to {recipient}...")
    await contact_service.process_contact_form(
        {
            "name": "Test Customer",
            "email": recipient,
            "phone": "07700 900123",
            "subject": "Test inquiry",
            "message": "This is a test message from send_test_emails.py",
        },
        dispatcher,
        settings.ADMIN_EMAIL,
    )

    print(f"\n2. Sending cleaning booking emails to {recipient}...")
    await booking_service.process_booking(
        booking_service.CLEANING,
        f'{{"name": "Test Customer", "email": "{recipient}", "phone": "07700 900123"}}',
        '{"propertyType": "House", "bedrooms": 3, "bestDays": {"bestDays": ["Mon", "Wed"], "other": "evenings"}}',
        "Test booking, please ignore.",
        [EmailAttachment("notes.txt", b"Sample attachment", "text/plain")],
        dispatcher,
        settings.ADMIN_EMAIL,
    )

    print("\nDone!")

if __name__ == "__main__":
    # Use real settings from .env
    asyncio.run(send_samples())
