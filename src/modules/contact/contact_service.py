import logging

from src.common.utils.email_service import EmailDispatcher, render_email, render_template
from src.common.utils.formatters import format_value

logger = logging.getLogger(__name__)

CUSTOMER_SUBJECT = "We received your message - Loksar"

async def process_contact_form(form_data: dict, dispatcher: EmailDispatcher, admin_email: str) -> bool:
    """
    Compose and send the admin and customer emails for a contact form submission.

    Args:
        form_data (dict): Contains 'name', 'email', 'phone', 'subject' and 'message'.
        dispatcher (EmailDispatcher): Mail transport wrapper.
        admin_email (str): Address that receives the admin copy.

    Returns:
        bool: True once both emails have been sent.
    """
    context = {
        "name": form_data["name"],
        "email": form_data["email"],
        "phone": format_value(form_data.get("phone")),
        "subject": form_data["subject"],
        "message": form_data["message"],
    }

    admin_html = render_email("New Contact", render_template("contact_admin.html", context))
    customer_html = render_email("Thank You", render_template("contact_customer.html", context))

    # Admin copy first; a failure on either send fails the whole submission.
    await dispatcher.send(admin_email, f"New Contact: {form_data['subject']}", admin_html)
    await dispatcher.send(form_data["email"], CUSTOMER_SUBJECT, customer_html)
    logger.info("Contact form from %s processed", form_data["email"])
    return True
