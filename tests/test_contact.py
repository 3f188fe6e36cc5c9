"""
Endpoint tests for POST /api/contact.
"""

import aiosmtplib

from tests.conftest import ADMIN_EMAIL, html_of, sent_messages

CONTACT_FORM = {
    "name": "Ann",
    "email": "ann@x.com",
    "phone": "123",
    "subject": "Leak",
    "message": "Help",
}


class TestContactSubmission:

    def test_sends_admin_and_customer_copies(self, client, transport):
        response = client.post("/api/contact", json=CONTACT_FORM)

        assert response.status_code == 200
        assert response.json() == {"success": True}

        admin, customer = sent_messages(transport)
        assert admin["To"] == ADMIN_EMAIL
        assert admin["Subject"] == "New Contact: Leak"
        assert customer["To"] == "ann@x.com"
        assert customer["Subject"] == "We received your message - Loksar"

    def test_admin_copy_lists_contact_details(self, client, transport):
        client.post("/api/contact", json=CONTACT_FORM)

        admin_html = html_of(sent_messages(transport)[0])
        assert "<tr><td>Name</td><td>Ann</td></tr>" in admin_html
        assert 'href="mailto:ann@x.com"' in admin_html
        assert "<tr><td>Phone</td><td>123</td></tr>" in admin_html
        assert '<div class="description-box">Help</div>' in admin_html

    def test_customer_copy_echoes_subject(self, client, transport):
        client.post("/api/contact", json=CONTACT_FORM)

        customer_html = html_of(sent_messages(transport)[1])
        assert "Hello Ann," in customer_html
        assert '<strong>"Leak"</strong>' in customer_html

    def test_missing_phone_renders_placeholder(self, client, transport):
        form = {key: value for key, value in CONTACT_FORM.items() if key != "phone"}
        response = client.post("/api/contact", json=form)

        assert response.status_code == 200
        assert "<tr><td>Phone</td><td>N/A</td></tr>" in html_of(sent_messages(transport)[0])

    def test_numeric_phone_accepted(self, client, transport):
        response = client.post("/api/contact", json=dict(CONTACT_FORM, phone=7700900123))

        assert response.status_code == 200
        assert transport.await_count == 2
        assert "<tr><td>Phone</td><td>7700900123</td></tr>" in html_of(sent_messages(transport)[0])

    def test_user_input_is_escaped(self, client, transport):
        form = dict(CONTACT_FORM, message="<img src=x onerror=alert(1)>")
        client.post("/api/contact", json=form)

        admin_html = html_of(sent_messages(transport)[0])
        assert "<img src=x" not in admin_html
        assert "&lt;img src=x onerror=alert(1)&gt;" in admin_html


class TestContactFailures:

    def test_admin_send_failure_returns_500(self, client, transport):
        transport.side_effect = aiosmtplib.SMTPException("rejected")

        response = client.post("/api/contact", json=CONTACT_FORM)

        assert response.status_code == 500
        assert response.json() == {"success": False}
        # customer copy is never attempted
        assert transport.await_count == 1

    def test_customer_send_failure_returns_500(self, client, transport):
        transport.side_effect = [({}, "OK"), aiosmtplib.SMTPException("mailbox unavailable")]

        response = client.post("/api/contact", json=CONTACT_FORM)

        assert response.status_code == 500
        assert response.json() == {"success": False}
        assert transport.await_count == 2

    def test_missing_field_returns_opaque_500(self, client, transport):
        form = {key: value for key, value in CONTACT_FORM.items() if key != "subject"}

        response = client.post("/api/contact", json=form)

        assert response.status_code == 500
        assert response.json() == {"success": False}
        transport.assert_not_awaited()

    def test_invalid_email_returns_opaque_500(self, client, transport):
        response = client.post("/api/contact", json=dict(CONTACT_FORM, email="not-an-email"))

        assert response.status_code == 500
        assert response.json() == {"success": False}
        transport.assert_not_awaited()

    def test_error_detail_not_leaked(self, client, transport):
        transport.side_effect = aiosmtplib.SMTPException("535 bad credentials for bookings@loksar.com")

        response = client.post("/api/contact", json=CONTACT_FORM)

        assert "credentials" not in response.text
