"""Tests for the Stripe gateway adapter."""

from unittest.mock import MagicMock

import pytest
import stripe

from modules.billing.exceptions import WebhookVerificationError
from modules.billing.gateway import StripeGateway
from modules.billing.interfaces import IPaymentGateway
from modules.billing.service import BillingService

from tests.fakes import InMemoryProfileRepository


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def gateway(client):
    return StripeGateway(client)


class TestStripeGateway:
    def test_implements_interface(self, gateway):
        assert isinstance(gateway, IPaymentGateway)

    def test_create_customer(self, gateway, client):
        client.v1.customers.create.return_value = MagicMock(id="cus_1")

        assert gateway.create_customer("a@example.com", "user-1") == "cus_1"
        client.v1.customers.create.assert_called_once_with(
            params={"email": "a@example.com", "metadata": {"uid": "user-1"}}
        )

    def test_create_customer_without_email(self, gateway, client):
        client.v1.customers.create.return_value = MagicMock(id="cus_1")

        gateway.create_customer(None, "user-1")

        params = client.v1.customers.create.call_args.kwargs["params"]
        assert "email" not in params

    def test_create_checkout_session(self, gateway, client):
        client.v1.checkout.sessions.create.return_value = MagicMock(
            id="cs_1", url="https://checkout.stripe.com/c/cs_1"
        )

        session = gateway.create_checkout_session(
            customer_id="cus_1",
            price_id="price_pro",
            uid="user-1",
            success_url="https://app/app?session_id={CHECKOUT_SESSION_ID}",
            cancel_url="https://app/app",
        )

        assert session.session_id == "cs_1"
        assert session.url == "https://checkout.stripe.com/c/cs_1"
        params = client.v1.checkout.sessions.create.call_args.kwargs["params"]
        assert params["mode"] == "subscription"
        assert params["customer"] == "cus_1"
        assert params["line_items"] == [{"price": "price_pro", "quantity": 1}]
        assert params["metadata"] == {"uid": "user-1"}

    def test_create_portal_session(self, gateway, client):
        client.v1.billing_portal.sessions.create.return_value = MagicMock(
            url="https://billing.stripe.com/p/1"
        )

        assert gateway.create_portal_session("cus_1", "https://app/app") == "https://billing.stripe.com/p/1"
        client.v1.billing_portal.sessions.create.assert_called_once_with(
            params={"customer": "cus_1", "return_url": "https://app/app"}
        )

    def test_construct_event(self, gateway, client):
        event = MagicMock(id="evt_1", type="checkout.session.completed")
        event.data.object = {"id": "cs_1"}
        client.construct_event.return_value = event

        result = gateway.construct_event(b"{}", "sig", "whsec")

        assert result.id == "evt_1"
        assert result.type == "checkout.session.completed"
        assert result.data == {"id": "cs_1"}
        client.construct_event.assert_called_once_with(b"{}", "sig", "whsec")

    def test_construct_event_bad_signature(self, gateway, client):
        client.construct_event.side_effect = stripe.SignatureVerificationError("bad", "sig")

        with pytest.raises(WebhookVerificationError):
            gateway.construct_event(b"{}", "sig", "whsec")

    def test_construct_event_bad_payload(self, gateway, client):
        client.construct_event.side_effect = ValueError("Invalid JSON")

        with pytest.raises(WebhookVerificationError):
            gateway.construct_event(b"not json", "sig", "whsec")

    def test_retrieve_checkout_session_expands_products(self, gateway, client):
        gateway.retrieve_checkout_session("cs_1")

        client.v1.checkout.sessions.retrieve.assert_called_once_with(
            "cs_1", params={"expand": ["line_items.data.price.product"]}
        )


def _checkout_completed_event() -> stripe.Event:
    return stripe.Event.construct_from({
        "id": "evt_1",
        "object": "event",
        "type": "checkout.session.completed",
        "data": {
            "object": {
                "id": "cs_1",
                "object": "checkout.session",
                "customer": "cus_1",
                "metadata": {"uid": "user-1"},
            },
        },
    }, "sk_test_123")


def _expanded_session() -> stripe.checkout.Session:
    return stripe.checkout.Session.construct_from({
        "id": "cs_1",
        "object": "checkout.session",
        "subscription": "sub_1",
        "line_items": {
            "object": "list",
            "data": [{
                "id": "li_1",
                "object": "item",
                "price": {
                    "id": "price_pro",
                    "object": "price",
                    "nickname": None,
                    "product": {
                        "id": "prod_1",
                        "object": "product",
                        "name": "Studyhall Pro",
                        "metadata": {},
                    },
                },
            }],
        },
    }, "sk_test_123")


class TestStripeObjectConversion:
    """Stripe SDK objects are handed to the service as plain dicts."""

    def test_event_data_is_plain_dict(self, gateway, client):
        client.construct_event.return_value = _checkout_completed_event()

        event = gateway.construct_event(b"{}", "sig", "whsec")

        assert type(event.data) is dict
        assert event.data["metadata"] == {"uid": "user-1"}
        assert type(event.data["metadata"]) is dict

    def test_expanded_session_is_plain_dict(self, gateway, client):
        client.v1.checkout.sessions.retrieve.return_value = _expanded_session()

        session = gateway.retrieve_checkout_session("cs_1")

        assert type(session) is dict
        price = session["line_items"]["data"][0]["price"]
        assert type(price) is dict
        assert type(price["product"]) is dict
        assert price["product"]["name"] == "Studyhall Pro"

    def test_product_is_plain_dict(self, gateway, client):
        client.v1.products.retrieve.return_value = stripe.Product.construct_from(
            {"id": "prod_1", "object": "product", "name": "Plan", "metadata": {"tier": "pro"}},
            "sk_test_123",
        )

        product = gateway.retrieve_product("prod_1")

        assert type(product) is dict
        assert product["metadata"] == {"tier": "pro"}

    @pytest.mark.asyncio
    async def test_checkout_completed_webhook_end_to_end(self, gateway, client):
        """A webhook built from SDK objects updates the profile."""
        client.construct_event.return_value = _checkout_completed_event()
        client.v1.checkout.sessions.retrieve.return_value = _expanded_session()
        profiles = InMemoryProfileRepository()
        service = BillingService(gateway, profiles, app_url="https://app", webhook_secret="whsec")

        await service.handle_webhook(b"{}", "t=1,v1=sig")

        profile = profiles.profiles["user-1"]
        assert profile["subscriptionId"] == "sub_1"
        assert profile["priceId"] == "price_pro"
        assert profile["subscriptionTier"] == "pro"
        assert profile["subscriptionStatus"] == "active"
