import httpx
import pytest

from gym_admin.models.schemas import Subscription
from gym_admin.services.access_service import AccessService
from gym_admin.services.member_service import MemberService, MembershipCatalogService
from gym_admin.services.payment_service import PaymentService
from gym_admin.utils.exceptions import InputValidationError, RequestError

from conftest import PLAN, subscription_payload

pytestmark = pytest.mark.anyio

PAYMENT = {
    "id": 501,
    "userId": 7,
    "userMembershipId": 11,
    "amount": 450.0,
    "method": "CARD",
    "reference": None,
    "paymentDate": "2026-10-19T09:00:00",
    "createdAt": "2026-10-19T09:00:01",
}


async def test_record_payment_posts_cleaned_request(fake_backend):
    fake_backend.add("POST", "/api/payments", body=PAYMENT)
    service = PaymentService(fake_backend.client())

    payment = await service.record(7, "450", method="card", reference="   ", subscription_id=11)

    assert payment.id == 501
    assert fake_backend.calls("POST", "/api/payments") == [
        {"userId": 7, "userMembershipId": 11, "amount": 450.0, "method": "CARD", "reference": None}
    ]


@pytest.mark.parametrize("amount", [0, -10, "abc", None, float("nan")])
async def test_invalid_amount_sends_nothing(fake_backend, amount):
    service = PaymentService(fake_backend.client())

    with pytest.raises(InputValidationError):
        await service.record(7, amount)
    assert fake_backend.requests == []


async def test_invalid_method_sends_nothing(fake_backend):
    service = PaymentService(fake_backend.client())

    with pytest.raises(InputValidationError):
        await service.record(7, 100, method="BITCOIN")
    assert fake_backend.requests == []


async def test_list_payments(fake_backend):
    fake_backend.add("GET", "/api/payments/user/7", body=[PAYMENT, {**PAYMENT, "id": 502, "method": "CASH"}])
    service = PaymentService(fake_backend.client())

    payments = await service.list_for_member(7)
    assert [p.id for p in payments] == [501, 502]


async def test_suggested_amount_uses_current_plan_price():
    subscription = Subscription.model_validate(subscription_payload())
    assert PaymentService.suggested_amount(subscription) == 450.0
    assert PaymentService.suggested_amount(None) is None


async def test_register_access(fake_backend):
    fake_backend.add(
        "POST", "/api/access",
        body={"id": 9, "accessTime": "2026-10-19T07:15:00", "type": "ENTRY", "source": "front-desk"},
    )
    service = AccessService(fake_backend.client())

    event = await service.register(7, "entry", source="front-desk")

    assert event.type == "ENTRY"
    assert fake_backend.calls("POST", "/api/access") == [
        {"userId": 7, "type": "ENTRY", "source": "front-desk"}
    ]


async def test_register_access_rejects_unknown_type(fake_backend):
    service = AccessService(fake_backend.client())

    with pytest.raises(InputValidationError):
        await service.register(7, "DENIED")
    assert fake_backend.requests == []


async def test_list_access_events(fake_backend):
    fake_backend.add(
        "GET", "/api/access/user/7",
        body=[{"id": 9, "accessTime": "2026-10-19T07:15:00", "type": "ENTRY"}],
    )
    service = AccessService(fake_backend.client())

    events = await service.list_for_member(7)
    assert events[0].source is None


async def test_members_and_catalog(fake_backend):
    fake_backend.add("GET", "/api/users", body=[{"id": 7, "name": "Ana Torres", "email": "ana@example.com"}])
    fake_backend.add("POST", "/api/auth/register", body={"id": 8, "name": "Luis", "email": None})
    fake_backend.add("GET", "/api/memberships", body=[PLAN])
    fake_backend.add("POST", "/api/memberships", body={**PLAN, "id": 4, "name": "Weekly"})
    backend = fake_backend.client()

    members = MemberService(backend)
    catalog = MembershipCatalogService(backend)

    assert [m.name for m in await members.list_members()] == ["Ana Torres"]
    assert (await members.create_member(" Luis ", email="", phone=None)).id == 8
    assert fake_backend.calls("POST", "/api/auth/register") == [
        {"name": "Luis", "email": None, "phone": None, "password": None}
    ]
    assert (await catalog.list_plans())[0].durationDays == 30
    assert (await catalog.create_plan("Weekly", 7, 120.0)).id == 4


@pytest.mark.parametrize("name,days,price", [("", 30, 10), ("Monthly", 0, 10), ("Monthly", 30, -1)])
async def test_invalid_plan_sends_nothing(fake_backend, name, days, price):
    catalog = MembershipCatalogService(fake_backend.client())

    with pytest.raises(InputValidationError):
        await catalog.create_plan(name, days, price)
    assert fake_backend.requests == []


async def test_timeout_is_a_request_error(fake_backend):
    fake_backend.add("GET", "/api/payments/user/7", body=httpx.ReadTimeout("too slow"))
    service = PaymentService(fake_backend.client())

    with pytest.raises(RequestError) as excinfo:
        await service.list_for_member(7)
    assert excinfo.value.status_code is None
    assert "timed out" in str(excinfo.value)


async def test_network_failure_is_a_request_error(fake_backend):
    fake_backend.add("GET", "/api/payments/user/7", body=httpx.ConnectError("refused"))
    service = PaymentService(fake_backend.client())

    with pytest.raises(RequestError):
        await service.list_for_member(7)
