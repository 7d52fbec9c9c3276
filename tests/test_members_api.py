"""파트너 회원 API 테스트 — 회원가입, 내 정보, 배송 지역/가격 설정.

Partner member API tests — Signup, /me and delivery settings endpoints.
"""

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member, NotificationSetting
from tests.conftest import auth_header

URL = "/api/v1/app/members"


def signup_payload(**overrides) -> dict:
    payload = {
        "login_id": "newpartner",
        "password": "password123",
        "name": "강남꽃집",
        "nickname": "강남",
        "mobile": "01098765432",
        "business_profile": {
            "business_number": "9876543210",
            "corp_name": "강남플라워",
            "ceo_name": "김철수",
        },
    }
    payload.update(overrides)
    return payload


class TestSignup:
    """회원가입 테스트."""

    async def test_signup_creates_pending_member(self, client: AsyncClient, db: AsyncSession):
        res = await client.post(f"{URL}/signup", json=signup_payload())
        assert res.status_code == 201
        data = res.json()
        assert data["status"] == "PENDING"
        assert data["business_profile"]["approval_status"] == "PENDING"

        member = (await db.execute(select(Member).where(Member.login_id == "newpartner"))).scalar_one()
        assert member.password_hash != "password123"
        setting = (await db.execute(
            select(NotificationSetting).where(NotificationSetting.member_id == member.id)
        )).scalar_one()
        assert setting.notification_start_time == "09:00"

    async def test_signup_with_regions(self, client: AsyncClient, db: AsyncSession, admin_token):
        res = await client.post(f"{URL}/signup", json=signup_payload(regions=[{
            "sido": "서울",
            "sigungu": "강남구",
            "handled": True,
            "prices": [{"category_name": "축하", "price": 50}],
        }]))
        assert res.status_code == 201
        member_id = res.json()["id"]

        approve = await client.post(
            f"/api/v1/admin/members/{member_id}/approve", headers=auth_header(admin_token)
        )
        assert approve.status_code == 200

        login = await client.post("/api/v1/app/auth/login", json={
            "login_id": "newpartner", "password": "password123",
        })
        assert login.status_code == 200
        token = login.json()["access_token"]

        res = await client.get(f"{URL}/me/regions-prices", headers=auth_header(token))
        assert res.status_code == 200
        assert res.json()[0]["prices"][0]["price_in_won"] == 50000

    async def test_duplicate_login_id(self, client: AsyncClient, pending_member):
        res = await client.post(f"{URL}/signup", json=signup_payload(login_id="partner01"))
        assert res.status_code == 409

    async def test_duplicate_business_number(self, client: AsyncClient, pending_member):
        res = await client.post(f"{URL}/signup", json=signup_payload(business_profile={
            "business_number": "1234567890",
            "corp_name": "중복",
            "ceo_name": "중복",
        }))
        assert res.status_code == 409

    async def test_invalid_mobile(self, client: AsyncClient):
        res = await client.post(f"{URL}/signup", json=signup_payload(mobile="010-1234"))
        assert res.status_code == 422

    async def test_short_login_id(self, client: AsyncClient):
        res = await client.post(f"{URL}/signup", json=signup_payload(login_id="abc"))
        assert res.status_code == 422

    async def test_check_login_id(self, client: AsyncClient, pending_member):
        res = await client.get(f"{URL}/check-login-id", params={"login_id": "partner01"})
        assert res.status_code == 200
        assert res.json()["available"] is False

        res = await client.get(f"{URL}/check-login-id", params={"login_id": "freename"})
        assert res.json()["available"] is True

    async def test_check_business_number(self, client: AsyncClient, pending_member):
        res = await client.get(f"{URL}/check-business-number", params={"business_number": "1234567890"})
        assert res.status_code == 200
        assert res.json() == {"business_number": "1234567890", "available": False}

        res = await client.get(f"{URL}/check-business-number", params={"business_number": "5555555555"})
        assert res.json() == {"business_number": "5555555555", "available": True}

    async def test_check_business_number_format(self, client: AsyncClient):
        res = await client.get(f"{URL}/check-business-number", params={"business_number": "123-45-678"})
        assert res.status_code == 422


class TestMe:
    """내 정보 테스트."""

    async def test_get_me(self, client: AsyncClient, member_token, active_member):
        res = await client.get(f"{URL}/me", headers=auth_header(member_token))
        assert res.status_code == 200
        data = res.json()
        assert data["login_id"] == "active01"
        assert data["business_profile"]["business_number"] == "2223334444"


class TestRegionsPrices:
    """배송 지역/가격 API 테스트."""

    async def test_save_and_read(self, client: AsyncClient, member_token):
        res = await client.put(f"{URL}/me/regions-prices", json=[
            {
                "sido": "서울",
                "sigungu": "강남구",
                "handled": True,
                "prices": [
                    {"category_name": "축하", "price": 50, "is_available": True},
                    {"category_name": "근조", "price": 70, "is_available": False},
                ],
            },
            {"sido": "부산", "sigungu": "해운대구", "handled": False, "prices": []},
        ], headers=auth_header(member_token))
        assert res.status_code == 200
        assert res.json() == {"message": "배송설정이 저장되었습니다."}

        res = await client.get(f"{URL}/me/regions-prices", headers=auth_header(member_token))
        assert res.status_code == 200
        assert res.json() == [{
            "sido": "서울",
            "sigungu": "강남구",
            "handled": True,
            "prices": [
                {"category_name": "축하", "price": 50, "price_in_won": 50000, "is_available": True},
                {"category_name": "근조", "price": 70, "price_in_won": 70000, "is_available": False},
            ],
        }]

    async def test_negative_price_rejected(self, client: AsyncClient, member_token):
        res = await client.put(f"{URL}/me/regions-prices", json=[{
            "sido": "서울",
            "sigungu": "강남구",
            "prices": [{"category_name": "축하", "price": -1}],
        }], headers=auth_header(member_token))
        assert res.status_code == 422

    async def test_empty_list_clears(self, client: AsyncClient, member_token):
        await client.put(f"{URL}/me/regions-prices", json=[{
            "sido": "서울", "sigungu": "강남구", "prices": [{"category_name": "축하", "price": 50}],
        }], headers=auth_header(member_token))
        res = await client.put(f"{URL}/me/regions-prices", json=[], headers=auth_header(member_token))
        assert res.status_code == 200

        res = await client.get(f"{URL}/me/regions-prices", headers=auth_header(member_token))
        assert res.json() == []

    async def test_requires_token(self, client: AsyncClient):
        res = await client.get(f"{URL}/me/regions-prices")
        assert res.status_code in (401, 403)


class TestHealth:

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
