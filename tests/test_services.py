"""
Tests for service classes.
Tests listing management, dashboards and contact handling against the fake backend.
"""

import pytest

from rentease.schemas.common import NoticeLevel, ViewState
from rentease.schemas.contact import ContactCreate
from rentease.schemas.property import PropertyDraft, PropertyFilterCriteria
from rentease.services.contact import ContactService
from rentease.services.dashboard import AdminDashboard, OwnerDashboard
from rentease.services.property import PropertyService
from rentease.utils.exceptions import (
    ConfirmationRequiredError,
    FormValidationError,
    ListingUnavailableError,
    PropertyNotFoundError,
    RemoteServiceError
)
from tests.conftest import AccountFactory, PropertyFactory, valid_draft


@pytest.fixture
def property_service(store_client) -> PropertyService:
    return PropertyService(store_client)


class TestPropertyBrowse:
    """Test PropertyService.browse."""

    @pytest.mark.asyncio
    async def test_only_available_newest_first(self, backend, property_service, owner):
        PropertyFactory.create_property(backend, title="old", owner_id=owner.id)
        PropertyFactory.create_property(backend, title="hidden", owner_id=owner.id, is_available=False)
        PropertyFactory.create_property(backend, title="new", owner_id=owner.id)

        response = await property_service.browse(PropertyFilterCriteria())

        assert [p.title for p in response.properties] == ["new", "old"]
        assert response.total_available == 2
        assert response.state == ViewState.READY
        assert response.notice is None

    @pytest.mark.asyncio
    async def test_filters_applied(self, backend, property_service, owner):
        PropertyFactory.create_property(backend, title="flat", type="Flat", owner_id=owner.id)
        PropertyFactory.create_property(backend, title="room", type="Room", owner_id=owner.id)

        response = await property_service.browse(PropertyFilterCriteria(category="Flat"))

        assert [p.title for p in response.properties] == ["flat"]
        assert response.total_available == 2

    @pytest.mark.asyncio
    async def test_empty_result(self, backend, property_service):
        response = await property_service.browse(PropertyFilterCriteria())

        assert response.state == ViewState.READY_EMPTY
        assert response.properties == []

    @pytest.mark.asyncio
    async def test_fetch_failure_degrades_to_notice(self, backend, property_service, owner):
        PropertyFactory.create_property(backend, owner_id=owner.id)
        backend.fail("properties", "select")

        response = await property_service.browse(PropertyFilterCriteria())

        assert response.properties == []
        assert response.state == ViewState.READY
        assert response.notice.level == NoticeLevel.ERROR
        assert response.notice.message == "Failed to load properties"


class TestPropertyDetails:
    """Test PropertyService.get_details."""

    @pytest.mark.asyncio
    async def test_embeds_owner_contact(self, backend, property_service):
        owner = AccountFactory.create_account(backend, name="Olivia", email="olivia@test.com", phone="98450")
        row = PropertyFactory.create_property(backend, owner_id=owner.id)

        listing = await property_service.get_details(row["id"])

        assert listing.owner.name == "Olivia"
        assert listing.owner.email == "olivia@test.com"
        assert listing.owner.phone == "98450"

    @pytest.mark.asyncio
    async def test_missing_listing(self, property_service):
        with pytest.raises(ListingUnavailableError) as exc_info:
            await property_service.get_details("missing")

        assert exc_info.value.redirect_to == "/properties"
        assert exc_info.value.detail == "Failed to load property details"

    @pytest.mark.asyncio
    async def test_fetch_failure(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, owner_id=owner.id)
        backend.fail("properties")

        with pytest.raises(ListingUnavailableError):
            await property_service.get_details(row["id"])


class TestListingEditor:
    """Test PropertyService.save_listing and draft_for."""

    @pytest.mark.asyncio
    async def test_create_listing(self, backend, property_service, owner):
        result = await property_service.save_listing(PropertyDraft(**valid_draft()), owner)

        assert result.notice.message == "Property added successfully"
        assert result.listing.owner_id == owner.id
        assert result.listing.rent == 9000.0
        assert len(backend.tables["properties"]) == 1

    @pytest.mark.asyncio
    async def test_invalid_rent_rejected_before_remote_call(self, backend, property_service, owner):
        """Rent -5 never reaches the store."""
        with pytest.raises(FormValidationError, match="Rent must be positive"):
            await property_service.save_listing(PropertyDraft(**valid_draft(rent="-5")), owner)

        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_long_description_rejected(self, backend, property_service, owner):
        with pytest.raises(FormValidationError, match="at most 500 characters"):
            await property_service.save_listing(PropertyDraft(**valid_draft(description="d" * 600)), owner)

        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_update_listing(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, title="Old title", owner_id=owner.id)

        result = await property_service.save_listing(
            PropertyDraft(**valid_draft(title="New title")), owner, editing_id=row["id"]
        )

        assert result.notice.message == "Property updated successfully"
        assert backend.tables["properties"][0]["title"] == "New title"

    @pytest.mark.asyncio
    async def test_update_is_scoped_to_owner(self, backend, property_service, owner):
        other = AccountFactory.create_account(backend, roles=("owner",))
        row = PropertyFactory.create_property(backend, title="Theirs", owner_id=other.id)

        with pytest.raises(PropertyNotFoundError):
            await property_service.save_listing(PropertyDraft(**valid_draft()), owner, editing_id=row["id"])

        assert backend.tables["properties"][0]["title"] == "Theirs"

    @pytest.mark.asyncio
    async def test_store_failure_echoes_draft(self, backend, property_service, owner):
        backend.fail("properties", "insert")

        with pytest.raises(RemoteServiceError) as exc_info:
            await property_service.save_listing(PropertyDraft(**valid_draft(title="Keep me")), owner)

        assert exc_info.value.detail == "Failed to save property"
        assert exc_info.value.payload["draft"]["title"] == "Keep me"

    @pytest.mark.asyncio
    async def test_draft_for_own_listing(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, title="Mine", rent=7000, owner_id=owner.id)

        draft = await property_service.draft_for(row["id"], owner)

        assert draft.title == "Mine"
        assert draft.rent == "7000"

    @pytest.mark.asyncio
    async def test_draft_for_foreign_listing(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, owner_id="someone-else")

        with pytest.raises(PropertyNotFoundError):
            await property_service.draft_for(row["id"], owner)


class TestListingDeletion:
    """Test PropertyService.delete_listing."""

    @pytest.mark.asyncio
    async def test_requires_confirmation(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, owner_id=owner.id)

        with pytest.raises(ConfirmationRequiredError):
            await property_service.delete_listing(row["id"], confirmed=False, owner=owner)

        assert backend.calls == []
        assert len(backend.tables["properties"]) == 1

    @pytest.mark.asyncio
    async def test_owner_delete(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, owner_id=owner.id)

        notice = await property_service.delete_listing(row["id"], confirmed=True, owner=owner)

        assert notice.message == "Property deleted successfully"
        assert backend.tables["properties"] == []

    @pytest.mark.asyncio
    async def test_owner_cannot_delete_foreign_listing(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, owner_id="someone-else")

        with pytest.raises(PropertyNotFoundError):
            await property_service.delete_listing(row["id"], confirmed=True, owner=owner)

        assert len(backend.tables["properties"]) == 1

    @pytest.mark.asyncio
    async def test_moderation_delete_removes_only_target(self, backend, property_service):
        keep = PropertyFactory.create_property(backend, owner_id="a")
        target = PropertyFactory.create_property(backend, owner_id="b")

        await property_service.delete_listing(target["id"], confirmed=True)

        assert [row["id"] for row in backend.tables["properties"]] == [keep["id"]]

    @pytest.mark.asyncio
    async def test_store_failure(self, backend, property_service, owner):
        row = PropertyFactory.create_property(backend, owner_id=owner.id)
        backend.fail("properties", "delete")

        with pytest.raises(RemoteServiceError, match="Failed to delete property"):
            await property_service.delete_listing(row["id"], confirmed=True, owner=owner)


class TestOwnerDashboard:
    """Test OwnerDashboard aggregation."""

    @pytest.mark.asyncio
    async def test_lists_only_own_listings(self, backend, store_client, owner):
        PropertyFactory.create_property(backend, title="mine 1", owner_id=owner.id)
        PropertyFactory.create_property(backend, title="theirs", owner_id="other")
        PropertyFactory.create_property(backend, title="mine 2", owner_id=owner.id, is_available=False)

        dashboard = OwnerDashboard(store_client, owner)
        assert dashboard.state == ViewState.LOADING
        await dashboard.load()

        assert [p.title for p in dashboard.properties] == ["mine 2", "mine 1"]
        assert dashboard.state == ViewState.READY

    @pytest.mark.asyncio
    async def test_empty(self, store_client, owner):
        dashboard = await OwnerDashboard(store_client, owner).load()

        assert dashboard.state == ViewState.READY_EMPTY

    @pytest.mark.asyncio
    async def test_failure(self, backend, store_client, owner):
        backend.fail("properties")

        response = (await OwnerDashboard(store_client, owner).load()).to_response()

        assert response.state == ViewState.READY
        assert response.properties == []
        assert response.notice.message == "Failed to load properties"


class TestAdminDashboard:
    """Test AdminDashboard aggregation."""

    @pytest.mark.asyncio
    async def test_collections_and_stats(self, backend, store_client, owner, admin):
        PropertyFactory.create_property(backend, owner_id=owner.id)
        backend.tables["contacts"].append({"id": "c1", "name": "Vis", "email": "v@test.com", "message": "Hi"})

        response = (await AdminDashboard(store_client).load()).to_response()

        assert response.state == ViewState.READY
        assert response.stats.users == 2
        assert response.stats.properties == 1
        assert response.stats.contacts == 1
        assert response.properties[0].owner_name == "Olivia Owner"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failing", ["profiles", "properties", "contacts"])
    async def test_fail_together(self, backend, store_client, owner, failing):
        """Any failing collection empties the whole dashboard."""
        PropertyFactory.create_property(backend, owner_id=owner.id)
        backend.fail(failing)

        response = (await AdminDashboard(store_client).load()).to_response()

        assert response.users == []
        assert response.properties == []
        assert response.contacts == []
        assert response.stats.users == 0
        assert response.notice.message == "Failed to load dashboard data"

    @pytest.mark.asyncio
    async def test_empty(self, store_client):
        dashboard = await AdminDashboard(store_client).load()

        assert dashboard.state == ViewState.READY_EMPTY


class TestContactService:
    """Test ContactService.submit."""

    @pytest.mark.asyncio
    async def test_submit(self, backend, store_client):
        message = ContactCreate(name=" Vis ", email="v@test.com", message="Is it free?")

        notice = await ContactService(store_client).submit(message)

        assert notice.message == "Message sent successfully"
        assert backend.tables["contacts"][0]["name"] == "Vis"

    @pytest.mark.asyncio
    async def test_submit_failure(self, backend, store_client):
        backend.fail("contacts")

        with pytest.raises(RemoteServiceError, match="Failed to send message"):
            await ContactService(store_client).submit(
                ContactCreate(name="Vis", email="v@test.com", message="Hi")
            )
