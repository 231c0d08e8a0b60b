"""Application tests for listing publication and catalog reads."""

import pytest
from marketplace.catalog.listing import Category, Listing
from marketplace.catalog.publishing import PublishListing
from marketplace.catalog.queries import get_listing, list_all, list_by_seller
from marketplace.catalog.seller_index import SellerIndex, seller_index_for
from marketplace.shared.errors import IndexOverflow, ListingNotFound, NotRegistered, NotSeller
from marketplace.shared.index import read_ids
from marketplace.shared.sequence import LISTINGS, U64_MAX, RecordSequence, sequence_for
from marketplace.user.profile import Role
from marketplace.user.registration import RegisterUser
from protean import current_domain


def _register(party_id, role=Role.BOTH):
    current_domain.process(
        RegisterUser(caller_id=party_id, username=party_id, role=role.value),
        asynchronous=False,
    )


def _publish(party_id, name="Shirt", price=12000, stock=20, category=Category.APPAREL):
    command = PublishListing(
        caller_id=party_id,
        name=name,
        description=f"{name} description",
        price=price,
        category=category.value,
        stock=stock,
    )
    return current_domain.process(command, asynchronous=False)


class TestPublishListing:
    def test_first_listing_gets_id_zero(self):
        _register("alice", Role.SELLER)
        listing = _publish("alice")
        assert listing.listing_id == 0
        assert listing.seller_id == "alice"
        assert listing.stock == 20

    def test_id_equals_catalog_length_before_publish(self):
        _register("alice", Role.SELLER)
        _register("carol", Role.BOTH)
        for expected, seller in enumerate(["alice", "carol", "alice", "carol", "carol"]):
            assert (sequence_for(LISTINGS).length or 0) == expected
            listing = _publish(seller, name=f"Item {expected}")
            assert listing.listing_id == expected
        assert sequence_for(LISTINGS).length == 5

    def test_listing_is_persisted_under_its_position(self):
        _register("alice", Role.SELLER)
        _publish("alice", name="Lamp", category=Category.FURNITURE)
        _publish("alice", name="Drill", category=Category.TOOLS)

        stored = current_domain.repository_for(Listing).get("1")
        assert stored.name == "Drill"
        assert stored.category == Category.TOOLS.value

    def test_buyer_cannot_publish(self):
        _register("bob", Role.BUYER)
        with pytest.raises(NotSeller):
            _publish("bob")
        assert (sequence_for(LISTINGS).length or 0) == 0
        assert read_ids(seller_index_for("bob")) == []

    def test_unregistered_cannot_publish(self):
        with pytest.raises(NotRegistered):
            _publish("stranger")
        assert (sequence_for(LISTINGS).length or 0) == 0

    def test_both_role_can_publish(self):
        _register("dana", Role.BOTH)
        assert _publish("dana").seller_id == "dana"

    def test_catalog_overflow_writes_nothing(self):
        _register("alice", Role.SELLER)
        current_domain.repository_for(RecordSequence).add(RecordSequence(name=LISTINGS, length=U64_MAX))

        with pytest.raises(IndexOverflow):
            _publish("alice")

        assert sequence_for(LISTINGS).length == U64_MAX
        assert read_ids(seller_index_for("alice")) == []


class TestListBySeller:
    def test_returns_own_listings_in_creation_order(self):
        _register("alice", Role.SELLER)
        _register("carol", Role.SELLER)
        _publish("alice", name="A1")
        _publish("carol", name="C1")
        _publish("alice", name="A2")
        _publish("carol", name="C2")
        _publish("alice", name="A3")

        alice_listings = list_by_seller("alice")
        assert [listing.name for listing in alice_listings] == ["A1", "A2", "A3"]
        assert [listing.listing_id for listing in alice_listings] == [0, 2, 4]
        assert all(listing.seller_id == "alice" for listing in alice_listings)

        assert [listing.name for listing in list_by_seller("carol")] == ["C1", "C2"]

    def test_seller_without_listings_gets_empty_list(self):
        _register("alice", Role.SELLER)
        assert list_by_seller("alice") == []

    def test_buyer_cannot_list_own_listings(self):
        _register("bob", Role.BUYER)
        with pytest.raises(NotSeller):
            list_by_seller("bob")

    def test_unregistered_rejected(self):
        with pytest.raises(NotRegistered):
            list_by_seller("stranger")

    def test_dangling_index_entries_are_skipped(self):
        _register("alice", Role.SELLER)
        _publish("alice", name="Real")
        index = seller_index_for("alice")
        index.entries = "[0, 7]"
        current_domain.repository_for(SellerIndex).add(index)

        listings = list_by_seller("alice")
        assert [listing.name for listing in listings] == ["Real"]


class TestListAll:
    def test_any_registered_party_reads_everything(self):
        _register("alice", Role.SELLER)
        _register("bob", Role.BUYER)
        _publish("alice", name="A1")
        _publish("alice", name="A2")

        assert [listing.listing_id for listing in list_all("bob")] == [0, 1]
        assert [listing.name for listing in list_all("alice")] == ["A1", "A2"]

    def test_empty_catalog(self):
        _register("bob", Role.BUYER)
        assert list_all("bob") == []

    def test_unregistered_rejected(self):
        with pytest.raises(NotRegistered):
            list_all("stranger")


class TestGetListing:
    def test_point_lookup(self):
        _register("alice", Role.SELLER)
        _register("bob", Role.BUYER)
        _publish("alice", name="A1")
        _publish("alice", name="A2")
        assert get_listing("bob", 1).name == "A2"

    @pytest.mark.parametrize("listing_id", [-1, 1, 99])
    def test_out_of_bounds_not_found(self, listing_id):
        _register("alice", Role.SELLER)
        _publish("alice")
        with pytest.raises(ListingNotFound):
            get_listing("alice", listing_id)
