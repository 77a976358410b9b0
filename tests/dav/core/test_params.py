"""Tests for params records and value entities."""

from __future__ import annotations

import pydantic
import pytest

from dav.core.enums import BlockchainType, ContractTypes, PriceType
from dav.core.models import Bid, Message
from dav.core.params import (
    BidParams,
    MessageParams,
    NeedParams,
    Price,
    generate_id,
    params_class,
)
from dav.infra.config import DavConfig


class TestGenerateId:
    def test_generates_unique_ids(self):
        ids = {generate_id("bid") for _ in range(100)}
        assert len(ids) == 100

    def test_prefix_applied(self):
        assert generate_id("need").startswith("need_")


class TestParams:
    def test_need_params_default_id(self):
        assert NeedParams().id.startswith("need_")
        assert NeedParams().id != NeedParams().id

    def test_params_are_frozen(self):
        params = BidParams(id="b1", price=Price(value="3"))
        with pytest.raises(pydantic.ValidationError):
            params.id = "other"

    def test_price_defaults_to_flat(self):
        assert Price(value="3").type == PriceType.FLAT

    def test_bid_params_require_price(self):
        with pytest.raises(pydantic.ValidationError):
            BidParams(id="b1")

    def test_registry(self):
        assert params_class("need") is NeedParams
        assert params_class("bid") is BidParams
        assert params_class("message") is MessageParams
        assert params_class("nope") is None


class TestEnums:
    def test_values(self):
        assert PriceType.FLAT.value == "flat"
        assert BlockchainType.TEST.value == "ropsten"
        assert ContractTypes.DAV_TOKEN.value == "DAVToken"


class TestValueEntities:
    def test_bids_equal_by_value(self):
        config = DavConfig()
        a = Bid("t1", BidParams(id="b1", price=Price(value="3")), config)
        b = Bid("t1", BidParams(id="b1", price=Price(value="3")), DavConfig())
        assert a == b

    def test_bids_differ_by_topic(self):
        config = DavConfig()
        params = BidParams(id="b1", price=Price(value="3"))
        assert Bid("t1", params, config) != Bid("t2", params, config)

    def test_messages_differ_by_config(self):
        params = MessageParams(sender_id="s")
        a = Message("t1", params, DavConfig())
        b = Message("t1", params, DavConfig(topic_prefix="other:"))
        assert a != b

    def test_message_sender_id(self):
        message = Message("t1", MessageParams(sender_id="drone"), DavConfig())
        assert message.sender_id == "drone"

    def test_bids_are_hashable(self):
        bid = Bid("t1", BidParams(id="b1", price=Price(value="3")), DavConfig())
        assert hash(bid) == hash(Bid("t1", BidParams(id="b1", price=Price(value="3")), DavConfig()))

    def test_messages_are_equality_only(self):
        message = Message("t1", MessageParams(sender_id="s"), DavConfig())
        with pytest.raises(TypeError):
            hash(message)
        assert message == Message("t1", MessageParams(sender_id="s"), DavConfig())

    def test_entities_are_immutable(self):
        bid = Bid("t1", BidParams(id="b1", price=Price(value="3")), DavConfig())
        with pytest.raises(AttributeError):
            bid.topic_id = "t2"
