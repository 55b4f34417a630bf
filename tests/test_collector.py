from jackpot_wall.pipeline.collector import collect_print_events, ingest_delivery, is_print_event
from jackpot_wall.schemas.chainhook import ChainhookPayload, ReceiptEvent
from jackpot_wall.services.events_store import EventStore

from tests.factories import make_delivery, make_tx, print_event

PRINT = "SmartContractEvent"


def _collect(body: dict):
    return list(collect_print_events(ChainhookPayload.model_validate(body), PRINT))


def test_collects_print_value_with_tx_hash():
    body = make_delivery(make_tx("0xabc", [print_event({"poster": "ST1", "message": "hi"})]))
    events = _collect(body)

    assert len(events) == 1
    assert events[0].id == "0xabc"
    assert events[0].type == "new-post"
    assert events[0].data == {"poster": "ST1", "message": "hi"}


def test_failed_transactions_are_skipped():
    body = make_delivery(make_tx("0xbad", [print_event({"x": 1}), print_event({"x": 2})], success=False))
    assert _collect(body) == []


def test_legacy_success_location():
    tx = {
        "transaction_identifier": {"hash": "0xold"},
        "metadata": {
            "kind": {"data": {"success": True, "result": "(ok true)"}},
            "receipt": {"events": [print_event("v")]},
        },
    }
    assert [e.id for e in _collect(make_delivery(tx))] == ["0xold"]


def test_missing_success_flag_means_skip():
    tx = {"transaction_identifier": {"hash": "0x1"}, "metadata": {"receipt": {"events": [print_event("v")]}}}
    assert _collect(make_delivery(tx)) == []


def test_event_type_must_match_exactly():
    assert is_print_event(ReceiptEvent(type=PRINT, data={"topic": "print"}), PRINT)
    assert is_print_event(ReceiptEvent(type=PRINT, data={"value": 1}), PRINT)
    assert not is_print_event(ReceiptEvent(type="SmartContract", data={}), PRINT)
    assert not is_print_event(ReceiptEvent(type="SmartContractEventX", data={}), PRINT)
    assert not is_print_event(ReceiptEvent(type="smartcontractevent", data={}), PRINT)
    assert not is_print_event(ReceiptEvent(type="STXTransferEvent", data={}), PRINT)


def test_non_print_topic_skipped():
    evt = {"type": PRINT, "data": {"topic": "transfer", "value": 1}}
    assert _collect(make_delivery(make_tx("0x1", [evt]))) == []


def test_configured_discriminator():
    evt = {"type": "smart_contract_log", "data": {"value": {"id": 7}}}
    payload = ChainhookPayload.model_validate(make_delivery(make_tx("0x7", [evt])))
    assert [e.data for e in collect_print_events(payload, "smart_contract_log")] == [{"id": 7}]
    assert list(collect_print_events(payload, PRINT)) == []


def test_receipt_optional():
    tx = {"transaction_identifier": {"hash": "0x1"}, "metadata": {"success": True}}
    assert _collect(make_delivery(tx)) == []


def test_ingest_delivery_adds_in_order():
    store = EventStore()
    body = {
        "apply": [
            {"block_identifier": {"index": 1, "hash": "0x01"},
             "transactions": [make_tx("0xa", [print_event(1), print_event(2)])]},
            {"block_identifier": {"index": 2, "hash": "0x02"},
             "transactions": [make_tx("0xb", [print_event(3)]), make_tx("0xc", [print_event(4)], success=False)]},
        ]
    }
    stored = ingest_delivery(ChainhookPayload.model_validate(body), store, PRINT)

    assert [e.data for e in stored] == [1, 2, 3]
    assert [e.data for e in store.get_all()] == [3, 2, 1]
    assert [e.id for e in store.get_all()] == ["0xb", "0xa", "0xa"]


def test_event_without_object_data():
    evt = ReceiptEvent.model_validate({"type": "STXTransferEvent", "data": None})
    assert evt.topic is None
    assert evt.value is None

    payload = ChainhookPayload.model_validate(
        make_delivery(make_tx("0x1", [{"type": "STXTransferEvent", "data": "raw"}, print_event(5)]))
    )
    assert [e.data for e in collect_print_events(payload, PRINT)] == [5]


def test_null_receipt_and_metadata():
    body = make_delivery(
        {"transaction_identifier": {"hash": "0x1"}, "metadata": {"success": True, "receipt": None}},
        {"transaction_identifier": {"hash": "0x2"}, "metadata": None},
    )
    assert _collect(body) == []
