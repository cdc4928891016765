from bizdesk.core.context import ContextStore
from bizdesk.core.events import EventBus, BRANCH_CHANGED, TENANT_CHANGED, open_add_modal_event
from bizdesk.db.memory import LocalStorage
from bizdesk.schemas.context import BranchContext, DefaultCurrency, TenantContext


def make_context():
    events = EventBus()
    return ContextStore(LocalStorage(), events), events


def test_branch_change_emits_once_per_new_id():
    context, events = make_context()
    seen = []
    events.subscribe(BRANCH_CHANGED, seen.append)

    assert context.set_branch(BranchContext(id=1, name="Main")) is True
    assert context.set_branch(BranchContext(id=1, name="Main renamed")) is False
    assert context.set_branch(BranchContext(id=2, name="North")) is True

    assert [d["id"] for d in seen] == [1, 2]
    assert context.get_branch().name == "North"


def test_tenant_change_event():
    context, events = make_context()
    seen = []
    events.subscribe(TENANT_CHANGED, seen.append)

    context.set_tenant(TenantContext(id=7, name="Acme"))
    context.set_tenant(TenantContext(id=7, name="Acme"))

    assert len(seen) == 1
    assert context.get_tenant().id == 7


def test_failing_handler_does_not_stop_others():
    events = EventBus()
    seen = []

    def broken(detail):
        raise RuntimeError("boom")

    events.subscribe(BRANCH_CHANGED, broken)
    events.subscribe(BRANCH_CHANGED, seen.append)

    assert events.emit(BRANCH_CHANGED, {"id": 3}) == 1
    assert seen == [{"id": 3}]

    events.unsubscribe(BRANCH_CHANGED, broken)
    assert events.handler_count(BRANCH_CHANGED) == 1


def test_currency_round_trip_and_clear():
    context, _ = make_context()
    assert context.get_default_currency() is None

    context.set_default_currency(DefaultCurrency(id=1, name="Philippine Peso", symbol="₱"))
    assert context.get_default_currency().symbol == "₱"

    context.set_default_currency(None)
    assert context.get_default_currency() is None


def test_corrupt_stored_json_reads_as_missing():
    storage = LocalStorage()
    storage.set_item("branch_context", "{not json")
    context = ContextStore(storage, EventBus())
    assert context.get_branch() is None
    assert context.branch_id() is None


def test_open_add_modal_event_name():
    assert open_add_modal_event("customer") == "open-add-customer-modal"


def test_clear_forgets_tenant_and_branch_but_keeps_currency():
    context, _ = make_context()
    context.set_tenant(TenantContext(id=1, name="Acme"))
    context.set_branch(BranchContext(id=2, name="Main"))
    context.set_default_currency(DefaultCurrency(id=1, name="PHP", symbol="P"))

    context.clear()

    assert context.get_tenant() is None
    assert context.get_branch() is None
    assert context.get_default_currency().name == "PHP"
