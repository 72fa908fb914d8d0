"""
Atomicity Conformance Tests

INVARIANT: Calls are all-or-nothing.

    ∀ call C on state S:
        apply(C) = REJECTED ⟹ state' = S, events' = events, call_log' = call_log
        apply(C) = APPLIED  ⟹ call_log' = call_log + [C]

A failed precondition never leaves a partial update behind.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from stratos import StratosToken, TokenConfig, ExecuteResult


ADMIN = "admin"
ACCOUNTS = [ADMIN, "alice", "bob", "stratos"]
CONFIG = TokenConfig(name="Test Token", symbol="TST", decimals=0, max_supply=1000)

accounts = st.sampled_from(ACCOUNTS)
# Include invalid amounts so validation failures are exercised too.
amounts = st.one_of(
    st.integers(min_value=0, max_value=600),
    st.integers(min_value=-5, max_value=-1),
)

operations = st.one_of(
    st.tuples(st.just("mint"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("burn"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("transfer"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("approve"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("decreaseAllowance"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("transferFrom"), accounts, st.tuples(accounts, accounts, amounts)),
    st.tuples(st.just("redeem"), accounts, st.tuples(amounts)),
    st.tuples(st.just("stop"), accounts, st.just(())),
    st.tuples(st.just("resume"), accounts, st.just(())),
    st.tuples(st.just("setOwner"), accounts, st.tuples(accounts)),
    st.tuples(st.just("grantMintBurnRole"), accounts, st.tuples(accounts)),
    st.tuples(st.just("renounceRole"), accounts, st.tuples(st.just(StratosToken.MINT_BURN_ROLE), accounts)),
)


def new_token():
    return StratosToken(ADMIN, config=CONFIG, verbose=False)


class TestAtomicityProperties:
    """Property-based all-or-nothing tests."""

    @given(st.lists(operations, max_size=40))
    @settings(max_examples=50)
    def test_rejected_calls_change_nothing(self, ops):
        """
        PROPERTY: A rejected call leaves state and both audit trails unchanged.
        """
        token = new_token()
        for operation, caller, args in ops:
            snap = token.snapshot()
            events = list(token.events)
            calls = list(token.call_log)

            receipt = token.apply(caller, operation, args)

            if receipt.status == ExecuteResult.REJECTED:
                assert receipt.reason
                assert receipt.events == ()
                assert token.snapshot() == snap
                assert token.events == events
                assert token.call_log == calls
            else:
                assert len(token.call_log) == len(calls) + 1
                assert token.call_log[-1].caller == caller
                assert token.events[:len(events)] == events
                assert list(receipt.events) == token.events[len(events):]

    @given(
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=100),
    )
    @settings(max_examples=50)
    def test_transfer_from_all_or_nothing(self, balance, approved, amount):
        """
        PROPERTY: transfer_from never spends allowance without moving balance.
        """
        token = new_token()
        token.mint(ADMIN, "alice", balance)
        token.approve("alice", "bob", approved)
        receipt = token.apply("bob", "transferFrom", ("alice", "bob", amount))

        moved = token.balance_of("bob")
        spent = approved - token.allowance("alice", "bob")
        assert moved == spent
        assert moved == (amount if receipt.ok else 0)

    @given(st.integers(min_value=0, max_value=1000))
    @settings(max_examples=50)
    def test_paused_token_rejects_balance_changes(self, amount):
        """
        PROPERTY: While paused, no call changes any balance or the supply.
        """
        token = new_token()
        token.mint(ADMIN, "alice", 500)
        token.mint(ADMIN, "stratos", 100)
        token.approve("alice", "bob", 1000)
        token.stop(ADMIN)
        snap = token.snapshot()

        for operation, caller, args in [
            ("mint", ADMIN, ("alice", amount)),
            ("burn", ADMIN, ("alice", amount)),
            ("transfer", "alice", ("bob", amount)),
            ("transferFrom", "bob", ("alice", "bob", amount)),
            ("redeem", "bob", (amount,)),
        ]:
            receipt = token.apply(caller, operation, args)
            assert receipt.reason == "Pausable: paused"

        assert token.snapshot() == snap
