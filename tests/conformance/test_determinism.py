"""
Determinism Conformance Tests

INVARIANT: Identical call sequences produce identical results.

    ∀ call sequence Cs:
        run(Cs) on token A ≡ run(Cs) on token B
        replay(token) ≡ token                      (state, events, call log)
        replay(token, upto=k) ≡ token after k committed calls
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from stratos import StratosToken, TokenConfig


ADMIN = "admin"
ACCOUNTS = [ADMIN, "alice", "bob", "stratos"]
CONFIG = TokenConfig(name="Test Token", symbol="TST", decimals=0, max_supply=1000)

accounts = st.sampled_from(ACCOUNTS)
amounts = st.integers(min_value=0, max_value=400)

operations = st.one_of(
    st.tuples(st.just("mint"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("burn"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("transfer"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("approve"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("increaseAllowance"), accounts, st.tuples(accounts, amounts)),
    st.tuples(st.just("transferFrom"), accounts, st.tuples(accounts, accounts, amounts)),
    st.tuples(st.just("redeem"), accounts, st.tuples(amounts)),
    st.tuples(st.just("stop"), accounts, st.just(())),
    st.tuples(st.just("resume"), accounts, st.just(())),
    st.tuples(st.just("setOwner"), accounts, st.tuples(accounts)),
    st.tuples(st.just("setAuthority"), accounts, st.tuples(accounts)),
    st.tuples(st.just("revokeMintBurnRole"), accounts, st.tuples(accounts)),
)


def new_token():
    return StratosToken(ADMIN, config=CONFIG, verbose=False)


def run(ops):
    token = new_token()
    receipts = [token.apply(caller, operation, args) for operation, caller, args in ops]
    return token, receipts


class TestDeterminismProperties:
    """Property-based reproducibility tests."""

    @given(st.lists(operations, max_size=40))
    @settings(max_examples=50)
    def test_same_calls_same_result(self, ops):
        """
        PROPERTY: Two tokens fed the same calls end in the same state.
        """
        first, first_receipts = run(ops)
        second, second_receipts = run(ops)

        assert first.snapshot() == second.snapshot()
        assert first.events == second.events
        assert first.call_log == second.call_log
        assert first_receipts == second_receipts

    @given(st.lists(operations, max_size=40))
    @settings(max_examples=50)
    def test_replay_reproduces_token(self, ops):
        """
        PROPERTY: Replaying the call log rebuilds the exact token.
        """
        token, _ = run(ops)
        replayed = token.replay()

        assert replayed.snapshot() == token.snapshot()
        assert replayed.events == token.events
        assert replayed.call_log == token.call_log

    @given(st.lists(operations, max_size=30), st.data())
    @settings(max_examples=50)
    def test_replay_prefix_matches_history(self, ops, data):
        """
        PROPERTY: replay(upto=k) equals the token as it stood after k commits.
        """
        token = new_token()
        history = [token.snapshot()]
        for operation, caller, args in ops:
            if token.apply(caller, operation, args).ok:
                history.append(token.snapshot())

        k = data.draw(st.integers(min_value=0, max_value=len(token.call_log)))
        assert token.replay(upto=k).snapshot() == history[k]

    @given(st.lists(operations, max_size=20), st.lists(operations, max_size=20))
    @settings(max_examples=50)
    def test_clone_diverges_independently(self, prefix, suffix):
        """
        PROPERTY: A clone continues exactly like its source token would.
        """
        token, _ = run(prefix)
        cloned = token.clone()
        before = token.snapshot()

        for operation, caller, args in suffix:
            cloned.apply(caller, operation, args)

        assert token.snapshot() == before
        expected, _ = run(prefix + suffix)
        assert cloned.snapshot() == expected.snapshot()
        assert cloned.events == expected.events
